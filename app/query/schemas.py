# app/query/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class QueryBase(BaseModel):
    issue: str = Field(..., min_length=1)
    order_id: str = Field(..., min_length=1, alias="orderId")

    model_config = ConfigDict(populate_by_name=True)


class QueryCreate(QueryBase):
    pass


class QueryStatusUpdate(BaseModel):
    # Any string is accepted
    status: str


class QueryOut(QueryBase):
    id: int
    status: str

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
