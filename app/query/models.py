# app/query/models.py
from sqlalchemy import Column, Integer, String
from app.core.database import Base

DEFAULT_STATUS = "open"


class SupportQuery(Base):
    __tablename__ = "queries"

    id = Column(Integer, primary_key=True, index=True)
    issue = Column(String, nullable=False)
    order_id = Column(String, index=True, nullable=False)
    status = Column(String, default=DEFAULT_STATUS, nullable=False)
