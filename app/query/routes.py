# app/query/routes.py
from fastapi import APIRouter, Depends
from app.query.repository import QueryRepository, get_query_repository
from app.query.schemas import QueryCreate, QueryOut, QueryStatusUpdate
from app.query import services as query_service

router = APIRouter(prefix="/api/query", tags=["Queries"])


@router.post("/new", response_model=QueryOut)
def create(query: QueryCreate, repo: QueryRepository = Depends(get_query_repository)):
    return query_service.create_query(repo, query)


@router.put(
    "/update/{query_id}",
    response_model=QueryOut,
    responses={404: {"description": "Query not found"}},
)
def update_status(
    query_id: str,
    payload: QueryStatusUpdate,
    repo: QueryRepository = Depends(get_query_repository),
):
    return query_service.update_query_status(repo, query_id, payload)
