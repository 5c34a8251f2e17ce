# app/query/services.py
import logging

from app.core.errors import QueryNotFoundError
from app.query.repository import QueryRepository
from app.query.schemas import QueryCreate, QueryOut, QueryStatusUpdate

logger = logging.getLogger(__name__)

MAX_QUERY_ID = 2**63 - 1


def parse_query_id(raw: str) -> int | None:
    """Return the id as an int, or None when it cannot name a stored query."""
    try:
        query_id = int(raw)
    except ValueError:
        return None
    if not 1 <= query_id <= MAX_QUERY_ID:
        return None
    return query_id


def create_query(repo: QueryRepository, payload: QueryCreate) -> QueryOut:
    record = repo.create(issue=payload.issue, order_id=payload.order_id)
    logger.info("Created query %s for order %s", record.id, record.order_id)
    return QueryOut.model_validate(record)


def update_query_status(repo: QueryRepository, raw_id: str, payload: QueryStatusUpdate) -> QueryOut:
    query_id = parse_query_id(raw_id)
    record = repo.update_status(query_id, payload.status) if query_id is not None else None
    if record is None:
        raise QueryNotFoundError(raw_id)
    logger.info("Query %s status set to %r", record.id, record.status)
    return QueryOut.model_validate(record)
