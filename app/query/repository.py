# app/query/repository.py
import itertools
import threading
from dataclasses import dataclass
from typing import Protocol

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.errors import PersistenceError
from app.query.models import DEFAULT_STATUS, SupportQuery


@dataclass
class QueryRecord:
    id: int
    issue: str
    order_id: str
    status: str = DEFAULT_STATUS


class QueryRepository(Protocol):
    def create(self, issue: str, order_id: str) -> QueryRecord | SupportQuery: ...

    def get(self, query_id: int) -> QueryRecord | SupportQuery | None: ...

    def update_status(self, query_id: int, status: str) -> QueryRecord | SupportQuery | None: ...


class SqlQueryRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, issue: str, order_id: str) -> SupportQuery:
        db_query = SupportQuery(issue=issue, order_id=order_id, status=DEFAULT_STATUS)
        try:
            self.db.add(db_query)
            self.db.commit()
            self.db.refresh(db_query)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(str(e)) from e
        return db_query

    def get(self, query_id: int) -> SupportQuery | None:
        try:
            return self.db.query(SupportQuery).filter(SupportQuery.id == query_id).first()
        except OverflowError:
            # Wider than the INTEGER column, so no row can match
            return None
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e

    def update_status(self, query_id: int, status: str) -> SupportQuery | None:
        db_query = self.get(query_id)
        if not db_query:
            return None
        try:
            db_query.status = status
            self.db.commit()
            self.db.refresh(db_query)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(str(e)) from e
        return db_query


class InMemoryQueryRepository:
    """Process-local store keyed by id. Only valid for a single process."""

    def __init__(self):
        self._items: dict[int, QueryRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def create(self, issue: str, order_id: str) -> QueryRecord:
        with self._lock:
            record = QueryRecord(id=next(self._ids), issue=issue, order_id=order_id)
            self._items[record.id] = record
        return record

    def get(self, query_id: int) -> QueryRecord | None:
        return self._items.get(query_id)

    def update_status(self, query_id: int, status: str) -> QueryRecord | None:
        with self._lock:
            record = self._items.get(query_id)
            if record is None:
                return None
            record.status = status
        return record


_memory_repository = InMemoryQueryRepository()


def get_query_repository(db: Session = Depends(get_db)) -> QueryRepository:
    if get_settings().QUERY_BACKEND == "memory":
        return _memory_repository
    return SqlQueryRepository(db)
