"""
Storage accessor: the only component that talks to the database.

Every statement goes through a single request-scoped SQLAlchemy session.
Writes are committed immediately; a failing statement rolls the session back
and surfaces as a StorageError without retrying.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .db import get_db
from .errors import StorageError

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


@dataclass(frozen=True)
class WriteResult:
    affected_row_id: Optional[int]
    row_count: int


class Storage:
    def __init__(self, session: Session):
        self.session = session

    def query(self, statement, params: Optional[dict] = None) -> List[Row]:
        try:
            rows = self.session.execute(statement, params).mappings().all()
        except SQLAlchemyError as e:
            raise self._fail(e) from e
        return [dict(r) for r in rows]

    def query_one(self, statement, params: Optional[dict] = None) -> Optional[Row]:
        try:
            row = self.session.execute(statement, params).mappings().first()
        except SQLAlchemyError as e:
            raise self._fail(e) from e
        return dict(row) if row is not None else None

    def execute(self, statement, params: Optional[dict] = None) -> WriteResult:
        try:
            result = self.session.execute(statement, params)
            affected_row_id = None
            if getattr(result, "is_insert", False) and result.inserted_primary_key:
                affected_row_id = result.inserted_primary_key[0]
            row_count = result.rowcount
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail(e) from e

        return WriteResult(affected_row_id=affected_row_id, row_count=row_count)

    def _fail(self, e: SQLAlchemyError) -> StorageError:
        self.session.rollback()
        logger.debug("Statement failed, session rolled back: %s", e)
        return StorageError(f"Statement failed: {e}")


# Dependency to get a storage accessor bound to the request's session
def get_storage(db: Session = Depends(get_db)) -> Storage:
    return Storage(db)
