from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Run a unit of work on ``db`` and commit it once.
    Any exception rolls back everything flushed inside the block and is re-raised.
    Usage:
        with atomic(db):
            ... flush-only store calls ...
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
