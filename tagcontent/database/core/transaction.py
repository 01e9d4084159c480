# tagcontent/database/core/transaction.py
from contextlib import contextmanager
from sqlalchemy.orm import Session


@contextmanager
def transactional(db: Session):
    """Run a block in its own transaction, or a savepoint when one is already open."""
    if db.in_transaction():
        with db.begin_nested():
            yield db
    else:
        with db.begin():
            yield db
