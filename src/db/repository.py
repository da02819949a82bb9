"""
Generic data access over a single SQLAlchemy session.

Each write is its own transaction: it either commits every field change or
rolls back and raises, leaving previously committed state untouched.
"""
import logging
from typing import Iterable, List, Optional

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

logger = logging.getLogger(__name__)

# Bounds of a signed 64-bit INTEGER primary key
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class PersistenceFailure(Exception):
    """A storage-layer failure not attributable to caller input."""

    def __init__(self, message, original=None):
        super().__init__(message)
        self.original = original


class ConstraintViolation(PersistenceFailure):
    """A write referenced a missing row or broke a NOT NULL/unique rule."""


def _loader_options(model, paths):
    options = []
    for path in paths:
        current = model
        loader = None
        for name in path.split("."):
            attribute = getattr(current, name)
            loader = joinedload(attribute) if loader is None else loader.joinedload(attribute)
            current = attribute.property.mapper.class_
        options.append(loader)
    return options


class Repository:
    """CRUD plus eager relation loading for one entity class."""

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def list(self, order_by: Optional[str] = None, load: Iterable[str] = ()) -> List:
        query = self.db.query(self.model).options(*_loader_options(self.model, load))
        if order_by:
            # Identity breaks ties so equal keys keep a stable order
            query = query.order_by(getattr(self.model, order_by).asc(), self.model.id.asc())
        try:
            return query.all()
        except SQLAlchemyError as e:
            raise self._read_failure(f"listing {self.model.__tablename__}", e) from e

    def get(self, entity_id, load: Iterable[str] = ()):
        # No stored row can carry an id beyond the INTEGER column range
        if not MIN_ID <= entity_id <= MAX_ID:
            return None
        try:
            return (
                self.db.query(self.model)
                .options(*_loader_options(self.model, load))
                .filter(self.model.id == entity_id)
                .first()
            )
        except SQLAlchemyError as e:
            raise self._read_failure(f"fetch of {self.model.__tablename__} {entity_id}", e) from e

    def exists(self, entity_id) -> bool:
        if not MIN_ID <= entity_id <= MAX_ID:
            return False
        try:
            return self.db.query(self.model.id).filter(self.model.id == entity_id).first() is not None
        except SQLAlchemyError as e:
            raise self._read_failure(f"lookup of {self.model.__tablename__} {entity_id}", e) from e

    def add(self, **fields):
        row = self.model(**fields)
        self.db.add(row)
        self._commit(f"insert into {self.model.__tablename__}")
        self.db.refresh(row)
        logger.info(f"Inserted {self.model.__tablename__} row (ID: {row.id})")
        return row

    def update(self, row, **fields):
        for name, value in fields.items():
            setattr(row, name, value)
        self._commit(f"update of {self.model.__tablename__} {row.id}")
        logger.info(f"Updated {self.model.__tablename__} row (ID: {row.id})")
        return row

    def delete(self, row):
        row_id = row.id
        self.db.delete(row)
        self._commit(f"delete from {self.model.__tablename__} {row_id}")
        logger.info(f"Deleted {self.model.__tablename__} row (ID: {row_id})")

    def _commit(self, action):
        try:
            self.db.commit()
        except (IntegrityError, DataError) as e:
            self.db.rollback()
            logger.warning(f"Constraint violation during {action}: {e.orig}")
            raise ConstraintViolation(f"Constraint violation during {action}", e) from e
        except OverflowError as e:
            # sqlite3 rejects out-of-range integers before SQLAlchemy sees them
            self.db.rollback()
            logger.warning(f"Value out of range during {action}: {e}")
            raise ConstraintViolation(f"Value out of range during {action}", e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error during {action}: {str(e)}")
            raise PersistenceFailure(f"Database error during {action}", e) from e

    def _read_failure(self, action, error):
        self.db.rollback()
        logger.error(f"Database error during {action}: {str(error)}")
        return PersistenceFailure(f"Database error during {action}", error)
