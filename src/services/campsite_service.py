import logging

from sqlalchemy.orm import Session

from src.db.database import CampsiteDB, CampsiteTypeDB
from src.db.repository import Repository, PersistenceFailure
from src.models.campsite import Campsite, CampsiteDetail, CampsitePayload, CampsiteType
from src.services.results import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

CAMPSITE_NOT_FOUND = "Campsite was not found."
CAMPSITE_TYPE_NOT_FOUND = "CampsiteTypeId was not found."
CAMPSITE_SAVE_FAILED = "An error occurred while trying to save the campsite."
CAMPSITE_LOAD_FAILED = "An error occurred while trying to load campsites."


def list_campsites(db: Session) -> OperationResult:
    try:
        rows = Repository(db, CampsiteDB).list()
    except PersistenceFailure as e:
        logger.error(f"Failed to list campsites: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, CAMPSITE_LOAD_FAILED)
    return OperationResult.success([Campsite.model_validate(row) for row in rows])


def list_campsite_types(db: Session) -> OperationResult:
    try:
        rows = Repository(db, CampsiteTypeDB).list(order_by="id")
    except PersistenceFailure as e:
        logger.error(f"Failed to list campsite types: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, CAMPSITE_LOAD_FAILED)
    return OperationResult.success([CampsiteType.model_validate(row) for row in rows])


def get_campsite(db: Session, campsite_id: int) -> OperationResult:
    try:
        row = Repository(db, CampsiteDB).get(campsite_id, load=["campsite_type"])
    except PersistenceFailure as e:
        logger.error(f"Failed to load campsite {campsite_id}: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, CAMPSITE_LOAD_FAILED)
    if row is None:
        return OperationResult.failure(ErrorKind.NOT_FOUND, CAMPSITE_NOT_FOUND)
    return OperationResult.success(CampsiteDetail.model_validate(row))


def create_campsite(db: Session, payload: CampsitePayload) -> OperationResult:
    """
    Insert a campsite after checking that its campsite type exists.

    Args:
        db: Open session; the insert commits on it.
        payload: Nickname, campsite type id and image url.

    Returns:
        The stored Campsite with its new id, or a VALIDATION/PERSISTENCE failure.
    """
    try:
        if not Repository(db, CampsiteTypeDB).exists(payload.campsite_type_id):
            logger.warning(f"Rejected campsite '{payload.nickname}': unknown campsite type {payload.campsite_type_id}")
            return OperationResult.failure(ErrorKind.VALIDATION, CAMPSITE_TYPE_NOT_FOUND)

        row = Repository(db, CampsiteDB).add(**payload.model_dump())
    except PersistenceFailure as e:
        logger.error(f"Failed to save campsite '{payload.nickname}': {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, CAMPSITE_SAVE_FAILED)

    return OperationResult.success(Campsite.model_validate(row))


def update_campsite(db: Session, campsite_id: int, payload: CampsitePayload) -> OperationResult:
    campsites = Repository(db, CampsiteDB)
    try:
        row = campsites.get(campsite_id)
        if row is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, CAMPSITE_NOT_FOUND)

        if not Repository(db, CampsiteTypeDB).exists(payload.campsite_type_id):
            logger.warning(f"Rejected update of campsite {campsite_id}: unknown campsite type {payload.campsite_type_id}")
            return OperationResult.failure(ErrorKind.VALIDATION, CAMPSITE_TYPE_NOT_FOUND)

        campsites.update(
            row,
            nickname=payload.nickname,
            campsite_type_id=payload.campsite_type_id,
            image_url=payload.image_url,
        )
    except PersistenceFailure as e:
        logger.error(f"Failed to update campsite {campsite_id}: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, CAMPSITE_SAVE_FAILED)

    return OperationResult.success()


def delete_campsite(db: Session, campsite_id: int) -> OperationResult:
    """Remove a campsite; the database cascades the delete to its reservations."""
    campsites = Repository(db, CampsiteDB)
    try:
        row = campsites.get(campsite_id)
        if row is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, CAMPSITE_NOT_FOUND)

        campsites.delete(row)
    except PersistenceFailure as e:
        logger.error(f"Failed to delete campsite {campsite_id}: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, CAMPSITE_SAVE_FAILED)

    return OperationResult.success()
