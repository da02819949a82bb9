import logging

from sqlalchemy.orm import Session

from src.db.database import ReservationDB
from src.db.repository import Repository, ConstraintViolation, PersistenceFailure
from src.models.reservation import Reservation, ReservationDetail, ReservationPayload
from src.services.results import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

RESERVATION_NOT_FOUND = "Reservation was not found."
RESERVATION_INVALID = "The data submitted is invalid."
RESERVATION_SAVE_FAILED = "An error occurred while trying to save the reservation."
RESERVATION_LOAD_FAILED = "An error occurred while trying to load reservations."

# Relations materialized for every reservation returned to a caller
RESERVATION_TREE = ["user_profile", "campsite.campsite_type"]


def list_reservations(db: Session) -> OperationResult:
    """Every reservation with guest and campsite(+type), earliest check-in first."""
    try:
        rows = Repository(db, ReservationDB).list(order_by="checkin_date", load=RESERVATION_TREE)
    except PersistenceFailure as e:
        logger.error(f"Failed to list reservations: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, RESERVATION_LOAD_FAILED)
    return OperationResult.success([ReservationDetail.model_validate(row) for row in rows])


def get_reservation(db: Session, reservation_id: int) -> OperationResult:
    try:
        row = Repository(db, ReservationDB).get(reservation_id, load=RESERVATION_TREE)
    except PersistenceFailure as e:
        logger.error(f"Failed to load reservation {reservation_id}: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, RESERVATION_LOAD_FAILED)
    if row is None:
        return OperationResult.failure(ErrorKind.NOT_FOUND, RESERVATION_NOT_FOUND)
    return OperationResult.success(ReservationDetail.model_validate(row))


def create_reservation(db: Session, payload: ReservationPayload) -> OperationResult:
    # No overlap, stay-length or date-order checks happen here
    try:
        row = Repository(db, ReservationDB).add(**payload.model_dump())
    except ConstraintViolation:
        logger.warning(f"Rejected reservation for campsite {payload.campsite_id} "
                       f"and user profile {payload.user_profile_id}")
        return OperationResult.failure(ErrorKind.VALIDATION, RESERVATION_INVALID)
    except PersistenceFailure as e:
        logger.error(f"Failed to save reservation: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, RESERVATION_SAVE_FAILED)

    return OperationResult.success(Reservation.model_validate(row))


def delete_reservation(db: Session, reservation_id: int) -> OperationResult:
    reservations = Repository(db, ReservationDB)
    try:
        row = reservations.get(reservation_id)
        if row is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, RESERVATION_NOT_FOUND)

        reservations.delete(row)
    except PersistenceFailure as e:
        logger.error(f"Failed to delete reservation {reservation_id}: {e}")
        return OperationResult.failure(ErrorKind.PERSISTENCE, RESERVATION_SAVE_FAILED)

    return OperationResult.success()
