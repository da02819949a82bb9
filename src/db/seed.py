"""Initial campground data loaded into an empty database."""
from datetime import date
from decimal import Decimal
import logging

from sqlalchemy import text
from sqlalchemy.orm import Session

from src.db.database import CampsiteTypeDB, CampsiteDB, UserProfileDB, ReservationDB

logger = logging.getLogger(__name__)

SITE_IMAGE_URL = "https://tnstateparks.com/assets/images/content-images/campgrounds/249/colsp-area2-site73.jpg"

CAMPSITE_TYPES = [
    {"id": 1, "campsite_type_name": "Tent", "fee_per_night": Decimal("15.99"), "max_reservation_days": 7},
    {"id": 2, "campsite_type_name": "RV", "fee_per_night": Decimal("26.50"), "max_reservation_days": 14},
    {"id": 3, "campsite_type_name": "Primitive", "fee_per_night": Decimal("10.00"), "max_reservation_days": 3},
    {"id": 4, "campsite_type_name": "Hammock", "fee_per_night": Decimal("12.00"), "max_reservation_days": 7},
]

CAMPSITES = [
    {"id": 1, "campsite_type_id": 1, "nickname": "Barred Owl", "image_url": SITE_IMAGE_URL},
    {"id": 2, "campsite_type_id": 2, "nickname": "Waterfowl", "image_url": SITE_IMAGE_URL},
    {"id": 3, "campsite_type_id": 3, "nickname": "Spinning Crane", "image_url": SITE_IMAGE_URL},
    {"id": 4, "campsite_type_id": 4, "nickname": "Flightless Bird", "image_url": SITE_IMAGE_URL},
    {"id": 5, "campsite_type_id": 1, "nickname": "Mighty Duck", "image_url": SITE_IMAGE_URL},
]

USER_PROFILES = [
    {"id": 1, "first_name": "John", "last_name": "Doe", "email": "john.doe@example.com"},
]

RESERVATIONS = [
    {"id": 1, "campsite_id": 1, "user_profile_id": 1,
     "checkin_date": date(2025, 1, 2), "checkout_date": date(2025, 1, 7)},
]

SEED_TABLES = [
    (CampsiteTypeDB, CAMPSITE_TYPES),
    (CampsiteDB, CAMPSITES),
    (UserProfileDB, USER_PROFILES),
    (ReservationDB, RESERVATIONS),
]


def seed_database(db: Session) -> bool:
    """
    Insert the seed rows unless campsite types already exist.

    Returns:
        True if rows were inserted, False if the database was already seeded.
    """
    if db.query(CampsiteTypeDB.id).first() is not None:
        logger.info("Seed data already present, skipping.")
        return False

    try:
        for model, rows in SEED_TABLES:
            db.add_all(model(**row) for row in rows)
            # Parents must exist before children reference them
            db.flush()
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error seeding database: {e}")
        raise

    if db.get_bind().dialect.name == "postgresql":
        _advance_sequences(db)

    logger.info(f"Seeded {len(CAMPSITE_TYPES)} campsite types, {len(CAMPSITES)} campsites, "
                f"{len(USER_PROFILES)} user profiles, {len(RESERVATIONS)} reservations")
    return True


def _advance_sequences(db: Session):
    # Explicit ids do not move SERIAL sequences forward
    for model, _ in SEED_TABLES:
        table = model.__tablename__
        db.execute(text(
            f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), (SELECT MAX(id) FROM {table}))"
        ))
    db.commit()
