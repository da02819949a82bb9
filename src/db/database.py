from sqlalchemy import create_engine, event, Column, String, Integer, Numeric, Date, ForeignKey
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker
import os
import sqlite3
import logging

# Get logger
logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DB_URL", "sqlite:///./creek_river.db")
Base = declarative_base()


# SQLite ignores foreign keys unless asked per connection
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class CampsiteTypeDB(Base):
    __tablename__ = "campsite_types"
    id = Column(Integer, primary_key=True, index=True)
    campsite_type_name = Column(String, nullable=False)
    fee_per_night = Column(Numeric(10, 2), nullable=False)
    max_reservation_days = Column(Integer, nullable=False)


class CampsiteDB(Base):
    __tablename__ = "campsites"
    id = Column(Integer, primary_key=True, index=True)
    nickname = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    campsite_type_id = Column(Integer, ForeignKey("campsite_types.id", ondelete="CASCADE"), nullable=False)

    # Directed only: a type never points back at its campsites
    campsite_type = relationship("CampsiteTypeDB")


class UserProfileDB(Base):
    __tablename__ = "user_profiles"
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)


class ReservationDB(Base):
    __tablename__ = "reservations"
    id = Column(Integer, primary_key=True, index=True)
    # Deleting a campsite removes its reservations
    campsite_id = Column(Integer, ForeignKey("campsites.id", ondelete="CASCADE"), nullable=False)
    user_profile_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=False)
    checkin_date = Column(Date, nullable=False, index=True)
    checkout_date = Column(Date, nullable=False)

    campsite = relationship("CampsiteDB")
    user_profile = relationship("UserProfileDB")


engine = create_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_tables(bind=None):
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables created (if they didn't exist previously).")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
