"""
Main entrypoint for the Creek River campground reservation service.

Usage:
    Run directly (`python main.py`). The database is taken from the DB_URL
    environment variable and defaults to a local SQLite file.
"""
import logging
import os
from datetime import datetime

import uvicorn

from src.db.database import SessionLocal, create_tables
from src.db.seed import seed_database

# Create logs directory
logs_dir = os.path.join(os.getcwd(), 'logs')
os.makedirs(logs_dir, exist_ok=True)

# Create log file with today's date
log_filename = os.path.join(logs_dir, f'creek_river_{datetime.now().strftime("%Y%m%d")}.log')

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(log_filename),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger(__name__)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))


def init_database():
    """Create the tables and load the seed data into an empty database."""
    create_tables()
    db = SessionLocal()
    try:
        return seed_database(db)
    finally:
        db.close()


def main():
    """
    Main function to prepare the database and serve the API.
    """
    try:
        seeded = init_database()
        logger.info("Seed data loaded" if seeded else "Using existing data")

        logger.info(f"Serving API on {API_HOST}:{API_PORT}")
        uvicorn.run("src.api.app:app", host=API_HOST, port=API_PORT)
        return 0
    except Exception as e:
        logger.error(f"An error occurred in the main function: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    exit_code = main()
    print(f"Exiting with code {exit_code}")
