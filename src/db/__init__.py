"""
Database Module
-------------
Handles database connections, ORM models, and database operations.
Uses SQLAlchemy for SQLite/PostgreSQL interaction and defines the schema for
campsite types, campsites, guest profiles and reservations.
"""
