"""
API Module
---------
Provides RESTful API endpoints for the campground using FastAPI.
Features include:
- Listing, reading, creating, updating and deleting campsites
- Listing campsite types
- Listing, reading, creating and deleting reservations
"""
