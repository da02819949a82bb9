"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines request payloads and response trees for campsite types, campsites,
guest profiles and reservations, using the camelCase field names of the
public JSON API.
"""
