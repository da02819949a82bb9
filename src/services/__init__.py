"""
Services Module
-------------
Named read/write operations over campsites and reservations. Every function
takes an explicit database session and returns an OperationResult instead of
raising, so storage errors never reach the HTTP layer unclassified.
"""
