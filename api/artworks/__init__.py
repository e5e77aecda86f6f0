"""
Artwork records: storage schema, read projection, CRUD operations and routes.
"""
