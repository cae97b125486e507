"""
FastAPI service for the Book Catalogue.

This package provides:
- CRUD endpoints over a flat list of books
- A JSON file backed store
- A static OpenAPI document with a Swagger UI viewer
"""
