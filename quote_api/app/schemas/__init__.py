"""
Pydantic schema definitions for API payloads.

Each record type (quotes, FAQ entries) defines a creation schema
without an identifier and a read schema carrying the store-assigned
``id``.  Schemas are separated from the storage layer so the documents
kept in the database stay plain dictionaries.
"""
