"""
Service layer abstraction.

Each service encapsulates the logic for one record type: validating
payloads, resolving list filters and calling the document store.
Services receive the store explicitly so API handlers never touch the
database directly.
"""
