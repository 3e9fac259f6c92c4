"""
Document storage integration.

This module defines the small storage interface the service layer
relies on (``find``, ``find_one``, ``insert``, ``update`` and
``remove`` on a named collection) together with two implementations:

* ``MongoStore`` wraps a pymongo ``MongoClient``.  pymongo is blocking,
  so every call is pushed to Starlette's threadpool and awaited.
  Connection failures are translated to ``StoreUnavailableError``.
* ``MemoryStore`` keeps documents in process dictionaries.  It mimics
  the subset of MongoDB semantics used here (ObjectId keys, equality
  filters, full document replacement) and backs the test-suite.

The store is created once by the application lifespan and stored on
``app.state.store``; route handlers receive it through the
``get_store`` dependency.  Nothing in this module holds a module-level
connection.
"""

import copy
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure

from .config import Settings
from .exceptions import MalformedIdentifierError, StoreUnavailableError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


class DocumentCollection:
    """Interface of a named collection of documents."""

    name: str

    async def find(self, filter: Document) -> List[Document]:
        raise NotImplementedError

    async def find_one(self, filter: Document) -> Optional[Document]:
        raise NotImplementedError

    async def insert(self, document: Document) -> Document:
        """Store ``document`` and return it with its assigned ``_id``."""
        raise NotImplementedError

    async def update(self, filter: Document, document: Document) -> None:
        """Replace the first document matching ``filter`` with ``document``.

        The stored ``_id`` is preserved; every other field is taken from
        ``document`` so fields missing from it are dropped.
        """
        raise NotImplementedError

    async def remove(self, filter: Document) -> None:
        raise NotImplementedError


class DocumentStore:
    """Interface of a document database holding several collections."""

    def collection(self, name: str) -> DocumentCollection:
        raise NotImplementedError

    async def ping(self) -> bool:
        raise NotImplementedError

    def close(self) -> None:
        pass

    @staticmethod
    def parse_id(raw_id: str) -> ObjectId:
        """Convert a client supplied identifier into an ``ObjectId``.

        Raises ``MalformedIdentifierError`` when ``raw_id`` is not a
        24 character hex string.
        """
        try:
            return ObjectId(raw_id)
        except (InvalidId, TypeError) as exc:
            raise MalformedIdentifierError(str(raw_id)) from exc


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except ConnectionFailure as exc:
        logger.error("MongoDB %s failed: %s", operation, exc.__class__.__name__)
        raise StoreUnavailableError(str(exc)) from exc


class MongoCollection(DocumentCollection):
    """``DocumentCollection`` backed by a pymongo collection."""

    def __init__(self, collection):
        self._collection = collection
        self.name = collection.name

    def _find(self, filter: Document) -> List[Document]:
        with _translate_errors("find"):
            return list(self._collection.find(filter))

    def _find_one(self, filter: Document) -> Optional[Document]:
        with _translate_errors("find_one"):
            return self._collection.find_one(filter)

    def _insert(self, document: Document) -> Document:
        doc = {k: v for k, v in document.items() if k != "_id"}
        with _translate_errors("insert"):
            result = self._collection.insert_one(doc)
        return {**doc, "_id": result.inserted_id}

    def _update(self, filter: Document, document: Document) -> None:
        doc = {k: v for k, v in document.items() if k != "_id"}
        with _translate_errors("update"):
            self._collection.replace_one(filter, doc)

    def _remove(self, filter: Document) -> None:
        with _translate_errors("remove"):
            self._collection.delete_many(filter)

    async def find(self, filter: Document) -> List[Document]:
        return await run_in_threadpool(self._find, filter)

    async def find_one(self, filter: Document) -> Optional[Document]:
        return await run_in_threadpool(self._find_one, filter)

    async def insert(self, document: Document) -> Document:
        return await run_in_threadpool(self._insert, document)

    async def update(self, filter: Document, document: Document) -> None:
        await run_in_threadpool(self._update, filter, document)

    async def remove(self, filter: Document) -> None:
        await run_in_threadpool(self._remove, filter)


class MongoStore(DocumentStore):
    """Document store talking to a MongoDB server."""

    def __init__(self, client: MongoClient, database_name: str):
        self._client = client
        self._database = client[database_name]

    @classmethod
    def from_uri(cls, uri: str, database_name: str, timeout_ms: int = 5000) -> "MongoStore":
        # MongoClient connects lazily; an unreachable server surfaces on
        # the first operation as ServerSelectionTimeoutError.
        client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        return cls(client, database_name)

    def collection(self, name: str) -> MongoCollection:
        return MongoCollection(self._database[name])

    def _ping(self) -> bool:
        with _translate_errors("ping"):
            self._client.admin.command("ping")
        return True

    async def ping(self) -> bool:
        try:
            return await run_in_threadpool(self._ping)
        except StoreUnavailableError:
            return False

    def close(self) -> None:
        self._client.close()
        logger.info("MongoDB client closed")


class MemoryCollection(DocumentCollection):
    """In-process collection with MongoDB-like equality filters."""

    def __init__(self, name: str):
        self.name = name
        self._documents: Dict[ObjectId, Document] = {}

    @staticmethod
    def _matches(document: Document, filter: Document) -> bool:
        return all(key in document and document[key] == value for key, value in filter.items())

    async def find(self, filter: Document) -> List[Document]:
        return [
            copy.deepcopy(doc) for doc in self._documents.values() if self._matches(doc, filter)
        ]

    async def find_one(self, filter: Document) -> Optional[Document]:
        for doc in self._documents.values():
            if self._matches(doc, filter):
                return copy.deepcopy(doc)
        return None

    async def insert(self, document: Document) -> Document:
        doc = copy.deepcopy({k: v for k, v in document.items() if k != "_id"})
        doc["_id"] = ObjectId()
        self._documents[doc["_id"]] = doc
        return copy.deepcopy(doc)

    async def update(self, filter: Document, document: Document) -> None:
        for key, doc in self._documents.items():
            if self._matches(doc, filter):
                replacement = copy.deepcopy({k: v for k, v in document.items() if k != "_id"})
                replacement["_id"] = key
                self._documents[key] = replacement
                return

    async def remove(self, filter: Document) -> None:
        for key in [k for k, doc in self._documents.items() if self._matches(doc, filter)]:
            del self._documents[key]


class MemoryStore(DocumentStore):
    """Document store kept entirely in memory."""

    def __init__(self):
        self._collections: Dict[str, MemoryCollection] = {}

    def collection(self, name: str) -> MemoryCollection:
        if name not in self._collections:
            self._collections[name] = MemoryCollection(name)
        return self._collections[name]

    async def ping(self) -> bool:
        return True


def create_store(config: Settings) -> DocumentStore:
    """Build the storage client selected by ``config.storage_backend``."""
    if config.storage_backend == "memory":
        logger.info("Using in-memory document store")
        return MemoryStore()
    if config.storage_backend == "mongo":
        logger.info("Using MongoDB document store (database %s)", config.mongo_database)
        return MongoStore.from_uri(
            config.mongo_uri, config.mongo_database, timeout_ms=config.mongo_timeout_ms
        )
    raise ValueError(f"Unknown storage backend: {config.storage_backend!r}")


def get_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the store owned by the application."""
    return request.app.state.store
