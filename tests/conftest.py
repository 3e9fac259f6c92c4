"""
pytest configuration and fixtures for the Quote API tests.
"""

import os

# Settings read the environment at import time; keep the module-level app
# from pointing at a real MongoDB server during tests.
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from quote_api.app.core.db import MemoryStore
from quote_api.app.main import create_app


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def quote_payload():
    return {
        "author": "Marcus Aurelius",
        "quote": "You have power over your mind, not outside events.",
        "language": "English",
        "year": {"yearNum": 180, "yearType": "CE"},
        "source": "Meditations",
        "tags": ["strength", "mindset"],
    }


@pytest.fixture
def faq_payload():
    return {
        "author": "Support Team",
        "question": "Can I submit my own quotes?",
        "answer": "Yes, POST them to the quotes endpoint.",
        "language": "English",
        "year": 1995,
        "video_url": "https://videos.example.com/submitting",
        "tags": ["contributing"],
    }
