"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, storage, errors),
``schemas`` (record shapes), ``services`` (validation, filter
resolution and CRUD logic) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
