"""
Top‑level package for the Quote API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``quote_api.app.main:app``.
"""

__all__ = []
