"""
Translation of list query parameters into a storage filter.

Only ``author`` and ``language`` are recognised; both are matched by
exact, case-sensitive equality.  Anything else in the query string is
ignored.
"""

from typing import Any, Dict, Mapping, Optional


def resolve_filter(params: Mapping[str, Optional[str]]) -> Dict[str, Any]:
    """Return the equality filter for the given query parameters.

    A parameter counts as present when its value is not ``None``, so an
    empty string still filters on the empty value.

    * neither parameter present -> ``{}`` (every record)
    * both present -> ``{"author": ..., "language": ...}``
    * only one present -> equality on that one field
    """
    author = params.get("author")
    language = params.get("language")

    if author is None and language is None:
        return {}
    if author is not None and language is not None:
        return {"author": author, "language": language}
    if author is not None:
        return {"author": author}
    return {"language": language}
