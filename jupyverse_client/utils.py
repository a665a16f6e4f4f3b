from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

# what encodeURIComponent leaves alone, on top of alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def url_path_join(*paths: str) -> str:
    """Join a sequence of URL components with '/'.

    Empty components are skipped, and joining never introduces '//' at a boundary
    between two components. Slashes inside a component are left as they are.
    """
    url = ""
    for path in paths:
        if path == "":
            continue
        if url:
            path = path.lstrip("/")
            if not url.endswith("/"):
                url += "/"
        url += path
    return url


def url_component_escape(component: str) -> str:
    return quote(component, safe=_URI_COMPONENT_SAFE)


def url_escape(path: str) -> str:
    """Encode each component of a multi-segment path, leaving the '/' separators."""
    return "/".join(url_component_escape(part) for part in path.split("/"))


def url_join_encode(*paths: str) -> str:
    return url_escape(url_path_join(*paths))


def json_to_query_string(params: Mapping[str, Any]) -> str:
    return "?" + "&".join(
        f"{url_component_escape(str(key))}={url_component_escape(str(value))}"
        for key, value in params.items()
    )
