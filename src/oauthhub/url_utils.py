"""Query-string, URL and `{{variable}}` template helpers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

TEMPLATE_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def _serialize(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(_serialize(item) for item in value)
    return str(value)


def build_query_string(params: Mapping[str, Any]) -> str:
    """Serialize params into a form-encoded query string.

    None values are dropped, list values are joined with a single space and
    booleans are written as ``true``/``false``. Insertion order is preserved.
    """
    pairs = [(key, _serialize(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs)


def build_url(base_url: str, params: Mapping[str, Any]) -> str:
    """Append the query string for params to base_url.

    Returns base_url unchanged when no parameter survives filtering.
    """
    query_string = build_query_string(params)
    if not query_string:
        return base_url
    return f"{base_url}?{query_string}"


def replace_template(template: str, variables: Mapping[str, Any]) -> str:
    """Substitute `{{name}}` placeholders; unknown names are left as they are.

    Example:
        >>> replace_template("https://graph.example.com/{{version}}/me", {"version": "v19.0"})
        'https://graph.example.com/v19.0/me'
    """

    def _replace(match: re.Match[str]) -> str:
        value = variables.get(match.group(1))
        return match.group(0) if value is None else str(value)

    return TEMPLATE_PATTERN.sub(_replace, template)


def replace_template_in_object(value: Any, variables: Mapping[str, Any]) -> Any:
    """Apply `replace_template` to every string inside nested dicts and lists."""
    if isinstance(value, str):
        return replace_template(value, variables)
    if isinstance(value, list):
        return [replace_template_in_object(item, variables) for item in value]
    if isinstance(value, dict):
        return {key: replace_template_in_object(item, variables) for key, item in value.items()}
    return value


def clean_params(params: Mapping[str, Any] | None) -> dict[str, str] | None:
    """Drop None values and stringify the rest for use as request params or form data."""
    if params is None:
        return None
    return {key: _serialize(value) for key, value in params.items() if value is not None}


__all__ = [
    "build_query_string",
    "build_url",
    "clean_params",
    "replace_template",
    "replace_template_in_object",
]
