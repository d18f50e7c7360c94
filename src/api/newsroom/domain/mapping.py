"""Translation between ``news_posts`` rows (snake_case) and the public API (camelCase)."""

from __future__ import annotations

from typing import Any, Dict

from .models import FIELD_NAMES, OPTIONAL_TEXT_FIELDS, NewsPost


def to_api(row: Dict[str, Any]) -> Dict[str, Any]:
    return NewsPost.from_row(row).to_dict()


def to_row_patch(body: Dict[str, Any]) -> Dict[str, Any]:
    """Only keys present in ``body`` are emitted, so the result is a true partial patch."""
    patch: Dict[str, Any] = {}
    if isinstance(body.get("title"), str):
        patch["title"] = body["title"].strip()
    if isinstance(body.get("date"), str):
        patch["date"] = body["date"].strip()
    if isinstance(body.get("category"), str):
        patch["category"] = body["category"]
    if isinstance(body.get("content"), str):
        patch["content"] = body["content"]
    for column in OPTIONAL_TEXT_FIELDS:
        api_name = FIELD_NAMES[column]
        if api_name in body:
            patch[column] = body[api_name]
    if _is_int(body.get("views")):
        patch["views"] = body["views"]
    if "isNew" in body:
        patch["is_new"] = bool(body["isNew"])
    if "showOnHome" in body:
        patch["show_on_home"] = bool(body["showOnHome"])
    return patch


def to_new_row(body: Dict[str, Any]) -> Dict[str, Any]:
    row = {
        "title": body["title"].strip(),
        "date": body["date"].strip(),
        "category": body["category"],
        "content": body["content"] if isinstance(body.get("content"), str) else "",
        "views": body["views"] if _is_int(body.get("views")) else 0,
        "is_new": bool(body.get("isNew")),
        "show_on_home": bool(body.get("showOnHome")),
    }
    for column in OPTIONAL_TEXT_FIELDS:
        row[column] = body.get(FIELD_NAMES[column])
    return row


def is_positive_id(value: Any) -> bool:
    return _is_int(value) and value > 0


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
