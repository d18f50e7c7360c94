from __future__ import annotations

from typing import Any, Dict, List

from ..domain.errors import NotFoundError, ValidationError
from ..domain.mapping import is_positive_id, to_api, to_new_row, to_row_patch
from ..domain.models import NEWS_CATEGORIES
from ..infrastructure.news_store import SupabaseNewsStore
from ..presentation.logging import get_logger


_LOGGER = get_logger("newsroom.news")


class NewsService:
    def __init__(self, store: SupabaseNewsStore) -> None:
        self._store = store

    def list_posts(self) -> Dict[str, object]:
        rows = self._store.list_rows()
        if not isinstance(rows, list):
            rows = []
        items = [to_api(row) for row in rows if isinstance(row, dict)]
        return {"ok": True, "count": len(items), "items": items}

    def create_post(self, body: Any) -> Dict[str, object]:
        self._validate_new_post(body)
        row = self._store.insert_row(to_new_row(body))
        _LOGGER.info("News post created", extra={"id": row.get("id")})
        return {"ok": True, "item": to_api(row)}

    def replace_posts(self, body: Any) -> Dict[str, object]:
        if not isinstance(body, list):
            raise ValidationError("Body must be a JSON array")
        rows: List[Dict[str, Any]] = []
        for index, item in enumerate(body):
            try:
                self._validate_new_post(item)
            except ValidationError as exc:
                raise ValidationError(f"items[{index}]: {exc.message}") from exc
            row = to_new_row(item)
            if is_positive_id(item.get("id")):
                # Existing ids survive a whole-collection rewrite.
                row["id"] = item["id"]
            rows.append(row)
        count = self._store.replace_rows(rows)
        _LOGGER.info("News collection replaced", extra={"count": count})
        return {"ok": True, "count": count}

    def update_post(self, post_id: int, body: Any) -> Dict[str, object]:
        patch = to_row_patch(body if isinstance(body, dict) else {})
        if not patch:
            raise ValidationError("No fields to update")
        if "category" in patch and patch["category"] not in NEWS_CATEGORIES:
            raise ValidationError("invalid category")
        if "views" in patch and patch["views"] < 0:
            raise ValidationError("views must be a non-negative integer")
        row = self._store.update_row(post_id, patch)
        if row is None:
            raise NotFoundError("News post not found")
        return {"ok": True, "item": to_api(row)}

    def delete_post(self, post_id: int) -> Dict[str, object]:
        self._store.delete_row(post_id)
        return {"ok": True}

    def _validate_new_post(self, body: Any) -> None:
        if not isinstance(body, dict):
            raise ValidationError("Invalid JSON body")
        if not isinstance(body.get("title"), str) or not body["title"].strip():
            raise ValidationError("title is required")
        if not isinstance(body.get("date"), str) or not body["date"].strip():
            raise ValidationError("date is required (YYYY-MM-DD)")
        if body.get("category") not in NEWS_CATEGORIES:
            raise ValidationError("invalid category")
        views = body.get("views")
        if isinstance(views, int) and not isinstance(views, bool) and views < 0:
            raise ValidationError("views must be a non-negative integer")


def parse_post_id(raw: Any) -> int:
    """Positive integer id from a path segment; anything else is rejected."""
    text = str(raw or "").strip()
    if not text.isdigit() or not text.isascii():
        raise ValidationError("Invalid id")
    post_id = int(text)
    if post_id <= 0:
        raise ValidationError("Invalid id")
    return post_id
