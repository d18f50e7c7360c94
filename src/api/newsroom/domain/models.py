from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional


# Bulletin, announcement, event notice.
NEWS_CATEGORIES = ("주보", "공지사항", "행사안내")

# Row column -> API field, in output order.
FIELD_NAMES = {
    "id": "id",
    "title": "title",
    "date": "date",
    "category": "category",
    "content": "content",
    "file_url": "fileUrl",
    "file_name": "fileName",
    "file_size": "fileSize",
    "views": "views",
    "is_new": "isNew",
    "show_on_home": "showOnHome",
    "image_url": "imageUrl",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}

OPTIONAL_TEXT_FIELDS = ("file_url", "file_name", "file_size", "image_url")


@dataclass
class NewsPost:
    """A news post as stored in the ``news_posts`` table."""

    id: Optional[int]
    title: str
    date: str
    category: str
    content: str = ""
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[str] = None
    views: int = 0
    is_new: bool = False
    show_on_home: bool = False
    image_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "NewsPost":
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in row.items() if key in known}
        values.setdefault("id", None)
        values.setdefault("title", "")
        values.setdefault("date", "")
        values.setdefault("category", "")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for column, api_name in FIELD_NAMES.items():
            value = getattr(self, column)
            if value is None:
                continue
            payload[api_name] = value
        return payload
