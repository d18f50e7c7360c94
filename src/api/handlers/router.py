"""Catch-all entry point.

``/api/*`` requests are answered by the route table below and always carry CORS
headers; everything else is handed to the static asset store untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from handlers import news, news_item, ping
from newsroom.config.settings import get_router_settings
from newsroom.infrastructure.static_assets import AssetStore
from newsroom.presentation.http import (
    apply_cors,
    build_json_response,
    build_preflight_response,
    extract_origin,
    normalize_event,
    request_method,
    request_path,
)
from newsroom.presentation.logging import get_logger


_LOGGER = get_logger("newsroom.router")


@dataclass(frozen=True)
class Route:
    pattern: str
    handler: Callable[[dict, object], dict]

    def match(self, path: str) -> Optional[Dict[str, str]]:
        expected = _segments(self.pattern)
        actual = _segments(path)
        if len(expected) != len(actual):
            return None
        params: Dict[str, str] = {}
        for want, got in zip(expected, actual):
            if want.startswith("{") and want.endswith("}"):
                if not got:
                    return None
                params[want[1:-1]] = got
            elif want != got:
                return None
        return params


ROUTES: Tuple[Route, ...] = (
    Route("/api/ping", lambda event, context: ping.lambda_handler(event, context)),
    Route("/api/news", lambda event, context: news.lambda_handler(event, context)),
    Route("/api/news/{id}", lambda event, context: news_item.lambda_handler(event, context)),
)


def lambda_handler(event, context):
    settings = get_router_settings()
    event_obj = normalize_event(event)
    origin = extract_origin(event_obj)
    path = request_path(event_obj)
    method = request_method(event_obj)

    if not path.startswith(settings.api_prefix):
        return AssetStore(settings).fetch(path)

    if method == "OPTIONS":
        return build_preflight_response(settings.allowed_origin, origin, path)

    try:
        response = dispatch(event_obj, context)
    except Exception:
        _LOGGER.exception("Unhandled API error", extra={"path": path, "method": method})
        response = build_json_response(500, {"ok": False, "error": "Internal error"})
    if response is None:
        response = build_json_response(404, {"ok": False, "error": "Not found"})
    return apply_cors(response, settings.allowed_origin, origin)


def dispatch(event: dict, context) -> Optional[dict]:
    """Run the first route matching the event path, or return ``None``."""
    path = request_path(event)
    for route in ROUTES:
        params = route.match(path)
        if params is None:
            continue
        merged = dict(event.get("pathParameters") or {})
        merged.update(params)
        return route.handler({**event, "pathParameters": merged}, context)
    return None


def _segments(path: str) -> list:
    trimmed = path.strip("/")
    return trimmed.split("/") if trimmed else []
