from __future__ import annotations

import base64
import json
from typing import Any, Iterable, Mapping, Sequence


ALLOWED_METHODS = "GET,POST,PUT,PATCH,DELETE,OPTIONS"
PREFLIGHT_MAX_AGE = "86400"
_DEFAULT_ALLOWED_HEADERS = "Content-Type,Accept,Authorization"
_ADMIN_ALLOWED_HEADERS = _DEFAULT_ALLOWED_HEADERS + ",X-Admin-Token"
_ADMIN_PATH_PREFIX = "/api/news"
_RESERVED_HEADERS = {"content-type", "cache-control"}


# -------------------- CORS --------------------
def resolve_origin(allowed_origin: str | Sequence[str], request_origin: str | None) -> str:
    origins = _normalize_origins(allowed_origin)
    if "*" in origins:
        return "*"
    if request_origin and request_origin in origins:
        return request_origin
    return "*"


def cors_headers(allowed_origin: str | Sequence[str], request_origin: str | None, path: str | None = None) -> dict:
    return {
        "Access-Control-Allow-Origin": resolve_origin(allowed_origin, request_origin),
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": _allowed_headers_for(path),
        "Access-Control-Max-Age": PREFLIGHT_MAX_AGE,
        "Vary": "Origin",
    }


def build_preflight_response(allowed_origin: str | Sequence[str], request_origin: str | None = None, path: str | None = None) -> dict:
    return {
        "statusCode": 204,
        "headers": cors_headers(allowed_origin, request_origin, path),
        "body": "",
    }


def apply_cors(response: dict, allowed_origin: str | Sequence[str], request_origin: str | None) -> dict:
    headers = dict(response.get("headers") or {})
    headers["Access-Control-Allow-Origin"] = resolve_origin(allowed_origin, request_origin)
    headers["Vary"] = "Origin"
    return {**response, "headers": headers}


def _allowed_headers_for(path: str | None) -> str:
    if path and path.startswith(_ADMIN_PATH_PREFIX):
        return _ADMIN_ALLOWED_HEADERS
    return _DEFAULT_ALLOWED_HEADERS


def _normalize_origins(value: str | Sequence[str]) -> list[str]:
    if isinstance(value, str):
        parts = [segment.strip() for segment in value.split(",")]
        return [part for part in parts if part]
    normalized = []
    for item in value:
        if item:
            normalized.append(str(item).strip())
    return [item for item in normalized if item]


# -------------------- RESPONSES --------------------
def build_json_response(
    status_code: int,
    payload: Any,
    cors: Mapping[str, str] | None = None,
    extra_headers: Mapping[str, str] | None = None,
) -> dict:
    headers = {
        "Content-Type": "application/json; charset=utf-8",
        "Cache-Control": "no-store",
    }
    for source in (cors, extra_headers):
        for key, value in (source or {}).items():
            if key.lower() in _RESERVED_HEADERS:
                continue
            headers[key] = value
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": json.dumps(payload, ensure_ascii=False),
    }


def format_allow(methods: Iterable[str]) -> str:
    return ",".join(m.upper() for m in methods)


# -------------------- REQUESTS --------------------
def normalize_event(event: dict | str | None) -> dict:
    if isinstance(event, str):
        return json.loads(event)
    if isinstance(event, dict):
        return event
    return {}


def request_method(event: dict) -> str:
    method = event.get("httpMethod") or (event.get("requestContext") or {}).get("http", {}).get("method")
    return (method or "").upper()


def request_path(event: dict) -> str:
    return event.get("path") or event.get("rawPath") or "/"


def get_header(event: dict | None, name: str) -> str | None:
    if not event:
        return None
    target = name.lower()
    value = _header_from(event.get("headers"), target)
    if value is not None:
        return value
    return _header_from(event.get("multiValueHeaders"), target)


def extract_origin(event: dict | None) -> str | None:
    return get_header(event, "origin")


def request_host(event: dict) -> str | None:
    return get_header(event, "host") or (event.get("requestContext") or {}).get("domainName")


def path_parameter(event: dict, name: str) -> str | None:
    params = event.get("pathParameters") or {}
    return params.get(name)


def read_body(event: dict) -> str | None:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        return base64.b64decode(body).decode("utf-8")
    return body


def parse_json(body: str | None, default: Any) -> Any:
    if body is None or body == "":
        return default
    return json.loads(body)


def is_json_content_type(event: dict) -> bool:
    content_type = get_header(event, "content-type") or ""
    return content_type.split(";")[0].strip().lower() == "application/json"


def _header_from(headers: Any, target: str) -> str | None:
    if not isinstance(headers, dict):
        return None
    for key, value in headers.items():
        if key.lower() != target:
            continue
        if isinstance(value, list):
            return value[0] if value else None
        return value
    return None
