from __future__ import annotations

from newsroom.application.health_service import HealthService
from newsroom.config.settings import get_health_settings
from newsroom.presentation.http import (
    build_json_response,
    build_preflight_response,
    cors_headers,
    extract_origin,
    format_allow,
    normalize_event,
    request_host,
    request_method,
    request_path,
)


ALLOWED_METHODS = ["GET"]
NO_CACHE = "no-store, no-cache, must-revalidate, proxy-revalidate, max-age=0"


def lambda_handler(event, _context):
    settings = get_health_settings()
    event_obj = normalize_event(event)
    origin = extract_origin(event_obj)
    path = request_path(event_obj)
    method = request_method(event_obj)
    cors = cors_headers(settings.allowed_origin, origin, path)

    if method == "OPTIONS":
        return build_preflight_response(settings.allowed_origin, origin, path)
    if method != "GET":
        payload = {"ok": False, "error": "Method Not Allowed", "code": "MethodNotAllowed"}
        return build_json_response(405, payload, cors, {"Allow": format_allow(ALLOWED_METHODS)})

    payload = HealthService(settings).execute(path, request_host(event_obj))
    response = build_json_response(200, payload, cors)
    response["headers"]["Cache-Control"] = NO_CACHE
    return response
