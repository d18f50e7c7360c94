from __future__ import annotations

from newsroom.application.news_service import NewsService, parse_post_id
from newsroom.config.settings import get_news_settings
from newsroom.domain.errors import DomainError
from newsroom.infrastructure.supabase_clients import get_news_store
from newsroom.presentation.auth import check_admin, rejection_response
from newsroom.presentation.http import (
    build_json_response,
    build_preflight_response,
    cors_headers,
    extract_origin,
    format_allow,
    normalize_event,
    parse_json,
    path_parameter,
    read_body,
    request_method,
    request_path,
)
from newsroom.presentation.logging import get_logger


_LOGGER = get_logger("newsroom.news_item.handler")
ALLOWED_METHODS = ["PUT", "PATCH", "DELETE", "OPTIONS"]


def lambda_handler(event, _context):
    settings = get_news_settings()
    event_obj = normalize_event(event)
    origin = extract_origin(event_obj)
    path = request_path(event_obj)
    method = request_method(event_obj)
    cors = cors_headers(settings.allowed_origin, origin, path)

    if method == "OPTIONS":
        return build_preflight_response(settings.allowed_origin, origin, path)

    try:
        post_id = parse_post_id(path_parameter(event_obj, "id"))
    except DomainError as exc:
        return build_json_response(exc.status_code, exc.payload, cors)

    if method not in ALLOWED_METHODS:
        payload = {"ok": False, "error": "Method Not Allowed", "code": "MethodNotAllowed"}
        return build_json_response(405, payload, cors, {"Allow": format_allow(ALLOWED_METHODS)})

    result = check_admin(event_obj, settings.admin_token)
    rejection = rejection_response(result, cors)
    if rejection:
        _LOGGER.info("Admin check rejected request", extra={"reason": result.value, "method": method})
        return rejection

    try:
        service = NewsService(get_news_store(settings))
        if method == "DELETE":
            return build_json_response(200, service.delete_post(post_id), cors)

        try:
            body = parse_json(read_body(event_obj), default={})
        except ValueError:
            body = {}
        return build_json_response(200, service.update_post(post_id, body), cors)
    except DomainError as exc:
        return build_json_response(exc.status_code, exc.payload, cors)
    except Exception:
        _LOGGER.exception("Unhandled news item error", extra={"id": post_id, "method": method})
        payload = {"ok": False, "error": "Unexpected failure", "code": "InternalError"}
        return build_json_response(500, payload, cors)
