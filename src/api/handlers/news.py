from __future__ import annotations

from newsroom.application.news_service import NewsService
from newsroom.config.settings import get_news_settings
from newsroom.domain.errors import DomainError, UnsupportedMediaTypeError, ValidationError
from newsroom.infrastructure.supabase_clients import get_news_store
from newsroom.presentation.auth import check_admin, rejection_response
from newsroom.presentation.http import (
    build_json_response,
    build_preflight_response,
    cors_headers,
    extract_origin,
    format_allow,
    is_json_content_type,
    normalize_event,
    parse_json,
    read_body,
    request_method,
    request_path,
)
from newsroom.presentation.logging import get_logger


_LOGGER = get_logger("newsroom.news.handler")
ALLOWED_METHODS = ["GET", "POST", "PUT", "OPTIONS"]


def lambda_handler(event, _context):
    settings = get_news_settings()
    event_obj = normalize_event(event)
    origin = extract_origin(event_obj)
    path = request_path(event_obj)
    method = request_method(event_obj)
    cors = cors_headers(settings.allowed_origin, origin, path)

    if method == "OPTIONS":
        return build_preflight_response(settings.allowed_origin, origin, path)
    if method not in ALLOWED_METHODS:
        payload = {"ok": False, "error": "Method Not Allowed", "code": "MethodNotAllowed"}
        return build_json_response(405, payload, cors, {"Allow": format_allow(ALLOWED_METHODS)})

    if method != "GET":
        result = check_admin(event_obj, settings.admin_token)
        rejection = rejection_response(result, cors)
        if rejection:
            _LOGGER.info("Admin check rejected request", extra={"reason": result.value, "method": method})
            return rejection

    try:
        if method == "GET":
            service = NewsService(get_news_store(settings))
            return build_json_response(200, service.list_posts(), cors)

        if method == "POST":
            try:
                body = parse_json(read_body(event_obj), default=None)
            except ValueError:
                body = None
            service = NewsService(get_news_store(settings))
            return build_json_response(201, service.create_post(body), cors)

        if not is_json_content_type(event_obj):
            raise UnsupportedMediaTypeError()
        try:
            body = parse_json(read_body(event_obj), default=None)
        except ValueError as exc:
            raise ValidationError("Invalid JSON body") from exc
        if not isinstance(body, list):
            raise ValidationError("Body must be a JSON array")
        service = NewsService(get_news_store(settings))
        return build_json_response(200, service.replace_posts(body), cors)
    except DomainError as exc:
        return build_json_response(exc.status_code, exc.payload, cors)
    except Exception:
        _LOGGER.exception("Unhandled news error", extra={"method": method})
        payload = {"ok": False, "error": "Unexpected failure", "code": "InternalError"}
        return build_json_response(500, payload, cors)
