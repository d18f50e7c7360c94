"""Admin shared-secret guard for mutating news operations."""

from __future__ import annotations

import enum
import hmac
import re
from typing import Optional

from .http import build_json_response, get_header


_BEARER = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


class AdminCheck(enum.Enum):
    OK = "ok"
    MISSING = "missing"
    INVALID = "invalid"
    MISCONFIGURED = "misconfigured"


def read_admin_token(event: dict) -> Optional[str]:
    token = (get_header(event, "x-admin-token") or "").strip()
    if token:
        return token
    authorization = get_header(event, "authorization")
    if not authorization:
        return None
    match = _BEARER.match(authorization.strip())
    return match.group(1).strip() if match else None


def check_admin(event: dict, expected: Optional[str]) -> AdminCheck:
    if not expected:
        return AdminCheck.MISCONFIGURED
    provided = read_admin_token(event)
    if not provided:
        return AdminCheck.MISSING
    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        return AdminCheck.INVALID
    return AdminCheck.OK


def rejection_response(result: AdminCheck, cors: dict) -> Optional[dict]:
    """Response for a failed check, or ``None`` when the caller may proceed."""
    if result is AdminCheck.OK:
        return None
    if result is AdminCheck.MISCONFIGURED:
        payload = {"ok": False, "error": "Server misconfiguration: ADMIN_TOKEN is not set", "code": "ConfigurationError"}
        return build_json_response(500, payload, cors)
    if result is AdminCheck.MISSING:
        payload = {"ok": False, "error": "Missing admin token", "code": "Unauthorized"}
        challenge = {"WWW-Authenticate": 'Bearer realm="admin", charset="UTF-8"'}
        return build_json_response(401, payload, cors, challenge)
    payload = {"ok": False, "error": "Invalid admin token", "code": "Forbidden"}
    return build_json_response(403, payload, cors)
