from __future__ import annotations

import base64
import mimetypes
import posixpath
from functools import lru_cache
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ..config.settings import RouterSettings
from ..presentation.logging import get_logger


DEFAULT_CLIENT_CONFIG = Config(connect_timeout=3, read_timeout=10)
# Without s3:ListBucket a missing key is reported as AccessDenied.
_MISSING_CODES = {"NoSuchKey", "404", "NotFound", "AccessDenied", "403"}
_LOGGER = get_logger("newsroom.assets")


@lru_cache(maxsize=4)
def get_s3_client(region: str):
    return boto3.client("s3", region_name=region, config=DEFAULT_CLIENT_CONFIG)


class AssetStore:
    """Serves the single-page site bundle out of an S3 bucket."""

    def __init__(self, settings: RouterSettings, s3=None) -> None:
        self._settings = settings
        self._s3 = s3

    def fetch(self, path: str) -> dict:
        if not self._settings.assets_bucket:
            return _text_response(500, "Static assets are not configured")

        key = self._key_for(path)
        obj = self._get_object(key)
        if obj is None and not posixpath.splitext(key)[1]:
            # Client-side routes resolve to the index document.
            key = self._key_for("/")
            obj = self._get_object(key)
        if obj is None:
            return _text_response(404, "Not found")

        body = obj["Body"].read()
        headers = {"Content-Type": obj.get("ContentType") or _guess_type(key)}
        if obj.get("ETag"):
            headers["ETag"] = obj["ETag"]
        if obj.get("CacheControl"):
            headers["Cache-Control"] = obj["CacheControl"]
        return {
            "statusCode": 200,
            "headers": headers,
            "body": base64.b64encode(body).decode("ascii"),
            "isBase64Encoded": True,
        }

    def _key_for(self, path: str) -> str:
        path = path or "/"
        relative = posixpath.normpath("/" + path).lstrip("/")
        if relative == ".":
            relative = ""
        if not relative or path.endswith("/"):
            relative = posixpath.join(relative, self._settings.index_document)
        prefix = self._settings.assets_prefix or ""
        if prefix and not prefix.endswith("/"):
            prefix += "/"
        return prefix + relative

    def _get_object(self, key: str) -> Optional[dict]:
        client = self._s3 or get_s3_client(self._settings.region)
        try:
            return client.get_object(Bucket=self._settings.assets_bucket, Key=key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return None
            _LOGGER.error("Failed to fetch static asset", exc_info=True, extra={"key": key})
            raise


def _guess_type(key: str) -> str:
    guessed, _ = mimetypes.guess_type(key)
    return guessed or "application/octet-stream"


def _text_response(status_code: int, message: str) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "text/plain; charset=utf-8"},
        "body": message,
    }
