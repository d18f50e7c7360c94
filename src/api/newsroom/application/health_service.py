from __future__ import annotations

import datetime
from typing import Dict, Optional

from ..config.settings import HealthSettings


class HealthService:
    def __init__(self, settings: HealthSettings) -> None:
        self._settings = settings

    def execute(self, path: str, host: Optional[str]) -> Dict[str, object]:
        now = datetime.datetime.now(datetime.timezone.utc)
        return {
            "ok": True,
            "message": "pong",
            "service": self._settings.service_name,
            "path": path,
            "host": host,
            "ts": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        }
