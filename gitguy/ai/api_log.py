# gitguy/ai/api_log.py
# JSON-lines log of OpenRouter calls, one file per generation run

from __future__ import annotations

import json
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO

from ..core.verbose import vlog_debug


# * One JSON object per API call: timestamp, uuid, request, response, error, status & duration
class ApiCallLogger:
    def __init__(self, directory: Path):
        self.directory = directory
        self.path = directory / f"gitguy_{uuid.uuid4()}_{int(time.time())}.log"
        self._file: TextIO | None = None

    def open(self) -> "ApiCallLogger":
        self.directory.mkdir(parents=True, exist_ok=True)
        self._file = self.path.open("a", encoding="utf-8")
        vlog_debug("AI", f"API call log: {self.path}")
        return self

    def log_call(
        self,
        request_uuid: str,
        request: dict[str, Any],
        response: dict[str, Any] | None = None,
        error: str | None = None,
        status_code: int | None = None,
        duration_ms: float = 0.0,
    ) -> None:
        if self._file is None:
            return
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uuid": request_uuid,
            "request": request,
            "duration_ms": round(duration_ms, 3),
        }
        if response is not None:
            entry["response"] = response
        if error:
            entry["error"] = error
        if status_code:
            entry["status_code"] = status_code

        self._file.write(json.dumps(entry, default=str) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "ApiCallLogger":
        return self.open()

    def __exit__(self, *exc: object) -> None:
        self.close()
