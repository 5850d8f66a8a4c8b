# tests/unit/ai/test_api_log.py
# Unit tests for the JSON-lines API call log

import json
import re

from gitguy.ai.api_log import ApiCallLogger


# * Verify the log filename carries a uuid & epoch seconds
def test_filename(tmp_path):
    logger = ApiCallLogger(tmp_path)
    assert re.fullmatch(r"gitguy_[0-9a-f-]{36}_\d+\.log", logger.path.name)
    assert logger.path.parent == tmp_path


# * Verify each call is one JSON line w/ the expected fields
def test_log_lines(tmp_path):
    with ApiCallLogger(tmp_path / "logs") as logger:
        logger.log_call(
            "req-1", {"model": "m"}, response={"ok": True}, status_code=200, duration_ms=12.3456
        )
        logger.log_call("req-2", {"model": "m"}, error="boom")

    lines = logger.path.read_text(encoding="utf-8").splitlines()
    first, second = (json.loads(line) for line in lines)
    assert first["uuid"] == "req-1"
    assert first["request"] == {"model": "m"}
    assert first["response"] == {"ok": True}
    assert first["status_code"] == 200
    assert first["duration_ms"] == 12.346
    assert "timestamp" in first
    assert second["error"] == "boom"
    assert "response" not in second
    assert "status_code" not in second


# * Verify an unopened logger writes nothing
def test_unopened_is_noop(tmp_path):
    logger = ApiCallLogger(tmp_path)
    logger.log_call("req", {})
    logger.close()
    assert not logger.path.exists()
