# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home(), $HOME & XDG_CONFIG_HOME to an isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()
    config_root = fake_home / ".config"
    gitguy_dir = config_root / "gitguy"
    gitguy_dir.mkdir(parents=True)

    # Create minimal config.json w/ test defaults
    config_data = {
        "model": "deepseek-v3",
        "api_key": "",
        "out_pr": "PR_{{ID}}.md",
        "pr_template": "",
        "side_by_side": True,
        "syntax_highlight": False,
        "show_whitespace": False,
        "context_lines": 3,
        "recent_commits": 10,
        "theme": "deep_blue",
        "api_logging": False,
    }
    config_file = gitguy_dir / "config.json"
    config_file.write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_root))
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)

    # ! reset global settings_manager state & pin its config_path to the isolated location
    from gitguy.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset output manager to NullOutputManager for test isolation
    from gitguy.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    settings_manager._settings = None
    settings_manager.config_path = None
    reset_output_manager()


@pytest.fixture(autouse=True)
def block_network():
    # Block all network calls by default w/ pytest-socket when it is installed
    try:
        pytest_socket = pytest.importorskip("pytest_socket")
        pytest_socket.disable_socket()
    except pytest.skip.Exception:
        pass


@pytest.fixture
def config_file(isolate_config):
    return isolate_config / ".config" / "gitguy" / "config.json"


@pytest.fixture
def mock_env_vars(monkeypatch):
    # Seed test environment w/ the OpenRouter key
    monkeypatch.setenv("OPENROUTER_API_KEY", "test-openrouter-key-12345")
    return {"OPENROUTER_API_KEY": "test-openrouter-key-12345"}


@pytest.fixture
def mock_openai_response():
    # Chat completion shaped like the OpenAI SDK's return value
    def _make(content: str):
        response = MagicMock()
        response.choices = [MagicMock(message=MagicMock(content=content))]
        response.model_dump.return_value = {"choices": [{"message": {"content": content}}]}
        return response

    return _make


@pytest.fixture
def sample_reply():
    return (
        "COMMIT: feat(viewer): add synchronized scrolling\n"
        "PR:\n"
        "## Summary\n"
        "Adds locked scrolling between panes.\n"
    )


@pytest.fixture
def sample_unified_diff():
    return (
        "diff --git a/app.py b/app.py\n"
        "--- a/app.py\n"
        "+++ b/app.py\n"
        "@@ -1,3 +1,4 @@\n"
        " line 1\n"
        "-line 2\n"
        "+modified line 2\n"
        " line 3\n"
        "+line 4\n"
    )


@pytest.fixture
def null_logger():
    from gitguy.core.output import NullOutputManager

    return NullOutputManager()
