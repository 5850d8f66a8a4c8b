# tests/unit/ai/test_openrouter_client.py
# Unit tests for the OpenRouter client w/ the OpenAI SDK mocked out

import json
from unittest.mock import MagicMock, patch

import pytest

from gitguy.ai.client import OPENROUTER_BASE_URL, OpenRouterClient
from gitguy.ai.models import MODEL_ALIASES


@pytest.fixture
def openai_client():
    with patch("openai.OpenAI") as openai_cls:
        yield openai_cls


def _client(tmp_path, **kwargs):
    kwargs.setdefault("api_logging", False)
    return OpenRouterClient("sk-test", log_dir=tmp_path / "logs", **kwargs)


class TestSuccess:

    # * Verify a well-formed reply becomes a successful result
    def test_generate(self, tmp_path, openai_client, mock_openai_response, sample_reply):
        create = openai_client.return_value.chat.completions.create
        create.return_value = mock_openai_response(sample_reply)

        result = _client(tmp_path).run_generate("diff text", "kimi-k2")

        assert result.success
        assert result.commit_message == "feat(viewer): add synchronized scrolling"
        assert result.pr_description.startswith("## Summary")
        assert result.raw_text == sample_reply

        assert openai_client.call_args.kwargs["base_url"] == OPENROUTER_BASE_URL
        assert openai_client.call_args.kwargs["api_key"] == "sk-test"
        request = create.call_args.kwargs
        assert request["model"] == MODEL_ALIASES["kimi-k2"]
        assert request["messages"][0]["role"] == "system"
        assert "diff text" in request["messages"][1]["content"]

    # * Verify the PR template is read into the system message
    def test_template_in_system_prompt(
        self, tmp_path, openai_client, mock_openai_response, sample_reply
    ):
        template = tmp_path / "template.md"
        template.write_text("## Ticket\n## Risk", encoding="utf-8")
        create = openai_client.return_value.chat.completions.create
        create.return_value = mock_openai_response(sample_reply)

        _client(tmp_path, pr_template=template).run_generate("diff", "deepseek-v3")

        system = create.call_args.kwargs["messages"][0]["content"]
        assert system.endswith("## Ticket\n## Risk")

    # * Verify every call is appended to the API log when logging is on
    def test_api_log_written(self, tmp_path, openai_client, mock_openai_response, sample_reply):
        openai_client.return_value.chat.completions.create.return_value = (
            mock_openai_response(sample_reply)
        )
        _client(tmp_path, api_logging=True).run_generate("diff", "deepseek-v3")

        logs = list((tmp_path / "logs").glob("gitguy_*.log"))
        assert len(logs) == 1
        entry = json.loads(logs[0].read_text(encoding="utf-8").strip())
        assert entry["status_code"] == 200
        assert entry["request"]["model"] == MODEL_ALIASES["deepseek-v3"]


class TestFailures:

    # * Verify a missing key fails before any request & names the env var
    def test_missing_key(self, tmp_path, openai_client):
        result = OpenRouterClient("", log_dir=tmp_path).run_generate("diff", "deepseek-v3")
        assert not result.success
        assert "OPENROUTER_API_KEY" in result.error
        openai_client.assert_not_called()

    # * Verify SDK failures are reported, not raised
    def test_sdk_exception(self, tmp_path, openai_client):
        openai_client.return_value.chat.completions.create.side_effect = Exception("boom")
        result = _client(tmp_path).run_generate("diff", "deepseek-v3")
        assert not result.success
        assert result.error == "OpenRouter API error: boom"

    # * Verify failed calls are still logged
    def test_failure_logged(self, tmp_path, openai_client):
        openai_client.return_value.chat.completions.create.side_effect = Exception("boom")
        _client(tmp_path, api_logging=True).run_generate("diff", "deepseek-v3")
        (log,) = (tmp_path / "logs").glob("gitguy_*.log")
        assert json.loads(log.read_text(encoding="utf-8"))["error"] == "boom"

    # * Verify an empty choices list is an error
    def test_no_choices(self, tmp_path, openai_client):
        response = MagicMock()
        response.choices = []
        openai_client.return_value.chat.completions.create.return_value = response
        result = _client(tmp_path).run_generate("diff", "deepseek-v3")
        assert result.error == "no choices in API response"

    # * Verify an unparseable reply keeps the raw text for debugging
    def test_parse_failure(self, tmp_path, openai_client, mock_openai_response):
        openai_client.return_value.chat.completions.create.return_value = (
            mock_openai_response("I cannot help with that.")
        )
        result = _client(tmp_path).run_generate("diff", "deepseek-v3")
        assert not result.success
        assert result.raw_text == "I cannot help with that."
        assert "no commit message" in result.error

    # * Verify a missing template file is reported
    def test_missing_template(self, tmp_path, openai_client):
        client = _client(tmp_path, pr_template=tmp_path / "nope.md")
        result = client.run_generate("diff", "deepseek-v3")
        assert not result.success
        assert "Could not read" in result.error
        openai_client.assert_not_called()
