# gitguy/ai/client.py
# Template-method base client & the OpenRouter client (OpenAI SDK w/ OpenRouter base URL)

from __future__ import annotations

import time
import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ..config.env_validator import OPENROUTER_ENV_VAR, get_missing_env_message
from ..config.settings import config_dir
from ..core.exceptions import (
    AIError,
    ConfigurationError,
    FileOperationError,
    MissingAPIKeyError,
    ProviderError,
    RateLimitError,
)
from ..core.verbose import vlog_ai_request, vlog_ai_response, vlog_debug
from ..gitguy_io.generics import read_text_safe
from .api_log import ApiCallLogger
from .models import resolve_model
from .parsing import parse_commit_and_pr
from .prompts import build_system_prompt, build_user_prompt
from .types import APICallContext, GenerateResult

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_HEADERS = {
    "HTTP-Referer": "https://github.com/stormlightlabs/gitguy",
    "X-Title": "GitGuy",
}


# * Abstract base class for AI provider clients using template-method pattern
# Orchestrates: preflight -> validate_model -> make_call -> parse
# Always returns GenerateResult, never raises exceptions to callers
class BaseClient(ABC):

    # * Subclasses must set this to their canonical provider ID
    provider_name: str = ""

    # * Template method - orchestrate generation w/ error handling
    def run_generate(self, diff: str, model: str) -> GenerateResult:
        try:
            self.preflight()
            validated_model = self.validate_model(model)

            system_prompt = self.system_prompt()
            user_prompt = build_user_prompt(diff)
            vlog_ai_request(
                provider=self.provider_name,
                model=validated_model,
                prompt_length=len(system_prompt) + len(user_prompt),
            )

            start_time = time.time()
            ctx = self.make_call(system_prompt, user_prompt, validated_model)
            duration_ms = (time.time() - start_time) * 1000

            result = self._process_response(ctx)

            vlog_ai_response(
                provider=self.provider_name,
                model=validated_model,
                response_length=len(ctx.raw_text) if ctx.raw_text else 0,
                success=result.success,
                duration_ms=duration_ms,
                error=result.error if not result.success else None,
            )
            return result
        except (ConfigurationError, FileOperationError) as e:
            vlog_debug("AI", f"Configuration error for {self.provider_name}: {e}")
            return GenerateResult(success=False, error=str(e))
        except AIError as e:
            vlog_ai_response(
                provider=self.provider_name,
                model=model,
                response_length=0,
                success=False,
                error=str(e),
            )
            return GenerateResult(success=False, error=str(e))
        except Exception as e:
            vlog_ai_response(
                provider=self.provider_name,
                model=model,
                response_length=0,
                success=False,
                error=f"Unexpected: {e}",
            )
            return GenerateResult(
                success=False, error=f"Unexpected error in {self.provider_name}: {e}"
            )

    # pre-call setup hook (credentials, template files)
    def preflight(self) -> None:
        pass

    # validate & resolve model name (override in subclasses for custom validation)
    def validate_model(self, model: str) -> str:
        return model

    def system_prompt(self) -> str:
        return build_system_prompt()

    # * Make provider-specific API call (subclasses must implement)
    @abstractmethod
    def make_call(
        self, system_prompt: str, user_prompt: str, model: str
    ) -> APICallContext:
        pass

    # convert reply text to GenerateResult via COMMIT:/PR: parsing
    def _process_response(self, ctx: APICallContext) -> GenerateResult:
        try:
            commit_message, pr_description = parse_commit_and_pr(ctx.raw_text)
        except AIError as e:
            return GenerateResult(success=False, raw_text=ctx.raw_text, error=str(e))
        return GenerateResult(
            success=True,
            commit_message=commit_message,
            pr_description=pr_description,
            raw_text=ctx.raw_text,
        )


# * OpenRouter chat completions client
class OpenRouterClient(BaseClient):

    provider_name = "openrouter"

    def __init__(
        self,
        api_key: str,
        pr_template: Path | str | None = None,
        api_logging: bool = True,
        log_dir: Path | None = None,
    ):
        self.api_key = api_key
        self.pr_template = Path(pr_template) if pr_template else None
        self.api_logging = api_logging
        self.log_dir = log_dir
        self._template_text: str | None = None

    def preflight(self) -> None:
        if not self.api_key:
            raise MissingAPIKeyError(
                get_missing_env_message(self.provider_name),
                self.provider_name,
                OPENROUTER_ENV_VAR,
            )
        if self.pr_template is not None:
            self._template_text = read_text_safe(self.pr_template)

    def validate_model(self, model: str) -> str:
        return resolve_model(model)

    def system_prompt(self) -> str:
        return build_system_prompt(self._template_text)

    # * Make OpenRouter API call; every attempt is recorded in the API call log
    def make_call(
        self, system_prompt: str, user_prompt: str, model: str
    ) -> APICallContext:
        import openai
        from openai import OpenAI

        client = OpenAI(
            api_key=self.api_key,
            base_url=OPENROUTER_BASE_URL,
            default_headers=OPENROUTER_HEADERS,
        )
        request: dict[str, Any] = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }

        api_log = ApiCallLogger(self.log_dir or config_dir())
        if self.api_logging:
            api_log.open()
        request_uuid = str(uuid.uuid4())
        start_time = time.time()
        try:
            try:
                resp = client.chat.completions.create(**request)
            except Exception as e:
                duration_ms = (time.time() - start_time) * 1000
                status_code = getattr(e, "status_code", None)
                api_log.log_call(
                    request_uuid,
                    request,
                    error=str(e),
                    status_code=status_code if isinstance(status_code, int) else None,
                    duration_ms=duration_ms,
                )

                # Safely check for provider-specific exception types (may not exist in mocks)
                rate_limit_error = getattr(openai, "RateLimitError", None)
                api_status_error = getattr(openai, "APIStatusError", None)
                api_connection_error = getattr(openai, "APIConnectionError", None)

                if rate_limit_error and isinstance(e, rate_limit_error):
                    raise RateLimitError(
                        f"OpenRouter rate limit exceeded: {e}",
                        provider=self.provider_name,
                        retry_after=getattr(e, "retry_after", None),
                    ) from e
                if api_status_error and isinstance(e, api_status_error):
                    status = getattr(e, "status_code", "unknown")
                    message = getattr(e, "message", str(e))
                    raise ProviderError(
                        f"OpenRouter API error ({status}): {message}",
                        provider=self.provider_name,
                        status_code=status if isinstance(status, int) else None,
                    ) from e
                if api_connection_error and isinstance(e, api_connection_error):
                    raise ProviderError(
                        f"OpenRouter connection error: {e}",
                        provider=self.provider_name,
                    ) from e
                raise AIError(f"OpenRouter API error: {e}") from e

            duration_ms = (time.time() - start_time) * 1000
            response = resp.model_dump() if hasattr(resp, "model_dump") else None

            choices = getattr(resp, "choices", None) or []
            if not choices:
                api_log.log_call(
                    request_uuid,
                    request,
                    response=response,
                    error="no choices in API response",
                    status_code=200,
                    duration_ms=duration_ms,
                )
                raise AIError("no choices in API response")

            api_log.log_call(
                request_uuid,
                request,
                response=response,
                status_code=200,
                duration_ms=duration_ms,
            )
            raw_text = choices[0].message.content or ""
        finally:
            api_log.close()

        return APICallContext(
            raw_text=raw_text, provider_name=self.provider_name, model=model
        )
