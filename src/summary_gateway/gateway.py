"""Summarization gateway: validate, prompt, try each model in order, classify.

`SummarizationGateway.summarize` always returns a (status, body) pair where
body is either {"summary": ...} or {"error": ...}.
"""
from __future__ import annotations
import logging
from typing import Callable, Protocol, Sequence

import pydantic

from summary_gateway.common.config import (
    GENERATION_CONFIG,
    MODEL_CANDIDATES,
    PROMPT_TEMPLATE_PATH,
    get_api_key,
)
from summary_gateway.common.errors import (
    ConfigurationError,
    ErrorKind,
    GatewayError,
    ModelUnavailableError,
    ValidationError,
    classify_error,
    error_for,
)
from summary_gateway.common.schema import (
    ErrorOut,
    Generation,
    GenerationConfig,
    SummarizeIn,
    SummarizeOut,
)
from summary_gateway.common.templates import load_template, render_prompt
from summary_gateway.provider.gemini import GeminiClient

LOGGER = logging.getLogger("summary_gateway.gateway")

NO_SUMMARY = "No summary returned."


class GenerationClient(Protocol):
    def generate_content(self, model: str, prompt: str, config: GenerationConfig) -> Generation: ...


def parse_text(raw_body: bytes | str) -> str:
    """
    Extract `text` from a JSON request body.

    Raises:
        ValidationError: body is not a JSON object with a non-blank string `text`.
    """
    try:
        body = SummarizeIn.model_validate_json(raw_body)
    except pydantic.ValidationError as e:
        raise ValidationError() from e
    if not body.text.strip():
        raise ValidationError()
    return body.text


class SummarizationGateway:
    """Ordered model fallback over a generation client.

    Args:
        client_factory: Builds a client from the API key, once per request.
        candidates: Model ids in priority order.
        config: Sampling parameters used for every attempt.
        template_path: Prompt file with an {{input}} slot; built-in template when None.
    """

    def __init__(
        self,
        client_factory: Callable[[str], GenerationClient] = GeminiClient,
        candidates: Sequence[str] = MODEL_CANDIDATES,
        config: GenerationConfig = GENERATION_CONFIG,
        template_path: str | None = PROMPT_TEMPLATE_PATH,
    ) -> None:
        self.client_factory = client_factory
        self.candidates = tuple(candidates)
        self.config = config
        self.template = load_template(template_path)

    def summarize(self, raw_body: bytes | str) -> tuple[int, dict[str, str]]:
        try:
            return 200, SummarizeOut(summary=self._summarize(raw_body)).model_dump()
        except GatewayError as e:
            return e.status_code, ErrorOut(error=str(e)).model_dump()
        except Exception as e:
            kind = classify_error(e)
            LOGGER.exception("Gemini API Error (%s): %s", kind.value, e)
            err = error_for(kind)
            return err.status_code, ErrorOut(error=str(err)).model_dump()

    def _summarize(self, raw_body: bytes | str) -> str:
        api_key = get_api_key()
        if api_key is None:
            LOGGER.error("Credential missing from environment")
            raise ConfigurationError()

        text = parse_text(raw_body)
        prompt = render_prompt(self.template, text)
        client = self.client_factory(api_key)

        last_error: Exception | None = None
        for model in self.candidates:
            try:
                result = client.generate_content(model, prompt, self.config)
            except Exception as e:
                last_error = e
                kind = classify_error(e)
                if kind is ErrorKind.INVALID_CREDENTIAL:
                    LOGGER.error("Gemini rejected the API key (model %s): %s", model, e)
                    raise error_for(kind) from e
                if kind is not ErrorKind.MODEL_UNAVAILABLE:
                    LOGGER.error("Gemini API Error (model %s): %s", model, e)
                    raise error_for(kind) from e
                LOGGER.warning('Gemini model "%s" unavailable, trying fallback: %s', model, e)
                continue

            LOGGER.info("Summarized %d chars with %s in %sms", len(text), model, result.latency_ms)
            return result.text or NO_SUMMARY

        LOGGER.error("Gemini API Error, all %d models unavailable: %s", len(self.candidates), last_error)
        raise ModelUnavailableError()
