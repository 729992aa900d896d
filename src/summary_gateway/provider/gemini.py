"""Client for the Gemini `generateContent` REST endpoint."""
from __future__ import annotations
import logging
import time
from typing import Any

import httpx

from summary_gateway.common.config import GEMINI_BASE_URL, GEMINI_TIMEOUT
from summary_gateway.common.errors import ProviderAPIError
from summary_gateway.common.schema import Generation, GenerationConfig

LOGGER = logging.getLogger("summary_gateway.provider.gemini")


class GeminiClient:
    """Thin synchronous wrapper over one model call.

    Timeouts are whatever `timeout` says; no retries happen here.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = GEMINI_BASE_URL,
        timeout: float = GEMINI_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def generate_content(self, model: str, prompt: str, config: GenerationConfig) -> Generation:
        """
        Generate text for a single-turn user prompt.

        Args:
            model: Model id, e.g. "gemini-2.0-flash".
            prompt: Full prompt text.
            config: Sampling parameters.

        Returns:
            Generation with the concatenated candidate text (may be empty).

        Raises:
            ProviderAPIError: on HTTP or transport failure.
        """
        url = f"{self.base_url}/v1beta/models/{model}:generateContent"
        headers = {"x-goog-api-key": self.api_key}
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": config.to_payload(),
        }

        start = time.time()
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                r = client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise ProviderAPIError(str(e) or e.__class__.__name__) from e

        if r.is_error:
            raise ProviderAPIError(_error_message(r), status_code=r.status_code)

        latency = int((time.time() - start) * 1000)
        LOGGER.debug("Model %s answered in %sms", model, latency)
        return Generation(text=extract_text(r.json()), model=model, latency_ms=latency)


def _error_message(r: httpx.Response) -> str:
    detail = ""
    try:
        body = r.json()
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            detail = str(body["error"].get("message", ""))
    except ValueError:
        detail = r.text
    return f"[{r.status_code} {r.reason_phrase}] {detail}".strip()


def extract_text(data: Any) -> str:
    """Join the text parts of the first candidate; empty when there is none."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(str(p.get("text", "")) for p in parts if isinstance(p, dict))
