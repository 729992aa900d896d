"""Environment-driven settings.

A `.env` file in the working directory is loaded first; variables already
set in the process environment win. Everything except the credential is
read once at import. The credential is looked up per request via
`API_KEY_ENV` so a misconfigured process keeps answering with a JSON error
instead of failing to start.
"""
from __future__ import annotations
import os

from dotenv import find_dotenv, load_dotenv

from summary_gateway.common.schema import GenerationConfig

load_dotenv(find_dotenv(usecwd=True))

API_KEY_ENV = "GOOGLE_API_KEY"

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# Custom prompt file with an {{input}} slot; the built-in template otherwise.
PROMPT_TEMPLATE_PATH = os.getenv("PROMPT_TEMPLATE") or None

GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com")
GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "120"))

# Most capable first, older and more available models last.
DEFAULT_MODEL_CANDIDATES = (
    "gemini-2.0-flash",
    "gemini-1.5-flash",
    "gemini-1.5-pro",
    "gemini-1.0-pro",
)


def model_candidates(primary: str | None = None) -> tuple[str, ...]:
    """
    Build the ordered candidate chain.

    Args:
        primary: Optional model id promoted to the front of the chain.

    Returns:
        Deduplicated model ids in priority order.
    """
    chain = [primary] if primary else []
    chain.extend(DEFAULT_MODEL_CANDIDATES)
    return tuple(dict.fromkeys(chain))


MODEL_CANDIDATES = model_candidates(os.getenv("GEMINI_MODEL") or None)

GENERATION_CONFIG = GenerationConfig(
    temperature=float(os.getenv("TEMPERATURE", "0.3")),
    top_p=float(os.getenv("TOP_P", "0.95")),
    top_k=int(os.getenv("TOP_K", "40")),
    max_output_tokens=int(os.getenv("MAX_OUTPUT_TOKENS", "100")),
)


def get_api_key() -> str | None:
    """Return the provider credential, or None when unset or blank."""
    value = os.getenv(API_KEY_ENV, "").strip()
    return value or None
