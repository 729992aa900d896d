"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass

from pydantic import BaseModel


class SummarizeIn(BaseModel):
    text: str


class SummarizeOut(BaseModel):
    summary: str


class ErrorOut(BaseModel):
    error: str


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling parameters sent with every generation call."""
    temperature: float = 0.3
    top_p: float = 0.95
    top_k: int = 40
    max_output_tokens: int = 100

    def to_payload(self) -> dict[str, float | int]:
        return {
            "temperature": self.temperature,
            "topP": self.top_p,
            "topK": self.top_k,
            "maxOutputTokens": self.max_output_tokens,
        }


@dataclass
class Generation:
    """Text generation result metadata."""
    text: str
    model: str
    latency_ms: int
