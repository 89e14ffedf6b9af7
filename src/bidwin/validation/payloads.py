"""Wire-level schemas for agent envelopes and their ``result`` payloads.

These mirror the JSON the agent service sends. They are intentionally
narrower than the domain dataclasses: required fields and scalar types are
enforced here, element-level leniency is applied afterwards by the
validator.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EnvelopePayload(BaseModel):
    """Top-level agent response: ``{status, result, metadata?}``."""

    status: Any = "success"
    result: Any
    metadata: Any = None
    error: Any = None
    message: Any = None


class GenerationPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    answer: str
    status: Literal["success", "missing_info"]
    citations: list[Any]
    warning: str | None = None

    @model_validator(mode="after")
    def _answer_required_on_success(self) -> GenerationPayload:
        if self.status == "success" and not self.answer:
            raise ValueError("answer is empty although status is 'success'")
        return self


class AuditPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    compliance_score: float = Field(allow_inf_nan=False)
    total_sentences: float = Field(allow_inf_nan=False, ge=0)
    analysis: list[Any]
    summary: str
