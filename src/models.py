"""Pydantic models for the evaluation API."""

from pydantic import BaseModel, Field
from typing import List
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EvaluateRequest(BaseModel):
    """A single expression to evaluate."""

    expression: str


class EvaluateResponse(BaseModel):
    """Result of evaluating one expression."""

    expression: str
    result: str
    success: bool
    processing_time_ms: float
    timestamp: datetime = Field(default_factory=_utcnow)


class BatchEvaluateRequest(BaseModel):
    """Several independent expressions evaluated in order."""

    expressions: List[str] = Field(min_length=1, max_length=100)


class BatchEvaluateResponse(BaseModel):
    """Results in the same order as the request."""

    results: List[EvaluateResponse]


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
