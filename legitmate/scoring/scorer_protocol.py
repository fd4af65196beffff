"""Scorer protocol for pluggable scoring strategies.

Defines the interface that the raw-text and structured heuristics both
satisfy, so the local fallback tier can use either one.
"""
from typing import Protocol, runtime_checkable

from legitmate.models import JobInput, PredictionResult


@runtime_checkable
class Scorer(Protocol):
    """Protocol for job posting scoring strategies."""

    name: str

    def score(self, job: JobInput) -> PredictionResult:
        """Score a single job posting and return a PredictionResult."""
        ...
