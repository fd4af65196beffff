"""Reconcile backend responses into the canonical PredictionResult."""
import logging
import math
from collections.abc import Mapping
from typing import Any, Optional

from legitmate.exceptions import BackendResponseError
from legitmate.models import PredictionResult, Verdict

logger = logging.getLogger(__name__)

TEXT_FIELDS = {
    "title": "title",
    "company": "company",
    "location": "location",
    "department": "department",
    "description": "description",
    "analysisComment": "analysis_comment",
}

LIST_FIELDS = {
    "riskFactors": "risk_factors",
    "trustworthyIndicators": "trustworthy_indicators",
}


def normalize(raw: Any) -> PredictionResult:
    """
    Map a backend response onto the canonical result contract.

    Verdicts are matched case-insensitively and anything unrecognized is
    treated as Fake. Confidences above 1 are read as percentages. Evidence
    fields pass through untouched and stay absent when the backend omitted
    them.

    Args:
        raw: Decoded JSON object, or an existing PredictionResult

    Returns:
        PredictionResult

    Raises:
        BackendResponseError: If raw is not an object at all
    """
    if isinstance(raw, PredictionResult):
        raw = raw.to_dict()
    if not isinstance(raw, Mapping):
        raise BackendResponseError(
            f"Expected a JSON object from backend, got {type(raw).__name__}"
        )

    verdict_value = raw.get("verdict") or raw.get("result")
    result = PredictionResult(
        verdict=normalize_verdict(verdict_value),
        confidence=normalize_confidence(raw.get("confidence")),
        keywords=_dedupe(raw.get("keywords")),
    )

    for wire_name, attr in TEXT_FIELDS.items():
        value = _lookup(raw, wire_name, attr)
        if value is not None:
            setattr(result, attr, value if isinstance(value, str) else str(value))

    for wire_name, attr in LIST_FIELDS.items():
        value = _lookup(raw, wire_name, attr)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            setattr(result, attr, [str(v) for v in value])
        else:
            setattr(result, attr, [str(value)])

    return result


def normalize_verdict(value: Any) -> Verdict:
    """Case-insensitive verdict mapping; unknown values fail to Fake."""
    if isinstance(value, str) and value.strip().lower() == "legit":
        return Verdict.LEGIT
    if not (isinstance(value, str) and value.strip().lower() == "fake"):
        logger.warning("Unrecognized verdict %r, treating as Fake", value)
    return Verdict.FAKE


def normalize_confidence(value: Any) -> float:
    """Rescale a 0-100 confidence to [0, 1] and clamp."""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        logger.warning("Unparseable confidence %r, using 0", value)
        return 0.0
    if math.isnan(confidence):
        return 0.0

    if confidence > 1:
        confidence /= 100
    return max(0.0, min(1.0, confidence))


def _lookup(raw: Mapping, wire_name: str, attr: str) -> Optional[Any]:
    value = raw.get(wire_name)
    if value is None:
        value = raw.get(attr)
    return value


def _dedupe(keywords: Any) -> list[str]:
    """Keywords as strings, first occurrence wins."""
    if not isinstance(keywords, (list, tuple)):
        return []
    seen: list[str] = []
    for keyword in keywords:
        text = str(keyword)
        if text not in seen:
            seen.append(text)
    return seen
