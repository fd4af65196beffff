"""Job input and prediction result data structures."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Verdict(str, Enum):
    """Binary classification of a job posting."""

    LEGIT = "Legit"
    FAKE = "Fake"


@dataclass
class JobInput:
    """A job posting as submitted by the user."""

    title: str
    company: str
    description: str
    location: Optional[str] = None
    department: Optional[str] = None

    @staticmethod
    def _clean_nan(value: Any) -> Optional[str]:
        """Convert 'nan'/'NaN'/'NAN' strings to None, other values to str."""
        if value is None:
            return None
        if not isinstance(value, str):
            value = str(value)
        if value.strip().lower() == "nan":
            return None
        return value

    def __post_init__(self):
        """Normalize fields after initialization."""
        # Spreadsheet exports turn empty cells into "nan"
        self.title = self._clean_nan(self.title) or ""
        self.company = self._clean_nan(self.company) or ""
        self.description = self._clean_nan(self.description) or ""
        self.location = self._clean_nan(self.location)
        self.department = self._clean_nan(self.department)

    @property
    def has_company(self) -> bool:
        return bool(self.company.strip())

    def searchable_text(self) -> str:
        """All user-supplied fields joined for keyword scanning."""
        return " ".join(
            [
                self.title,
                self.company,
                self.location or "",
                self.department or "",
                self.description,
            ]
        )

    def to_payload(self) -> dict[str, str]:
        """JSON body sent to remote scoring backends."""
        payload = {
            "title": self.title,
            "company": self.company,
            "description": self.description,
        }
        if self.location is not None:
            payload["location"] = self.location
        if self.department is not None:
            payload["department"] = self.department
        return payload


# Wire name -> attribute name for the optional fields of a result
OPTIONAL_FIELDS = {
    "title": "title",
    "company": "company",
    "location": "location",
    "department": "department",
    "description": "description",
    "riskFactors": "risk_factors",
    "trustworthyIndicators": "trustworthy_indicators",
    "analysisComment": "analysis_comment",
}


@dataclass
class PredictionResult:
    """Canonical prediction result shared by every scoring backend.

    ``confidence`` is always in [0, 1]. Optional fields stay ``None`` when
    the producing backend did not report them, so callers can tell
    "no evidence" apart from "evidence not supported".
    """

    verdict: Verdict
    confidence: float
    keywords: list[str] = field(default_factory=list)
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    department: Optional[str] = None
    description: Optional[str] = None
    risk_factors: Optional[list[str]] = None
    trustworthy_indicators: Optional[list[str]] = None
    analysis_comment: Optional[str] = None

    @property
    def is_fake(self) -> bool:
        return self.verdict is Verdict.FAKE

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire contract, omitting absent fields."""
        data: dict[str, Any] = {
            "verdict": self.verdict.value,
            "confidence": self.confidence,
            "keywords": list(self.keywords),
        }
        for wire_name, attr in OPTIONAL_FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            data[wire_name] = list(value) if isinstance(value, list) else value
        return data
