"""Structured-field risk heuristic (the "full" strategy).

Reproduces the hosted scoring service's policy table so local results
carry the same evidence fields as remote ones.
"""
import logging
from dataclasses import dataclass, field

from legitmate.models import JobInput, PredictionResult, Verdict
from legitmate.scoring.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)


@dataclass
class Evidence:
    """Running tally of suspicious and trustworthy signals."""

    suspicious_score: float = 0.0
    trustworthy_score: float = 0.0
    suspicious_hits: list[str] = field(default_factory=list)
    trustworthy_hits: list[str] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)
    trustworthy_indicators: list[str] = field(default_factory=list)

    @property
    def total(self) -> float:
        return self.suspicious_score - self.trustworthy_score


class StructuredRiskScorer:
    """Score a JobInput field by field against the policy table."""

    name = "full"

    SHORT_DESCRIPTION = 100
    DETAILED_DESCRIPTION = 300
    LEGIT_MAX_TOTAL = 1.5
    MIN_CONFIDENCE = 45
    MAX_CONFIDENCE = 95

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def score(self, job: JobInput) -> PredictionResult:
        """
        Score a structured job posting.

        Args:
            job: Job posting to score

        Returns:
            PredictionResult with every evidence field populated
        """
        evidence = self.collect_evidence(job)
        total = evidence.total

        confidence_pct = min(max(abs(total) / 10 * 100, self.MIN_CONFIDENCE), self.MAX_CONFIDENCE)
        verdict = Verdict.LEGIT if total <= self.LEGIT_MAX_TOTAL else Verdict.FAKE

        logger.debug(
            "Structured score: suspicious=%.1f trustworthy=%.1f total=%.1f -> %s",
            evidence.suspicious_score, evidence.trustworthy_score, total, verdict.value,
        )

        return PredictionResult(
            verdict=verdict,
            confidence=round(confidence_pct) / 100,
            keywords=evidence.suspicious_hits + evidence.trustworthy_hits,
            title=job.title,
            company=job.company,
            location=job.location,
            department=job.department,
            description=job.description,
            risk_factors=evidence.risk_factors,
            trustworthy_indicators=evidence.trustworthy_indicators,
            analysis_comment=self._comment(verdict, evidence),
        )

    def collect_evidence(self, job: JobInput) -> Evidence:
        """Apply every row of the policy table to a job posting."""
        text = f"{job.title} {job.company} {job.description}".lower()
        evidence = Evidence()

        for keyword in self.lexicon.red_flag_keywords:
            if keyword in text and keyword not in evidence.suspicious_hits:
                evidence.suspicious_score += 1
                evidence.suspicious_hits.append(keyword)

        for indicator in self.lexicon.trustworthy_indicators:
            if indicator in text and indicator not in evidence.trustworthy_hits:
                evidence.trustworthy_score += 0.5
                evidence.trustworthy_hits.append(indicator)

        description_length = len(job.description)
        if description_length < self.SHORT_DESCRIPTION:
            evidence.suspicious_score += 2
            evidence.risk_factors.append("Very short job description")

        if not job.has_company:
            evidence.suspicious_score += 1.5
            evidence.risk_factors.append("No company name provided")

        if "$" in text and ("week" in text or "day" in text):
            evidence.suspicious_score += 1
            evidence.risk_factors.append("Promises of high daily/weekly earnings")

        if description_length > self.DETAILED_DESCRIPTION:
            evidence.trustworthy_score += 1
            evidence.trustworthy_indicators.append("Detailed job description")

        if job.has_company:
            evidence.trustworthy_score += 0.5
            evidence.trustworthy_indicators.append("Company name provided")

        return evidence

    def _comment(self, verdict: Verdict, evidence: Evidence) -> str:
        if verdict is Verdict.LEGIT:
            if evidence.trustworthy_hits:
                return (
                    "This appears to be a legitimate opportunity with "
                    f"{len(evidence.trustworthy_hits)} positive indicators."
                )
            return "This posting shows standard characteristics of legitimate job opportunities."

        if evidence.suspicious_hits:
            return (
                f"Warning: Contains {len(evidence.suspicious_hits)} suspicious elements "
                "commonly found in fake job postings."
            )
        return "This posting exhibits several red flags typical of fraudulent job opportunities."
