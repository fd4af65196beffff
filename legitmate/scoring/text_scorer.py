"""Raw-text risk heuristic (the "quick" strategy)."""
import logging
import re

from legitmate.models import JobInput, PredictionResult, Verdict
from legitmate.scoring.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)

# Currency symbol, optional whitespace, then 3+ digits
MONEY_PATTERN = re.compile(r"[$£€₹]\s?\d{3,}")


class TextRiskScorer:
    """Score concatenated job text by suspicious-keyword density.

    Confidence lives in [0.5, 0.99]: the heuristic never claims certainty.
    """

    name = "quick"

    FAKE_THRESHOLD = 0.35
    MIN_DENOMINATOR = 6
    MONEY_BONUS = 0.10
    URGENCY_BONUS = 0.05

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def score(self, job: JobInput) -> PredictionResult:
        """Score every field of a job posting as one block of text."""
        return self.score_text(job.searchable_text())

    def score_text(self, text: str) -> PredictionResult:
        """
        Score free text.

        Args:
            text: Any job text, case is ignored

        Returns:
            PredictionResult with verdict, confidence and matched terms only
        """
        lowered = (text or "").lower()
        hits = self.find_hits(lowered)

        score = self.risk_score(lowered, hits)
        confidence = 0.5 + score * 0.49
        verdict = self.verdict_for(score)

        logger.debug("Text score %.3f (%d hits) -> %s", score, len(hits), verdict.value)
        return PredictionResult(verdict=verdict, confidence=confidence, keywords=hits)

    def find_hits(self, lowered: str) -> list[str]:
        """Lexicon terms present in the text, in lexicon order."""
        hits: list[str] = []
        for term in self.lexicon.suspicious_terms:
            if term in lowered and term not in hits:
                hits.append(term)
        return hits

    def risk_score(self, lowered: str, hits: list[str]) -> float:
        """Length-normalized hit ratio plus money/urgency bonuses, in [0, 1]."""
        denominator = max(self.MIN_DENOMINATOR, len(self.lexicon.suspicious_terms) / 3)
        score = len(hits) / denominator

        if MONEY_PATTERN.search(lowered):
            score += self.MONEY_BONUS
        if self.has_urgency(lowered):
            score += self.URGENCY_BONUS

        return max(0.0, min(1.0, score))

    def has_urgency(self, lowered: str) -> bool:
        # Plain substring test, so "known" counts as "now"
        return any(term in lowered for term in self.lexicon.urgency_terms)

    @classmethod
    def verdict_for(cls, score: float) -> Verdict:
        """Fake only when the score is strictly above the threshold."""
        return Verdict.FAKE if score > cls.FAKE_THRESHOLD else Verdict.LEGIT
