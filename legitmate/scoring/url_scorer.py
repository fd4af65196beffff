"""Domain-reputation heuristic for postings submitted as a link only."""
import logging
from typing import Optional
from urllib.parse import parse_qsl, urlsplit

from legitmate.models import PredictionResult, Verdict
from legitmate.scoring.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)

REFERRAL_KEYS = {"ref", "referral"}


class UrlRiskScorer:
    """Score a job link by the reputation of its host.

    Works on a 0-100 scale internally and clamps to [45, 95] before
    rescaling: without body text the verdict is never very certain.
    """

    name = "url"

    REPUTABLE_CONFIDENCE = 90
    SHORTENER_CONFIDENCE = 85
    MIXED_CONFIDENCE = 60
    UNKNOWN_CONFIDENCE = 70
    REFERRAL_PENALTY = 10
    LONG_URL_PENALTY = 5
    LONG_URL_LENGTH = 200
    MIN_CONFIDENCE = 45
    MAX_CONFIDENCE = 95

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def score_url(self, url: str) -> PredictionResult:
        """
        Score a job posting link.

        Malformed URLs are scored with an empty host rather than raising.

        Args:
            url: Link to the job posting

        Returns:
            PredictionResult with every evidence field populated
        """
        url = url or ""
        host = extract_host(url)

        verdict = Verdict.LEGIT
        risk_factors: list[str] = []
        trustworthy_indicators: list[str] = []

        domain_class = self.classify_host(host)
        if domain_class == "reputable":
            confidence = self.REPUTABLE_CONFIDENCE
            trustworthy_indicators.append("Posted on reputable job board")
            comment = "Job posted on a well-known, legitimate job platform."
        elif domain_class == "shortener":
            confidence = self.SHORTENER_CONFIDENCE
            verdict = Verdict.FAKE
            risk_factors.append("Shortened URL - potential redirect")
            comment = "Warning: Shortened URL detected. This could redirect to a malicious site."
        elif domain_class == "mixed":
            confidence = self.MIXED_CONFIDENCE
            risk_factors.append("Posted on platform with mixed reputation")
            comment = (
                f"Posted on {host}, a platform with mixed reputation - "
                "exercise extra caution and verify independently."
            )
        else:
            confidence = self.UNKNOWN_CONFIDENCE
            comment = "Unknown domain - please verify the legitimacy of this job posting independently."

        if has_referral_params(url):
            risk_factors.append("Contains affiliate/referral parameters")
            confidence -= self.REFERRAL_PENALTY

        if len(url) > self.LONG_URL_LENGTH:
            risk_factors.append("Unusually long URL")
            confidence -= self.LONG_URL_PENALTY

        confidence = max(self.MIN_CONFIDENCE, min(self.MAX_CONFIDENCE, confidence))
        logger.debug("URL score for host '%s' (%s): %d%%", host, domain_class, confidence)

        return PredictionResult(
            verdict=verdict,
            confidence=confidence / 100,
            keywords=[f"Domain: {host}"],
            title="Job posting from URL",
            company=host,
            location="Not specified",
            description=f"Analysis based on URL: {url}",
            risk_factors=risk_factors,
            trustworthy_indicators=trustworthy_indicators,
            analysis_comment=comment,
        )

    def classify_host(self, host: str) -> Optional[str]:
        """Return 'reputable', 'shortener', 'mixed' or None for unknown hosts."""
        if not host:
            return None
        for domain_class, domains in (
            ("reputable", self.lexicon.reputable_domains),
            ("shortener", self.lexicon.shortener_domains),
            ("mixed", self.lexicon.mixed_domains),
        ):
            if any(host == d or host.endswith("." + d) for d in domains):
                return domain_class
        return None


def extract_host(url: str) -> str:
    """Lower-cased host without a leading 'www.', or '' when unparseable."""
    try:
        host = urlsplit(url.strip()).hostname or ""
    except ValueError:
        return ""
    if host.startswith("www."):
        host = host[4:]
    return host


def has_referral_params(url: str) -> bool:
    """Check for referral or affiliate tracking in a URL."""
    if "affiliate" in url.lower():
        return True
    try:
        query = urlsplit(url).query
    except ValueError:
        return False
    return any(key.lower() in REFERRAL_KEYS for key, _ in parse_qsl(query, keep_blank_values=True))
