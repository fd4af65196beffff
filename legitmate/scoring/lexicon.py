"""Keyword and domain tables driving the heuristic scorers."""
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Union

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lexicon:
    """Static tables shared by every heuristic scoring strategy.

    ``suspicious_terms`` feeds the raw-text scorer, ``red_flag_keywords``
    and ``trustworthy_indicators`` feed the structured scorer, and the three
    domain lists feed the URL scorer. All terms are lower case.
    """

    suspicious_terms: tuple[str, ...]
    red_flag_keywords: tuple[str, ...]
    trustworthy_indicators: tuple[str, ...]
    urgency_terms: tuple[str, ...]
    reputable_domains: tuple[str, ...]
    shortener_domains: tuple[str, ...]
    mixed_domains: tuple[str, ...]

    def __post_init__(self):
        """Lower-case every table and check the domain lists are disjoint."""
        for f in fields(self):
            terms = tuple(t.strip().lower() for t in getattr(self, f.name) if t and t.strip())
            object.__setattr__(self, f.name, terms)

        reputable = set(self.reputable_domains)
        shorteners = set(self.shortener_domains)
        mixed = set(self.mixed_domains)
        overlap = (reputable & shorteners) | (reputable & mixed) | (shorteners & mixed)
        if overlap:
            raise ValueError(f"Domain lists must be disjoint, found in several: {sorted(overlap)}")


DEFAULT_LEXICON = Lexicon(
    suspicious_terms=(
        "no experience", "immediate joining", "urgent", "quick money", "bitcoin",
        "wire transfer", "training fee", "crypto", "social security", "gift card",
        "work from home kit", "pay to apply", "bank details", "upfront fee",
        "limited seats", "act now", "easy income", "no interview", "telegram",
    ),
    red_flag_keywords=(
        "urgent", "immediate start", "no experience", "work from home", "easy money",
        "guaranteed income", "act now", "limited time", "investment required",
        "pay upfront", "training fee", "processing fee", "background check fee",
        "equipment fee", "certification cost", "click here", "amazing opportunity",
        "financial freedom", "make money fast", "passive income", "pyramid",
        "multi-level marketing", "mlm", "crypto", "bitcoin", "forex trading",
    ),
    trustworthy_indicators=(
        "company website", "established company", "benefits package", "healthcare",
        "retirement plan", "professional development", "career growth", "team environment",
        "equal opportunity", "detailed job description", "specific requirements",
        "industry experience", "education required", "certifications", "skills needed",
    ),
    urgency_terms=("immediately", "today", "now"),
    reputable_domains=(
        "linkedin.com", "indeed.com", "glassdoor.com", "monster.com",
        "ziprecruiter.com", "careerbuilder.com", "simplyhired.com",
    ),
    shortener_domains=("bit.ly", "tinyurl.com", "goo.gl", "t.co"),
    mixed_domains=("craigslist.org",),
)


def load_lexicon(path: Union[str, Path, None] = None) -> Lexicon:
    """Load a lexicon, overriding the built-in tables from a YAML file.

    Args:
        path: YAML file mapping table names to lists of terms. ``None``
            returns the built-in tables.

    Returns:
        Lexicon instance

    Raises:
        ValueError: If the file names an unknown table, is not a mapping,
            or gives a table that is not a list
    """
    if path is None:
        return DEFAULT_LEXICON

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Lexicon file {path} must contain a mapping of table names")

    known = {f.name for f in fields(Lexicon)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown lexicon tables in {path}: {sorted(unknown)}")

    not_lists = sorted(
        name for name, terms in data.items()
        if terms is not None and not isinstance(terms, list)
    )
    if not_lists:
        raise ValueError(f"Lexicon tables in {path} must be lists of terms: {not_lists}")

    overrides = {name: tuple(str(term) for term in terms or []) for name, terms in data.items()}
    logger.info("Loaded lexicon overrides from %s: %s", path, sorted(overrides))
    return replace(DEFAULT_LEXICON, **overrides)
