"""Heuristic job posting scorers."""
import logging

from .lexicon import DEFAULT_LEXICON, Lexicon, load_lexicon
from .scorer_protocol import Scorer
from .structured_scorer import StructuredRiskScorer
from .text_scorer import TextRiskScorer
from .url_scorer import UrlRiskScorer

logger = logging.getLogger(__name__)

STRATEGIES = {
    TextRiskScorer.name: TextRiskScorer,
    StructuredRiskScorer.name: StructuredRiskScorer,
}


def get_scorer(strategy: str = "quick", lexicon: Lexicon = DEFAULT_LEXICON) -> Scorer:
    """Factory: create a text scorer for the configured strategy.

    Args:
        strategy: 'quick' (raw-text heuristic) or 'full' (structured heuristic)
        lexicon: Keyword tables to score against

    Returns:
        A Scorer instance

    Raises:
        ValueError: If the strategy is unknown
    """
    try:
        scorer_cls = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown scoring strategy '{strategy}', expected one of {sorted(STRATEGIES)}"
        ) from None

    logger.debug("Using '%s' local scoring strategy", strategy)
    return scorer_cls(lexicon)


__all__ = [
    "DEFAULT_LEXICON",
    "Lexicon",
    "Scorer",
    "StructuredRiskScorer",
    "TextRiskScorer",
    "UrlRiskScorer",
    "get_scorer",
    "load_lexicon",
]
