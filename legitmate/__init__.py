"""LegitMate - job posting fraud-risk prediction."""

__version__ = "0.1.0"
