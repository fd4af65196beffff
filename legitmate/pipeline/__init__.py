"""Prediction resolution pipeline."""
from .backends import BaseBackend, CustomEndpointBackend, HostedServiceBackend, LocalHeuristicBackend
from .bulk import BulkDispatcher
from .normalizer import normalize
from .resolver import BackendResolver, PredictionContext, RequestKind, TierOutcome

__all__ = [
    "BackendResolver",
    "BaseBackend",
    "BulkDispatcher",
    "CustomEndpointBackend",
    "HostedServiceBackend",
    "LocalHeuristicBackend",
    "PredictionContext",
    "RequestKind",
    "TierOutcome",
    "normalize",
]
