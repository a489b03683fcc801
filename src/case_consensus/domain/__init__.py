"""
Domain Layer - Case Consensus

Pure value types and the ports the core depends on. Nothing here performs I/O.

Contents:
- value_items.py: ValueItem, TimelinePoint and the canonical NormalizedCase
- ports.py: SimilarityOracle interface implemented by relevance adapters
"""

from .ports import SimilarityOracle
from .value_items import NormalizedCase, TimelinePoint, ValueItem

__all__ = [
    "NormalizedCase",
    "SimilarityOracle",
    "TimelinePoint",
    "ValueItem",
]
