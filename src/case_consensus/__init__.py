"""Relevance-weighted consolidation of extracted legal case records.

The package turns many independently extracted, partially populated case
records plus one relevance weight per record into a single representative
summary: thresholded aggregates per field, a most likely disposition,
precedent rankings, timeline and jurisdiction trends, outcome-argument
correlation and consensus confidence scores.
"""

from .case_aggregation.engine import aggregate_cases, aggregate_with_adaptive_thresholds
from .case_aggregation.keywords import aggregate_keywords
from .config import EngineSettings, ThresholdOptions, load_config
from .errors import EmptyInputError
from .shared.logging_utils import setup_logging

__all__ = [
    "aggregate_cases",
    "aggregate_keywords",
    "aggregate_with_adaptive_thresholds",
    "EmptyInputError",
    "EngineSettings",
    "load_config",
    "setup_logging",
    "ThresholdOptions",
]
