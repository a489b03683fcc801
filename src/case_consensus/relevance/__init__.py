"""Relevance weighting: the text sent to a similarity oracle and the scores it returns.

The aggregation core never calls an oracle itself; callers score records here
first and pass the resulting plain list of floats to the engine.
"""

from .similarity import compute_relevance_stats, cosine_similarity, score_records
from .text import case_text, relevance_text

__all__ = [
    "case_text",
    "compute_relevance_stats",
    "cosine_similarity",
    "relevance_text",
    "score_records",
]
