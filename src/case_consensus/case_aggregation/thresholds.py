"""Adaptive frequency thresholds.

Cutoffs are not fixed constants: each category supplies a base threshold and
an allowed ``[minimum, maximum]`` range, and the base is scaled by how relevant
and how spread out the run's relevance weights are. The same statistics object
is shared by every category within one run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from ..config import ThresholdOptions
from ..errors import EmptyInputError
from .frequency import resolve_weight

# Caps the influence of high variance on the sensitivity factor
MAX_SPREAD = 0.2
REFERENCE_RELEVANCE = 0.7
MIN_SENSITIVITY = 0.5
MAX_SENSITIVITY = 1.2


@dataclass(frozen=True)
class RelevanceStats:
    """Distribution statistics of the per-record relevance weights."""

    mean: float
    median: float
    std_dev: float


@dataclass(frozen=True)
class ThresholdSpec:
    """Base cutoff and allowed range for one aggregate category."""

    base: float
    minimum: float
    maximum: float


DEFAULT_THRESHOLD_SPECS: Dict[str, ThresholdSpec] = {
    "issues": ThresholdSpec(0.64, 0.56, 0.74),
    "statutes": ThresholdSpec(0.8, 0.7, 1.2),
    "evidence": ThresholdSpec(0.57, 0.55, 0.73),
    "arguments": ThresholdSpec(0.59, 0.53, 0.71),
    "plaintiffs": ThresholdSpec(0.57, 0.55, 0.73),
    "defendants": ThresholdSpec(0.58, 0.55, 0.74),
    "court_reasoning": ThresholdSpec(0.62, 0.57, 0.79),
    "final_orders": ThresholdSpec(0.63, 0.58, 0.77),
    "case_urls": ThresholdSpec(0.57, 0.56, 0.76),
    "source_file_urls": ThresholdSpec(0.57, 0.56, 0.77),
}


def compute_stats(weights: Sequence[float]) -> RelevanceStats:
    """Mean, upper median and population standard deviation of ``weights``.

    The median is the element at index ``n // 2`` of the ascending-sorted
    weights, so even-length inputs take the upper middle element rather than
    averaging the two. Missing or non-finite weights count as 1, as they do in
    the frequency maps.

    Raises:
        EmptyInputError: if ``weights`` is empty
    """
    values = np.asarray([resolve_weight(w) for w in weights], dtype=float)
    if values.size == 0:
        raise EmptyInputError("Cannot compute relevance statistics over zero weights.")

    ordered = np.sort(values)
    return RelevanceStats(
        mean=float(values.mean()),
        median=float(ordered[values.size // 2]),
        std_dev=float(values.std(ddof=0)),
    )


def scale_threshold(base: float, minimum: float, maximum: float, stats: RelevanceStats) -> float:
    """Scale ``base`` by the relevance distribution and clamp into ``[minimum, maximum]``."""
    spread_factor = min(stats.std_dev * 2, MAX_SPREAD)
    sensitivity = max(
        MIN_SENSITIVITY,
        min(MAX_SENSITIVITY, (stats.mean + spread_factor) / REFERENCE_RELEVANCE),
    )
    return max(minimum, min(maximum, base * sensitivity))


def build_dynamic_thresholds(
    stats: RelevanceStats,
    specs: Dict[str, ThresholdSpec] = DEFAULT_THRESHOLD_SPECS,
) -> ThresholdOptions:
    """Scale every category's threshold spec with one shared ``stats`` object."""
    scaled = {
        category: scale_threshold(spec.base, spec.minimum, spec.maximum, stats)
        for category, spec in specs.items()
    }
    return ThresholdOptions(**scaled)
