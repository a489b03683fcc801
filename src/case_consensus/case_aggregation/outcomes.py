"""Outcome-argument correlation.

Each case's arguments are grouped by party and credited to the party its
disposition text favours. Dispositions are classified with two independent
patterns; text matching both (``"plaintiff's suit dismissed"``) credits both
parties, text matching neither credits nobody. Cases without a disposition are
skipped.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence, Tuple

from ..domain.value_items import ValueItem
from ..types.schemas.models import CounterArgumentAnalysis, CounterArgumentCounts

PLAINTIFF_WIN_PATTERN = re.compile(r"plaintiff|granted|in favor of plaintiff", re.IGNORECASE)
DEFENDANT_WIN_PATTERN = re.compile(r"defendant|dismissed|in favor of defendant", re.IGNORECASE)

PARTIES = ("plaintiff", "defendant")


def classify_disposition(text: str) -> Tuple[bool, bool]:
    """Return ``(plaintiff_won, defendant_won)``; both may be true."""
    return (
        PLAINTIFF_WIN_PATTERN.search(text) is not None,
        DEFENDANT_WIN_PATTERN.search(text) is not None,
    )


def group_arguments(arguments: Sequence[ValueItem]) -> Dict[str, Dict[str, List]]:
    """Arguments per case id, split by party."""
    by_case: Dict[str, Dict[str, List]] = {}
    for item in arguments:
        sides = by_case.setdefault(item.case_id or "", {party: [] for party in PARTIES})
        if item.party in sides:
            sides[item.party].append(item.value)
    return by_case


def correlate_arguments(
    arguments: Sequence[ValueItem], dispositions: Sequence[ValueItem]
) -> CounterArgumentAnalysis:
    """Collect the arguments of whichever party each case's disposition favoured.

    Args:
        arguments: Argument items tagged with ``party`` and ``case_id``
        dispositions: One disposition item per case, keyed by ``case_id``

    Returns:
        Successful plaintiff and defendant argument lists with their sizes
    """
    outcomes = {
        item.case_id or "": classify_disposition(str(item.value).lower())
        for item in dispositions
    }
    credited = [
        (outcomes[cid], sides)
        for cid, sides in group_arguments(arguments).items()
        if cid in outcomes
    ]
    plaintiff = [arg for (won, _), sides in credited if won for arg in sides["plaintiff"]]
    defendant = [arg for (_, won), sides in credited if won for arg in sides["defendant"]]

    return CounterArgumentAnalysis(
        successful_plaintiff_arguments=plaintiff,
        successful_defendant_arguments=defendant,
        counts=CounterArgumentCounts(plaintiff=len(plaintiff), defendant=len(defendant)),
    )
