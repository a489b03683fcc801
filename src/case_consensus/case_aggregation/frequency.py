"""Weighted frequency maps and threshold filtering.

The weighted frequency map is the primitive every category aggregate is built
on: distinct values map to the sum of the weights of all items carrying them.
Repeated values sum their weights rather than counting occurrences, so several
low-relevance mentions can outweigh a single high-relevance one.

Values are compared exactly (case and whitespace sensitive). Callers that
want looser matching must normalize before aggregating.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Tuple

from ..domain.value_items import ValueItem

WeightFn = Callable[[Any], Any]

FALLBACK_WEIGHT = 1.0


class FrequencyMap(dict):
    """Distinct value key -> cumulative weight.

    Keys are frozen dedup keys. ``originals`` maps each key to the first value
    seen for it, so aggregated output keeps the values' JSON shape.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.originals: Dict[Hashable, Any] = {}


def original_value(frequency: Mapping[Hashable, float], key: Hashable) -> Any:
    """First value seen for ``key``; plain mappings return the key itself."""
    return getattr(frequency, "originals", {}).get(key, key)


def freeze_value(value: Any) -> Hashable:
    """Turn a JSON-shaped value into a hashable dedup key.

    Lists become tuples and dicts become sorted tuples of pairs, recursively,
    so structurally equal values share a key.
    """
    if isinstance(value, list):
        return tuple(freeze_value(v) for v in value)
    if isinstance(value, dict):
        return tuple(sorted((str(k), freeze_value(v)) for k, v in value.items()))
    return value


def resolve_weight(weight: Any) -> float:
    """Return ``weight`` as a float when it is a finite number, else 1."""
    if isinstance(weight, bool) or not isinstance(weight, Real):
        return FALLBACK_WEIGHT
    weight = float(weight)
    if not math.isfinite(weight):
        return FALLBACK_WEIGHT
    return weight


def item_weight(item: Any) -> Any:
    """Default weight function: the item's own ``weight`` attribute."""
    if isinstance(item, ValueItem):
        return item.weight
    if isinstance(item, Mapping):
        return item.get("weight")
    return None


def raw_value(item: Any) -> Any:
    """The value an item carries, unfrozen."""
    if isinstance(item, ValueItem):
        return item.value
    if isinstance(item, Mapping) and "value" in item:
        return item["value"]
    return item


def item_value(item: Any) -> Hashable:
    """Dedup key of an item; bare scalars are their own key."""
    return freeze_value(raw_value(item))


def weighted_frequency_map(
    items: Iterable[Any], weight_fn: WeightFn = item_weight
) -> FrequencyMap:
    """Sum the weights of all items sharing a value.

    Args:
        items: ValueItems, ``{"value": ..., "weight": ...}`` dicts or bare scalars
        weight_fn: Maps an item to its weight; non-numeric or non-finite
            results count as 1 and never skip the item

    Returns:
        Mapping from distinct value to cumulative weight
    """
    frequency = FrequencyMap()
    for item in items:
        key = item_value(item)
        frequency.originals.setdefault(key, raw_value(item))
        frequency[key] = frequency.get(key, 0.0) + resolve_weight(weight_fn(item))
    return frequency


def select_aggregated(frequency: Mapping[Hashable, float], threshold: float) -> List[Any]:
    """Keep values whose cumulative weight reaches ``threshold``."""
    return [original_value(frequency, key) for key, weight in frequency.items() if weight >= threshold]


def rank_by_weight(frequency: Mapping[Hashable, float]) -> List[Tuple[Any, float]]:
    """``(value, weight)`` pairs, heaviest first; ties keep insertion order."""
    ranked = sorted(frequency.items(), key=lambda entry: entry[1], reverse=True)
    return [(original_value(frequency, key), weight) for key, weight in ranked]
