# id3_lab/algorithms/entropy.py
# Shannon entropy over the label distribution of a record set, and the information gain of a categorical split.
from __future__ import annotations
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..core.schema import Attribute, Record, SchemaError


def class_counts(records: Sequence[Record]) -> Dict[object, int]:
    """Label -> count, in the order labels are first seen."""
    counts: Dict[object, int] = {}
    for r in records:
        counts[r.label] = counts.get(r.label, 0) + 1
    return counts


def entropy(records: Sequence[Record]) -> float:
    """
    H(S) = -sum_c p_c * log2(p_c), with p_c the share of records labeled c.

    0.0 for a pure set, log2(k) for an even split over k labels. An empty set has
    no label distribution, so callers must not pass one.
    """
    if len(records) == 0:
        raise ValueError("entropy of an empty record set is undefined")
    cnt = np.fromiter(class_counts(records).values(), dtype=float)
    p = cnt / cnt.sum()
    return max(0.0, float(-(p * np.log2(p)).sum()))


def partition(records: Sequence[Record], attribute: Attribute) -> Dict[str, List[Record]]:
    """
    Split `records` by their value for `attribute`.

    Every value of the declared domain gets a key (in domain order), including
    values no record takes. A record whose value is outside the domain breaks
    the schema contract and raises SchemaError.
    """
    parts: Dict[str, List[Record]] = {v: [] for v in attribute.values}
    for r in records:
        v = r[attribute]
        if v not in parts:
            raise SchemaError(f"value {v!r} not in domain of {attribute.name!r} {list(attribute.values)}")
        parts[v].append(r)
    return parts


def information_gain(records: Sequence[Record], attribute: Attribute) -> float:
    """Gain(S, A) = H(S) - sum_v |S_v|/|S| * H(S_v), skipping empty partitions."""
    n = len(records)
    base = entropy(records)
    weighted = 0.0
    for subset in partition(records, attribute).values():
        if subset:
            weighted += (len(subset) / n) * entropy(subset)
    # round-off can push a zero gain slightly negative
    return min(base, max(0.0, base - weighted))


def majority_label(records: Sequence[Record], class_attribute: Optional[Attribute] = None):
    """
    Most frequent label. Ties go to the label declared first in the class
    attribute's domain; labels outside that domain rank after the declared ones,
    in first-seen order.
    """
    counts = class_counts(records)
    if not counts:
        raise ValueError("majority label of an empty record set is undefined")
    if class_attribute is None:
        class_attribute = records[0].schema.class_attribute
    declared = [v for v in class_attribute.values if v in counts]
    undeclared = [v for v in counts if v not in class_attribute.values]
    best, best_count = None, -1
    for label in declared + undeclared:
        if counts[label] > best_count:
            best, best_count = label, counts[label]
    return best
