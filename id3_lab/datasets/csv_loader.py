# id3_lab/datasets/csv_loader.py
# CSV/TSV tables via pandas. CSV carries no domain declarations, so each column's
# domain is its distinct values in first-seen order unless the caller supplies one.
from __future__ import annotations
import os
from typing import Mapping, Optional, Sequence

import pandas as pd

from ..core.schema import Dataset, SchemaError

MISSING = ("", "?")


def load_csv(path: str, class_attribute: Optional[str] = None, sep: str = ",",
             domains: Optional[Mapping[str, Sequence[str]]] = None) -> Dataset:
    """Load a headered categorical table; the class column defaults to the last one."""
    df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False)
    relation = os.path.splitext(os.path.basename(path))[0]
    return dataset_from_frame(df, class_attribute=class_attribute, domains=domains, relation=relation)


def dataset_from_frame(df: pd.DataFrame, class_attribute: Optional[str] = None,
                       domains: Optional[Mapping[str, Sequence[str]]] = None,
                       relation: str = "dataset") -> Dataset:
    df = df.astype(str).apply(lambda col: col.str.strip())
    domains = dict(domains or {})

    for col in df.columns:
        bad = df[col].isin(MISSING)
        if bad.any():
            raise SchemaError(f"column {col!r} has missing values at rows {list(df.index[bad])[:5]}")

    decl = []
    for col in df.columns:
        if col in domains:
            decl.append((col, [str(v) for v in domains[col]]))
        else:
            decl.append((col, list(pd.unique(df[col]))))

    rows = df.values.tolist()
    return Dataset.from_rows(decl, rows, class_name=class_attribute, relation=relation)
