# id3_lab/datasets/arff_loader.py
# Reads nominal ARFF files (the Weka format) into a Dataset.
from __future__ import annotations
from typing import Optional

import arff  # pip install liac-arff

from ..core.schema import Dataset, SchemaError


def load_arff(path: str, class_attribute: Optional[str] = None) -> Dataset:
    """
    Load an ARFF file whose attributes are all nominal.

    The class attribute defaults to the last declared attribute. Numeric or
    string attributes raise ValueError; '?' (missing) values raise SchemaError.
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_arff(text, class_attribute=class_attribute)


def parse_arff(text: str, class_attribute: Optional[str] = None) -> Dataset:
    try:
        obj = arff.loads(text)
    except arff.ArffException as e:
        raise SchemaError(f"malformed ARFF: {e}") from e

    domains = []
    for name, kind in obj["attributes"]:
        if not isinstance(kind, (list, tuple)):
            raise ValueError(f"attribute {name!r} is {kind}; only nominal attributes are supported")
        domains.append((name, [str(v) for v in kind]))

    rows = []
    for n, row in enumerate(obj["data"]):
        if any(v is None for v in row):
            raise SchemaError(f"row {n} has missing values; missing-value handling is not supported")
        rows.append([str(v) for v in row])

    return Dataset.from_rows(domains, rows, class_name=class_attribute,
                             relation=obj.get("relation") or "dataset")
