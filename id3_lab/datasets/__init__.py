# id3_lab/datasets/__init__.py
# Dataset adapters plus the small bundled datasets used by the demo and tests.
from __future__ import annotations
import os
from typing import Optional

from ..core.schema import Dataset
from .arff_loader import load_arff, parse_arff
from .csv_loader import dataset_from_frame, load_csv

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


def data_path(name: str) -> str:
    return os.path.join(DATA_DIR, name)


def load_dataset(path: str, class_attribute: Optional[str] = None) -> Dataset:
    """Pick the loader by extension: .arff -> ARFF, .tsv/.txt -> tab-separated, anything else -> CSV."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".arff":
        return load_arff(path, class_attribute=class_attribute)
    if ext in (".tsv", ".txt"):
        return load_csv(path, class_attribute=class_attribute, sep="\t")
    return load_csv(path, class_attribute=class_attribute)


def load_weather() -> Dataset:
    """The 14-row weather.nominal ('play tennis') dataset, class = play."""
    return load_arff(data_path("weather.nominal.arff"))


def load_lenses() -> Dataset:
    """The 24-row contact-lenses dataset, class = contact-lenses."""
    return load_csv(data_path("lenses.csv"))


__all__ = [
    "DATA_DIR", "data_path", "load_dataset", "load_weather", "load_lenses",
    "load_arff", "parse_arff", "load_csv", "dataset_from_frame",
]
