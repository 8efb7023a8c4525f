from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from id3_lab.core.schema import Dataset
from id3_lab.datasets import load_lenses, load_weather


@pytest.fixture
def play_dataset() -> Dataset:
    """Four records, one attribute that splits the labels perfectly."""
    return Dataset.from_rows(
        [("Weather", ["Sunny", "Rainy"]), ("Play", ["Yes", "No"])],
        [["Sunny", "Yes"], ["Sunny", "Yes"], ["Rainy", "No"], ["Rainy", "No"]],
    )


@pytest.fixture
def cloudy_dataset() -> Dataset:
    """Same as play_dataset but the domain declares a value no record takes."""
    return Dataset.from_rows(
        [("Weather", ["Sunny", "Rainy", "Cloudy"]), ("Play", ["Yes", "No"])],
        [["Sunny", "Yes"], ["Sunny", "Yes"], ["Rainy", "No"], ["Rainy", "No"]],
    )


@pytest.fixture
def weather() -> Dataset:
    return load_weather()


@pytest.fixture
def lenses() -> Dataset:
    return load_lenses()
