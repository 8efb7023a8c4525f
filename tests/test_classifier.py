"""Tests for the ID3Classifier estimator."""

from __future__ import annotations

import numpy as np
import pytest

from id3_lab.classifier import ID3Classifier, NotFittedError
from id3_lab.core.node import UNKNOWN
from id3_lab.core.schema import SchemaError

SUNNY_HIGH = {"outlook": "sunny", "temperature": "cool", "humidity": "high", "windy": "TRUE"}


@pytest.fixture
def clf(weather) -> ID3Classifier:
    return ID3Classifier().fit(weather)


class TestNotFitted:

    def test_classify_before_fit_raises(self) -> None:
        with pytest.raises(NotFittedError):
            ID3Classifier().classify(SUNNY_HIGH)

    def test_export_before_fit_raises(self) -> None:
        with pytest.raises(NotFittedError):
            ID3Classifier().export_text()

    def test_classify_index_before_fit_raises(self) -> None:
        with pytest.raises(NotFittedError):
            ID3Classifier().classify_index(SUNNY_HIGH)


class TestPrediction:

    def test_classify_mapping(self, clf) -> None:
        assert clf.classify(SUNNY_HIGH) == "no"

    def test_classify_record(self, clf, weather) -> None:
        assert clf.classify(weather.records[2]) == "yes"

    def test_classify_index_uses_class_domain(self, clf) -> None:
        # play {yes, no}
        assert clf.classify_index(SUNNY_HIGH) == 1
        assert clf.classify_index(dict(SUNNY_HIGH, outlook="overcast")) == 0

    def test_unknown_maps_to_minus_one(self, cloudy_dataset) -> None:
        clf = ID3Classifier().fit(cloudy_dataset)
        assert clf.classify({"Weather": "Cloudy"}) == UNKNOWN
        assert clf.classify_index({"Weather": "Cloudy"}) == -1

    def test_predict_returns_object_array(self, clf, weather) -> None:
        preds = clf.predict(weather.records)
        assert isinstance(preds, np.ndarray)
        assert preds.dtype == object
        assert list(preds) == weather.labels()

    def test_score_on_training_data(self, clf, weather) -> None:
        assert clf.score(weather) == 1.0

    def test_record_from_other_schema_raises(self, clf, lenses) -> None:
        with pytest.raises(SchemaError):
            clf.classify(lenses.records[0])

    def test_mapping_with_unknown_attribute_raises(self, clf) -> None:
        with pytest.raises(SchemaError):
            clf.classify(dict(SUNNY_HIGH, colour="red"))

    def test_stats(self, clf) -> None:
        assert clf.depth_ == 2
        assert clf.n_leaves_ == 5


class TestInspection:

    def test_export_text(self, clf) -> None:
        assert clf.export_text().splitlines()[0] == "Decision: outlook"

    def test_explain_one(self, clf, capsys) -> None:
        path = clf.explain_one(SUNNY_HIGH)
        assert path[-1] == ("humidity", "high", "no")
        out = capsys.readouterr().out
        assert "Explanation (root → leaf):" in out
        assert "└─ humidity = high  →  predict no" in out

    def test_verbose_fit_prints_banners(self, weather, capsys) -> None:
        ID3Classifier(verbose=True).fit(weather)
        out = capsys.readouterr().out
        assert out.startswith("Starting to build the decision tree...")
        assert "Decision tree built successfully!" in out

    def test_show_saves_figure(self, clf, tmp_path) -> None:
        import matplotlib.pyplot as plt

        out = tmp_path / "tree.png"
        fig = clf.show(out=str(out), show=False)
        plt.close(fig)
        assert out.exists() and out.stat().st_size > 0
