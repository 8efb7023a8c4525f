"""Tests for the command-line entry point."""

from __future__ import annotations

import os
import runpy
import sys

import pytest

from id3_lab import run


class TestHelpers:

    def test_parse_assignments(self) -> None:
        assert run.parse_assignments(["outlook=sunny", " windy = TRUE"]) == {"outlook": "sunny", "windy": "TRUE"}

    def test_parse_assignments_rejects_bare_word(self) -> None:
        with pytest.raises(ValueError):
            run.parse_assignments(["sunny"])

    def test_resolve_falls_back_to_bundled_data(self) -> None:
        path = run.resolve("weather.nominal.arff")
        assert os.path.isabs(path)
        assert os.path.exists(path)

    def test_resolve_keeps_absolute_paths(self, tmp_path) -> None:
        p = str(tmp_path / "x.csv")
        assert run.resolve(p) == p


class TestMain:

    def test_default_run(self, capsys) -> None:
        assert run.main(["--data", "weather.nominal.arff"]) == 0
        out = capsys.readouterr().out
        assert "[info] weather.symbolic: 14 records, 4 attributes, class = play" in out
        assert "Decision: outlook" in out
        assert "Training accuracy: 1.000  (depth=2, leaves=5)" in out
        assert "true_yes" in out and "pred_no" in out

    def test_classify_option(self, capsys) -> None:
        run.main(["--data", "weather.nominal.arff", "--classify",
                  "outlook=sunny", "temperature=cool", "humidity=high", "windy=TRUE"])
        out = capsys.readouterr().out
        assert "→ no" in out
        assert "Explanation (root → leaf):" in out

    def test_verbose_option(self, capsys) -> None:
        run.main(["--data", "weather.nominal.arff", "--verbose"])
        out = capsys.readouterr().out
        assert "=> choose 'outlook' by information gain" in out

    def test_csv_with_class_option(self, capsys) -> None:
        run.main(["--data", "lenses.csv", "--class", "contact-lenses"])
        assert "Decision: tear-prod-rate" in capsys.readouterr().out

    def test_plot_option(self, tmp_path, capsys) -> None:
        out = tmp_path / "tree.png"
        run.main(["--data", "weather.nominal.arff", "--plot", str(out)])
        assert out.exists()
        assert f"[saved] {out}" in capsys.readouterr().out

    def test_repeated_plot_runs_keep_one_figure(self, tmp_path, capsys) -> None:
        import matplotlib.pyplot as plt

        plt.close("all")
        for name in ("a.png", "b.png", "c.png"):
            run.main(["--data", "weather.nominal.arff", "--plot", str(tmp_path / name)])
        assert len(plt.get_fignums()) == 1
        plt.close("all")

    def test_no_verbose_overrides_environment_default(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(run, "VERBOSE", True)
        assert run.build_parser().parse_args([]).verbose is True
        assert run.build_parser().parse_args(["--no-verbose"]).verbose is False
        run.main(["--data", "weather.nominal.arff", "--no-verbose"])
        assert "=> choose" not in capsys.readouterr().out

    def test_module_exit_code(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "argv", ["id3_lab.run", "--data", "weather.nominal.arff"])
        with pytest.raises(SystemExit) as exc:
            runpy.run_module("id3_lab.run", run_name="__main__")
        assert exc.value.code == 0

    def test_missing_file_exits(self, tmp_path) -> None:
        with pytest.raises(SystemExit):
            run.main(["--data", str(tmp_path / "nope.arff")])

    def test_bad_record_exits(self) -> None:
        with pytest.raises(SystemExit):
            run.main(["--data", "weather.nominal.arff", "--classify", "colour=red"])
