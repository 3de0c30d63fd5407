import json
from pathlib import Path

import pytest

from kioskmap.cmdline import run_fit


class TestRunFit:
    def test_points(self, capsys):
        run_fit(
            ["--from", "0", "0", "--to", "100", "200", "--view", "800x600"]
        )

        assert json.loads(capsys.readouterr().out) == {
            "x": 325.0,
            "y": 150.0,
            "scale": 1.5,
        }

    def test_points_with_options(self, capsys):
        run_fit(
            [
                "--from",
                "0",
                "0",
                "--to",
                "100",
                "200",
                "--view",
                "1100x600",
                "--insets",
                "0",
                "0",
                "0",
                "300",
                "--padding",
                "100",
                "--max-scale",
                "1.5",
            ]
        )

        assert json.loads(capsys.readouterr().out) == {
            "x": 625.0,
            "y": 150.0,
            "scale": 1.5,
        }

    def test_negative_coordinates(self, capsys):
        run_fit(
            ["--from", "-100", "-200", "--to", "0", "0", "--view", "800x600"]
        )

        assert json.loads(capsys.readouterr().out) == {
            "x": 475.0,
            "y": 450.0,
            "scale": 1.5,
        }

    def test_directory(self, base_dir: Path, capsys):
        files = base_dir / "files"
        run_fit(
            [
                "--kiosk",
                str(files / "kiosk.json"),
                "--floor-plans",
                str(files / "floor_plans.json"),
                "--places",
                str(files / "places.json"),
                "--place",
                "p1",
                "--view",
                "800x600",
            ]
        )

        result = json.loads(capsys.readouterr().out)
        assert result["scale"] == pytest.approx(800 / 600)
        assert result["x"] == pytest.approx(400 - 400 * 800 / 600)

    def test_unknown_place(self, base_dir: Path):
        files = base_dir / "files"
        with pytest.raises(SystemExit):
            run_fit(
                [
                    "--kiosk",
                    str(files / "kiosk.json"),
                    "--floor-plans",
                    str(files / "floor_plans.json"),
                    "--places",
                    str(files / "places.json"),
                    "--place",
                    "p99",
                    "--view",
                    "800x600",
                ]
            )

    def test_missing_points(self):
        with pytest.raises(SystemExit):
            run_fit(["--from", "0", "0", "--view", "800x600"])

    def test_invalid_view(self):
        with pytest.raises(SystemExit):
            run_fit(["--from", "0", "0", "--to", "1", "1", "--view", "800"])

    def test_point_needs_two_values(self):
        with pytest.raises(SystemExit):
            run_fit(["--from", "0", "--to", "1", "1", "--view", "800x600"])
