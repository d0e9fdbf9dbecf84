"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from modeltree.cli import main
from modeltree.core.units import UnitType
from modeltree.drawing import Model
from modeltree.paths import Line


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def drawing_file(tmp_path):
    """A drawing with one offset child, saved to disk."""
    drawing = Model(
        units=UnitType.MILLIMETER,
        models={
            "box": Model(origin=(5, 5), paths={"edge": Line(origin=(0, 0), end=(10, 0))}),
        },
    )
    path = tmp_path / "drawing.json"
    drawing.save(path)
    return path


class TestCli:
    """Test CLI commands against drawing files."""

    def test_info(self, runner, drawing_file):
        """Test the info table lists the drawing."""
        result = runner.invoke(main, ["info", str(drawing_file)])
        assert result.exit_code == 0, result.output
        assert "Total paths: 1" in result.output

    def test_originate(self, runner, drawing_file, tmp_path):
        """Test originate writes flattened coordinates."""
        out = tmp_path / "flat.json"
        result = runner.invoke(main, ["originate", str(drawing_file), "-o", str(out)])
        assert result.exit_code == 0, result.output

        flat = Model.load(out)
        assert flat.models["box"].origin == (0, 0)
        assert flat.models["box"].paths["edge"].origin == (5, 5)
        assert Model.load(drawing_file).models["box"].origin == (5, 5)

    def test_move_overwrites_input(self, runner, drawing_file):
        """Test move writes back over the input by default."""
        result = runner.invoke(main, ["move", str(drawing_file), "3", "4"])
        assert result.exit_code == 0, result.output
        assert Model.load(drawing_file).origin == (3, 4)

    def test_rotate(self, runner, drawing_file):
        """Test rotate about a center."""
        result = runner.invoke(main, ["rotate", str(drawing_file), "90", "--about", "5", "5"])
        assert result.exit_code == 0, result.output

        edge = Model.load(drawing_file).models["box"].paths["edge"]
        assert edge.end[0] == pytest.approx(0.0, abs=1e-9)
        assert edge.end[1] == pytest.approx(10.0)

    def test_scale(self, runner, drawing_file):
        """Test scale doubles child offsets and geometry."""
        result = runner.invoke(main, ["scale", str(drawing_file), "2"])
        assert result.exit_code == 0, result.output

        box = Model.load(drawing_file).models["box"]
        assert box.origin == (10, 10)
        assert box.paths["edge"].end == (20, 0)

    def test_mirror(self, runner, drawing_file, tmp_path):
        """Test mirror writes a reflected copy."""
        out = tmp_path / "mirrored.json"
        result = runner.invoke(main, ["mirror", str(drawing_file), "--x", "-o", str(out)])
        assert result.exit_code == 0, result.output

        box = Model.load(out).models["box"]
        assert box.origin == (-5, 5)
        assert box.paths["edge"].end == (-10, 0)

    def test_convert(self, runner, drawing_file):
        """Test converting millimeters to centimeters."""
        result = runner.invoke(main, ["convert", str(drawing_file), "cm"])
        assert result.exit_code == 0, result.output

        converted = Model.load(drawing_file)
        assert converted.units is UnitType.CENTIMETER
        assert converted.models["box"].origin == (pytest.approx(0.5), pytest.approx(0.5))
        assert converted.models["box"].paths["edge"].end[0] == pytest.approx(1.0)

    def test_config_precision(self, runner, drawing_file, tmp_path):
        """Test output settings from a config file."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"output": {"indent": None, "precision": 1}}))

        result = runner.invoke(
            main, ["--config", str(config), "scale", str(drawing_file), "0.333"]
        )
        assert result.exit_code == 0, result.output

        data = json.loads(drawing_file.read_text())
        assert data["models"]["box"]["origin"] == [1.7, 1.7]

    def test_invalid_drawing(self, runner, tmp_path):
        """Test a malformed drawing aborts cleanly."""
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"units": "furlong"}))

        result = runner.invoke(main, ["info", str(bad)])
        assert result.exit_code != 0
        assert "Invalid drawing" in result.output
