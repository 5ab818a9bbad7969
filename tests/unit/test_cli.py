"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rasterclip import __version__
from rasterclip.cli.app import app

runner = CliRunner()


@pytest.fixture
def segment_file(tmp_path: Path) -> Path:
    """Write a small clipping job."""
    path = tmp_path / "segments.txt"
    path.write_text(
        "-50 -50 50 50\n3\n-100 0 100 0\n60 60 70 70\n-10 -10 10 10\n",
        encoding="utf-8",
    )
    return path


class TestVersion:
    """Tests for --version."""

    def test_version(self) -> None:
        """Test the version flag prints and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestLineCommand:
    """Tests for the line command."""

    def test_prints_pixels(self) -> None:
        """Test the pixel preview lists the line in order."""
        result = runner.invoke(app, ["line", "0", "0", "4", "2"])
        assert result.exit_code == 0
        assert "(0,0) (1,0) (2,1) (3,1) (4,2)" in result.output
        assert "5 pixels" in result.output

    def test_writes_text(self, tmp_path: Path) -> None:
        """Test text output keeps traversal order."""
        out = tmp_path / "line.txt"
        result = runner.invoke(app, ["line", "4", "2", "0", "0", "-o", str(out), "-q"])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "4 2\n3 1\n2 1\n1 0\n0 0\n"

    def test_format_from_suffix(self, tmp_path: Path) -> None:
        """Test a .pbm output path selects the PBM format."""
        out = tmp_path / "line.pbm"
        result = runner.invoke(
            app,
            ["line", "0", "0", "2", "0", "-o", str(out), "--canvas-width", "3", "--canvas-height", "1"],
        )
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "P1\n3 1\n111\n"

    def test_clamped_by_default(self, tmp_path: Path) -> None:
        """Test endpoints are clamped onto the canvas."""
        out = tmp_path / "line.json"
        result = runner.invoke(
            app,
            ["line", "0", "0", "50", "0", "-o", str(out), "--canvas-width", "10", "--canvas-height", "10", "-q"],
        )
        assert result.exit_code == 0
        document = json.loads(out.read_text(encoding="utf-8"))
        assert document["pixels"][-1] == [9, 0]
        assert document["count"] == 10

    def test_no_clamp(self, tmp_path: Path) -> None:
        """Test --no-clamp rasterizes the line as given."""
        out = tmp_path / "line.json"
        result = runner.invoke(
            app,
            ["line", "0", "0", "50", "0", "-o", str(out), "--canvas-width", "10", "--no-clamp", "-q"],
        )
        assert result.exit_code == 0
        document = json.loads(out.read_text(encoding="utf-8"))
        assert document["count"] == 51

    def test_format_without_output(self, tmp_path: Path) -> None:
        """Test --format alone writes to line.<ext> in the current directory."""
        with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
            result = runner.invoke(app, ["line", "0", "0", "4", "2", "-f", "json", "-q"])
            assert result.exit_code == 0
            document = json.loads((Path(cwd) / "line.json").read_text(encoding="utf-8"))
        assert document["count"] == 5

    def test_no_file_without_format(self, tmp_path: Path) -> None:
        """Test nothing is written when neither --output nor --format is given."""
        with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
            result = runner.invoke(app, ["line", "0", "0", "4", "2", "-q"])
            assert result.exit_code == 0
            assert list(Path(cwd).iterdir()) == []

    def test_invalid_format(self) -> None:
        """Test an unknown --format exits with an error."""
        result = runner.invoke(app, ["line", "0", "0", "1", "1", "--format", "gif"])
        assert result.exit_code == 1
        assert "Invalid format" in result.output

    def test_verbose_and_quiet(self) -> None:
        """Test --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, ["line", "0", "0", "1", "1", "-v", "-q"])
        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output


class TestCircleCommand:
    """Tests for the circle command."""

    def test_disk(self, tmp_path: Path) -> None:
        """Test a radius 1 disk writes its five pixels."""
        out = tmp_path / "disk.txt"
        result = runner.invoke(app, ["circle", "5", "5", "1", "-o", str(out)])
        assert result.exit_code == 0
        assert "5 pixels" in result.output
        assert out.read_text(encoding="utf-8") == "4 5\n5 4\n5 5\n5 6\n6 5\n"

    def test_off_canvas(self) -> None:
        """Test a disk wholly off the canvas reports zero pixels."""
        result = runner.invoke(app, ["circle", "--", "-100", "-100", "5"])
        assert result.exit_code == 0
        assert "off-canvas" in result.output

    def test_negative_radius(self, tmp_path: Path) -> None:
        """Test a negative radius draws only the centre."""
        out = tmp_path / "disk.txt"
        result = runner.invoke(app, ["circle", "-o", str(out), "-q", "--", "5", "5", "-3"])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "5 5\n"


class TestThickCommand:
    """Tests for the thick command."""

    def test_width_below_one_is_raised(self, tmp_path: Path) -> None:
        """Test --width 0 behaves like width 1."""
        thin = tmp_path / "thin.txt"
        zero = tmp_path / "zero.txt"
        runner.invoke(app, ["thick", "0", "0", "8", "3", "-o", str(thin), "-q"])
        result = runner.invoke(app, ["thick", "0", "0", "8", "3", "-w", "0", "-o", str(zero), "-q"])
        assert result.exit_code == 0
        assert zero.read_text(encoding="utf-8") == thin.read_text(encoding="utf-8")

    def test_width_three(self, tmp_path: Path) -> None:
        """Test a horizontal width 3 line covers three rows."""
        out = tmp_path / "thick.json"
        result = runner.invoke(app, ["thick", "10", "10", "20", "10", "-w", "3", "-o", str(out)])
        assert result.exit_code == 0
        document = json.loads(out.read_text(encoding="utf-8"))
        assert document["count"] == 35
        assert {y for _, y in document["pixels"]} == {9, 10, 11}

    def test_width_above_limit(self) -> None:
        """Test widths above 255 are rejected by option validation."""
        result = runner.invoke(app, ["thick", "0", "0", "1", "1", "-w", "256"])
        assert result.exit_code != 0


class TestClipCommand:
    """Tests for the clip command."""

    def test_clip_text(self, segment_file: Path, tmp_path: Path) -> None:
        """Test visible segments are written in input order."""
        out = tmp_path / "visible.txt"
        result = runner.invoke(app, ["clip", str(segment_file), "-j", "1", "-o", str(out)])
        assert result.exit_code == 0
        assert "not visible" in result.output
        assert out.read_text(encoding="utf-8") == "-50 0 50 0\n-10 -10 10 10\n"

    def test_clip_json(self, segment_file: Path, tmp_path: Path) -> None:
        """Test JSON output lists every result."""
        out = tmp_path / "results.json"
        result = runner.invoke(app, ["clip", str(segment_file), "-j", "1", "-q", "-o", str(out)])
        assert result.exit_code == 0
        document = json.loads(out.read_text(encoding="utf-8"))
        assert document["count"] == 3
        assert document["visible"] == 2
        assert document["results"][1]["clipped"] is None

    def test_window_override(self, segment_file: Path, tmp_path: Path) -> None:
        """Test --window replaces the window from the file."""
        out = tmp_path / "visible.txt"
        result = runner.invoke(
            app,
            ["clip", str(segment_file), "--window=5,5,-5,-5", "-j", "1", "-q", "-o", str(out)],
        )
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "-5 0 5 0\n-5 -5 5 5\n"

    def test_format_without_output(self, segment_file: Path, tmp_path: Path) -> None:
        """Test --format alone writes <input>-clipped.<ext> next to the input."""
        result = runner.invoke(app, ["clip", str(segment_file), "-j", "1", "-q", "-f", "json"])
        assert result.exit_code == 0
        document = json.loads((tmp_path / "segments-clipped.json").read_text(encoding="utf-8"))
        assert document["visible"] == 2

    def test_bad_window_option(self, segment_file: Path) -> None:
        """Test a malformed --window exits with an error."""
        result = runner.invoke(app, ["clip", str(segment_file), "--window=1,2,3", "-j", "1"])
        assert result.exit_code == 1
        assert "XMIN,YMIN,XMAX,YMAX" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing input file exits with an error."""
        result = runner.invoke(app, ["clip", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "Could not read input" in result.output

    def test_malformed_file(self, tmp_path: Path) -> None:
        """Test malformed input exits with an error."""
        path = tmp_path / "bad.txt"
        path.write_text("0 0 10\n", encoding="utf-8")
        result = runner.invoke(app, ["clip", str(path)])
        assert result.exit_code == 1
        assert "invalid clipping window" in result.output

    def test_pbm_rejected(self, segment_file: Path, tmp_path: Path) -> None:
        """Test clip results cannot be written as PBM."""
        out = tmp_path / "results.pbm"
        result = runner.invoke(app, ["clip", str(segment_file), "-j", "1", "-o", str(out)])
        assert result.exit_code == 1
        assert not out.exists()

    def test_log_file(self, segment_file: Path, tmp_path: Path) -> None:
        """Test --log-file receives structured chunk records."""
        log = tmp_path / "clip.log"
        result = runner.invoke(
            app, ["clip", str(segment_file), "-j", "1", "-q", "--log-file", str(log)]
        )
        assert result.exit_code == 0
        assert "Chunk clipped" in log.read_text(encoding="utf-8")
