from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from imgbench.cli import app

runner = CliRunner()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_images(directory: Path) -> None:
    directory.mkdir()
    Image.new("RGB", (120, 90), (30, 60, 90)).save(directory / "a.jpg")
    Image.new("RGB", (90, 120), (90, 60, 30)).save(directory / "b.png")


def test_run_command(workspace: Path):
    _write_images(workspace / "images")

    result = runner.invoke(app, ["run", "--workers", "2", "--workers", "3"])

    assert result.exit_code == 0, result.output
    assert "without threads" in result.output
    assert "2 threads" in result.output
    assert "3 threads" in result.output
    assert "Benchmark summary" in result.output
    assert sorted(p.name for p in (workspace / "results" / "with_thread_images").iterdir()) == [
        "a.jpg",
        "b.png",
    ]


def test_run_with_config_file(workspace: Path):
    _write_images(workspace / "photos")
    config_path = workspace / "bench.yaml"
    config_path.write_text(
        """
        input_dir: photos
        sequential_output_dir: out/seq
        parallel_output_dir: out/par
        transform:
          width: 40
          height: 30
        parallel:
          worker_counts: [2]
        """
    )

    result = runner.invoke(app, ["run", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "40x30" in result.output
    assert (workspace / "out" / "par" / "a.jpg").exists()


def test_missing_image_directory_is_fatal(workspace: Path):
    result = runner.invoke(app, ["run"])

    assert result.exit_code == 1
    assert "cannot read the image directory" in result.output
    assert not (workspace / "results").exists()


def test_unopenable_image_is_fatal(workspace: Path):
    _write_images(workspace / "images")
    (workspace / "images" / "c.jpg").write_bytes(b"garbage")

    result = runner.invoke(app, ["run", "--workers", "2"])

    assert result.exit_code == 1
    assert "cannot open the image" in result.output
    assert "Benchmark summary" not in result.output


def test_invalid_worker_count(workspace: Path):
    result = runner.invoke(app, ["run", "--workers", "0"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_collect_command(workspace: Path):
    _write_images(workspace / "images")
    (workspace / "images" / "notes.txt").write_text("skip me")

    result = runner.invoke(app, ["collect"])

    assert result.exit_code == 0, result.output
    assert "a.jpg" in result.output
    assert "b.png" in result.output
    assert "notes.txt" not in result.output


@pytest.mark.parametrize("body", ["- just\n- a list\n", "transform: [unclosed\n"])
def test_malformed_config_is_reported(workspace: Path, body: str):
    config_path = workspace / "bench.yaml"
    config_path.write_text(body)

    result = runner.invoke(app, ["run", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
