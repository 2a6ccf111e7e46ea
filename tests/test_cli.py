"""
End-to-end tests: file helpers, Pillow loading, job builder, command line.

Run from project root: pytest tests/test_cli.py -v
"""

import pytest
from PIL import Image

from bmpfx import cli
from bmpfx.catalog import FilterRegistry
from bmpfx.codec import Color, Raster, encode
from bmpfx.errors import MalformedContainerError, OutputUnavailableError
from bmpfx.files import read_image, write_image
from bmpfx.filters import grayscale, rotate_90
from bmpfx.job import ImageJobBuilder, ProcessSettings
from bmpfx.rendering import load_raster, raster_from_image, raster_to_image


@pytest.fixture
def bmp_path(tmp_path, sample_raster):
    path = tmp_path / "input.bmp"
    path.write_bytes(encode(sample_raster))
    return path


def test_read_write_image(tmp_path, sample_raster):
    path = tmp_path / "out.bmp"
    write_image(path, sample_raster)
    assert read_image(path) == sample_raster


def test_read_image_malformed(tmp_path):
    path = tmp_path / "bad.bmp"
    path.write_bytes(b"BM" + bytes(60))
    with pytest.raises(MalformedContainerError):
        read_image(path)


def test_write_image_unavailable(tmp_path, sample_raster):
    with pytest.raises(OutputUnavailableError):
        write_image(tmp_path / "missing" / "out.bmp", sample_raster)


def test_pillow_interop_clamps(sample_raster):
    img = raster_to_image(sample_raster)
    assert raster_from_image(img) == sample_raster
    out_of_range = Raster((Color(300, -5, 10),), 1)
    assert raster_from_image(raster_to_image(out_of_range)) == Raster((Color(255, 0, 10),), 1)


def test_load_png_through_pillow(tmp_path, sample_raster):
    path = tmp_path / "input.png"
    raster_to_image(sample_raster).save(path)
    assert load_raster(str(path)) == sample_raster


def test_job_builder_run(tmp_path, bmp_path, sample_raster):
    builder = ImageJobBuilder(FilterRegistry.load().get("rotate_90"))
    out = tmp_path / "out.bmp"
    result = builder.run(str(bmp_path), str(out))
    assert result == rotate_90(sample_raster)
    assert read_image(out) == result


def test_job_builder_png_output(tmp_path, bmp_path, sample_raster):
    builder = ImageJobBuilder(FilterRegistry.load().get("darken"), ProcessSettings(clamp=True))
    out = tmp_path / "out.png"
    builder.run(str(bmp_path), str(out), {"scaling_factor": 2.0})
    with Image.open(out) as img:
        assert img.getpixel((0, 0)) == (255, 0, 0)


def test_job_builder_rejects_bad_paths(tmp_path, bmp_path):
    builder = ImageJobBuilder(FilterRegistry.load().get("grayscale"))
    with pytest.raises(ValueError):
        builder.run(str(bmp_path), str(tmp_path / "out.txt"))
    with pytest.raises(FileNotFoundError):
        builder.run(str(tmp_path / "nope.bmp"), str(tmp_path / "out.bmp"))


def test_cli_applies_filter(tmp_path, bmp_path, sample_raster, capsys):
    out = tmp_path / "gray.bmp"
    assert cli.main([str(bmp_path), str(out), "--filter", "3"]) == 0
    assert read_image(out) == grayscale(sample_raster)
    assert "grayscale" in capsys.readouterr().out


def test_cli_enlarge_params(tmp_path, bmp_path):
    out = tmp_path / "big.bmp"
    assert cli.main([str(bmp_path), str(out), "-f", "enlarge", "--x-scale", "2", "--y-scale", "3"]) == 0
    assert read_image(out).size == (6, 6)


def test_cli_missing_param(tmp_path, bmp_path, capsys):
    assert cli.main([str(bmp_path), str(tmp_path / "o.bmp"), "-f", "lighten"]) == 2
    assert "--factor" in capsys.readouterr().err


def test_cli_rejects_invalid_values(tmp_path, bmp_path):
    with pytest.raises(SystemExit) as info:
        cli.main([str(bmp_path), str(tmp_path / "o.bmp"), "-f", "darken", "--factor", "abc"])
    assert info.value.code == 2
    with pytest.raises(SystemExit):
        cli.main([str(bmp_path), str(tmp_path / "o.bmp"), "-f", "enlarge", "--x-scale", "0", "--y-scale", "1"])
    with pytest.raises(SystemExit):
        cli.main([str(bmp_path), str(tmp_path / "o.bmp"), "-f", "darken", "--factor", "nan"])


def test_cli_unknown_filter_and_bad_output(tmp_path, bmp_path):
    assert cli.main([str(bmp_path), str(tmp_path / "o.bmp"), "-f", "sepia"]) == 2
    assert cli.main([str(bmp_path), str(tmp_path / "o.jpg"), "-f", "grayscale"]) == 2


def test_cli_malformed_input(tmp_path, capsys):
    bad = tmp_path / "bad.bmp"
    bad.write_bytes(b"BM" + bytes(60))
    assert cli.main([str(bad), str(tmp_path / "o.bmp"), "-f", "grayscale"]) == 1
    assert "Not a valid" in capsys.readouterr().err


def test_cli_list_filters(capsys):
    assert cli.main(["--list-filters"]) == 0
    out = capsys.readouterr().out
    assert " 1) vignette" in out
    assert "10) quantize" in out
    assert "--x-scale" in out
