import io

import numpy as np
import pytest
from PIL import Image

from recolour.cli import main, parse_cli_args


def _feed(monkeypatch, *answers):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{a}\n" for a in answers)))


def test_parse_args_defaults():
    args = parse_cli_args(["recolor", "in.png"])
    assert args.command == "recolor"
    assert str(args.target) == "in.png"
    assert args.output_default == "recolor_output.png"
    assert args.preview == 10
    assert args.swatch is True
    assert args.debug is False


def test_parse_args_rejects_negative_preview():
    with pytest.raises(SystemExit):
        parse_cli_args(["recolor", "in.png", "--preview", "-1"])


def test_parse_args_requires_target():
    with pytest.raises(SystemExit):
        parse_cli_args(["recolor"])


def test_recolor_default_output(quad_rgba, write_png, tmp_path, monkeypatch, capsys):
    src = write_png(quad_rgba)
    monkeypatch.chdir(tmp_path)
    _feed(monkeypatch, "#0000ff", "", "")

    assert main(["recolor", str(src), "--no-swatch"]) == 0

    with Image.open(tmp_path / "recolor_output.png") as im:
        assert np.array(im).reshape(-1, 4).tolist() == [
            [0, 0, 255, 255],
            [0, 0, 255, 255],
            [0, 255, 0, 255],
            [0, 0, 0, 0],
        ]
    out = capsys.readouterr().out
    assert f"Recoloring image at path: {src}" in out
    assert "Colours: 2  Visible pixels: 3" in out
    assert "Wrote recolor_output.png | size=2x2 | colours=2 | replaced=1" in out


def test_recolor_debug_reports_format(tmp_path, monkeypatch, capsys):
    src = tmp_path / "grey.png"
    Image.new("L", (2, 1), 40).save(src)
    _feed(monkeypatch, "#ffffff", str(tmp_path / "o.png"))

    assert main(["recolor", str(src), "--debug", "--no-swatch"]) == 0

    out = capsys.readouterr().out
    assert "[debug] Image is encoded as: L" in out
    assert "[debug] #282828 -> #ffffff (2 px)" in out
    with Image.open(tmp_path / "o.png") as im:
        assert im.getpixel((1, 0)) == (255, 255, 255, 255)


def test_missing_source_exit_code(tmp_path, capsys):
    assert main(["recolor", str(tmp_path / "nope.png")]) == 2
    assert "[error] not found" in capsys.readouterr().err


def test_undecodable_source_exit_code(tmp_path, capsys):
    src = tmp_path / "bad.png"
    src.write_text("nope")
    assert main(["recolor", str(src)]) == 1
    assert "[error]" in capsys.readouterr().err


def test_closed_stdin_exit_code(quad_rgba, write_png, tmp_path, monkeypatch, capsys):
    src = write_png(quad_rgba)
    monkeypatch.chdir(tmp_path)
    _feed(monkeypatch)

    assert main(["recolor", str(src), "--no-swatch"]) == 1
    assert "[error] input stream closed" in capsys.readouterr().err
    assert not (tmp_path / "recolor_output.png").exists()


def test_unwritable_output_exit_code(quad_rgba, write_png, tmp_path, monkeypatch, capsys):
    src = write_png(quad_rgba)
    _feed(monkeypatch, "", "", str(tmp_path / "out.unknownext"))

    assert main(["recolor", str(src), "--no-swatch"]) == 1
    assert "[error] failed to write" in capsys.readouterr().err


@pytest.mark.parametrize(
    "command, banner",
    [
        ("deconstruct", "Deconstructing image at path: "),
        ("reconstruct", "Reconstructing image from data at path: "),
    ],
)
def test_placeholder_commands(command, banner, quad_rgba, write_png, capsys):
    src = write_png(quad_rgba)
    assert main([command, str(src)]) == 0
    out = capsys.readouterr().out
    assert f"{banner}{src}" in out
    assert f"[warn] {command} is not implemented" in out
