import pytest
from chromacodec.colors import Canonical
from chromacodec.errors import (
    NoLinesError,
    RangeValidationError,
    SchemeIOError,
    SchemeLineError,
    SchemeReaderError,
    UnrecognizedFormatError,
)
from chromacodec.reader import parse_scheme_lines, read_scheme

SCHEME_TEXT = """Solarized accents
#b58900
rgb(0.796, 0.294, 0.086)

rgba(220, 50, 47, 255)
#d3368280
"""


def test_read_scheme(tmp_path):
    path = tmp_path / "solarized.scheme"
    path.write_text(SCHEME_TEXT, encoding="utf-8")

    scheme = read_scheme(path)
    assert scheme.name == "Solarized accents"
    assert scheme.colors == (
        Canonical((181, 137, 0, 255)),
        Canonical.from_f(0.796, 0.294, 0.086),
        Canonical((220, 50, 47, 255)),
        Canonical((211, 54, 130, 128)),
    )


def test_read_scheme_str_path(tmp_path):
    path = tmp_path / "one.scheme"
    path.write_text("one\n#000000\n", encoding="utf-8")
    assert len(read_scheme(str(path))) == 1


def test_forced_format():
    scheme = parse_scheme_lines(["name", "rgb(1, 2, 3)"], color_format="rgb_u8")
    assert scheme.colors == (Canonical((1, 2, 3, 255)),)

    with pytest.raises(SchemeLineError):
        parse_scheme_lines(["name", "#010203"], color_format="rgb_u8")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.scheme"
    path.write_text("", encoding="utf-8")
    with pytest.raises(NoLinesError, match="appears to be empty"):
        read_scheme(path)


def test_header_only_warns():
    with pytest.warns(UserWarning, match="has no colors"):
        scheme = parse_scheme_lines(["lonely\n", "\n"])
    assert scheme.name == "lonely"
    assert len(scheme) == 0


def test_missing_file(tmp_path):
    with pytest.raises(SchemeIOError) as exc:
        read_scheme(tmp_path / "nope.scheme")
    assert isinstance(exc.value.__cause__, OSError)
    assert isinstance(exc.value, SchemeReaderError)


def test_bad_line_reports_position(tmp_path):
    path = tmp_path / "bad.scheme"
    path.write_text("bad\n#000000\nrgb(1.5, 0.0, 0.0)\n", encoding="utf-8")
    with pytest.raises(SchemeLineError) as exc:
        read_scheme(path)
    err = exc.value
    assert err.lineno == 3
    assert err.line == "rgb(1.5, 0.0, 0.0)"
    assert isinstance(err.__cause__, RangeValidationError)
    assert str(path) in str(err)


def test_unknown_notation_line():
    with pytest.raises(SchemeLineError) as exc:
        parse_scheme_lines(["name", "papayawhip"])
    assert isinstance(exc.value.error, UnrecognizedFormatError)
    assert "<lines>:2" in str(exc.value)
