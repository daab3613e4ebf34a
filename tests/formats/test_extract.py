import re
import pytest
from chromacodec.errors import ComponentParseError, MissingComponentError, RangeValidationError
from chromacodec.formats import RGBFloatFormat, RGBu8Format
from chromacodec.types.format_type import ColorFormats


def test_extract_value():
    match = re.fullmatch(r"(?P<r>[0-9.]+)", "0.5")
    assert RGBFloatFormat.extract(match, "r", "0.5") == 0.5


def test_extract_missing_component():
    match = re.fullmatch(r"(?P<r>[0-9]+)?", "")
    with pytest.raises(MissingComponentError, match="'r' is missing") as exc:
        RGBu8Format.extract(match, "r", "rgb()")
    assert exc.value.color_format is ColorFormats.RGB_U8
    assert exc.value.text == "rgb()"


def test_extract_missing_component_uses_default():
    match = re.fullmatch(r"(?P<a>[0-9]+)?", "")
    assert RGBu8Format.extract(match, "a", "rgb()", default=255) == 255


def test_extract_component_not_a_number():
    match = re.fullmatch(r"(?P<g>.+)", "abc")
    with pytest.raises(ComponentParseError, match="unable to parse captured 'abc'") as exc:
        RGBFloatFormat.extract(match, "g", "rgb(0.0, abc, 0.0)")
    assert exc.value.color_format is ColorFormats.RGB_F
    assert isinstance(exc.value.__cause__, ValueError)


def test_extract_range():
    match = re.fullmatch(r"(?P<b>[0-9]+)", "300")
    with pytest.raises(RangeValidationError, match="b=300"):
        RGBu8Format.extract(match, "b", "rgb(0, 0, 300)")
