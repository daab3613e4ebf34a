import pytest
from chromacodec.colors import Canonical
from chromacodec.errors import GrammarMismatchError, RangeValidationError
from chromacodec.formats import RGBu8Format
from chromacodec.types.format_type import ColorFormats
from samples import int_notation_ok, int_notation_ko


def test_color_format_matches():
    for cand in int_notation_ok:
        assert RGBu8Format.matches(cand), cand

    for cand in int_notation_ko:
        assert not RGBu8Format.matches(cand), cand


def test_parse():
    assert RGBu8Format.parse("rgb(0, 0, 0)") == Canonical((0, 0, 0, 255))
    assert RGBu8Format.parse("RGB(12, 34, 56, 78)") == Canonical((12, 34, 56, 78))
    assert RGBu8Format.parse("  rgba( 1 ,2, 3 , 4 )  ") == Canonical((1, 2, 3, 4))
    assert RGBu8Format.parse("rgba(255,255,255)") == Canonical((255, 255, 255, 255))


def test_leading_zeros():
    assert RGBu8Format.parse("rgb(007, 010, 255)") == Canonical((7, 10, 255, 255))


def test_range_rejected_not_clamped():
    with pytest.raises(RangeValidationError) as exc:
        RGBu8Format.parse("rgb(256, 0, 999)")
    assert exc.value.color_format is ColorFormats.RGB_U8
    assert "r=256" in str(exc.value)

    with pytest.raises(RangeValidationError, match="a=300"):
        RGBu8Format.parse("rgba(0, 0, 0, 300)")


def test_grammar_mismatch():
    for cand in int_notation_ko:
        with pytest.raises(GrammarMismatchError):
            RGBu8Format.parse(cand)
