import pytest
from chromacodec.conversions import parse_from_hex, to_hex
from chromacodec.errors import ParseHexError, ParseToIntError
from samples import samples_hex_rgba_packed


def test_parse_hex():
    assert parse_from_hex("#00aa11") == (0, 170, 17, 255)
    assert parse_from_hex("#ffffff00") == (255, 255, 255, 0)


def test_parse_hex_samples():
    for text, (rgba, _) in samples_hex_rgba_packed.items():
        assert parse_from_hex(text) == rgba


def test_hash_is_optional():
    assert parse_from_hex("00aa11") == parse_from_hex("#00aa11")
    assert parse_from_hex("ffffff00") == (255, 255, 255, 0)


def test_case_insensitive():
    assert parse_from_hex("#AbCdEf") == parse_from_hex("#abcdef") == (171, 205, 239, 255)


def test_wrong_length():
    with pytest.raises(ParseHexError) as exc:
        parse_from_hex("#12345")
    assert exc.value.length == 5
    assert exc.value.text == "#12345"
    assert "5 digits" in str(exc.value)

    for bad in ("", "#", "#1234567", "#123456789", "##123456"):
        with pytest.raises(ParseHexError):
            parse_from_hex(bad)


def test_bad_digits():
    with pytest.raises(ParseToIntError) as exc:
        parse_from_hex("#xz00??_k")
    assert isinstance(exc.value.cause, ValueError)
    assert exc.value.__cause__ is exc.value.cause
    assert "red" in exc.value.context
    assert "invalid literal for int() with base 16" in str(exc.value.cause)


def test_rejects_what_int_would_accept():
    # int("+f", 16) and int(" f", 16) both succeed
    for bad in ("#+f0000", "# f0000", "#00 f00", "#0x0000"):
        with pytest.raises(ParseToIntError) as exc:
            parse_from_hex(bad)
        assert exc.value.__cause__ is exc.value.cause


def test_names_failing_channel():
    with pytest.raises(ParseToIntError, match="alpha"):
        parse_from_hex("#000000zz")


def test_to_hex():
    assert to_hex((0, 170, 17, 255)) == "#00aa11"
    assert to_hex((0, 170, 17, 0)) == "#00aa1100"
    assert to_hex((0, 170, 17, 255), alpha=True) == "#00aa11ff"


def test_to_hex_round_trip():
    for rgba, _ in samples_hex_rgba_packed.values():
        assert parse_from_hex(to_hex(rgba)) == rgba
