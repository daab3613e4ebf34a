"""Basic chromacodec usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromacodec import (
    RGB,
    Canonical,
    ColorFormats,
    np_pack,
    np_unpack,
    parse_color,
    parse_scheme_lines,
)


def demonstrate_colors() -> None:
    # Generic channels, then the 8-bit canonical form.
    rgb = RGB((255, 128, 64))
    print("RGB -> RGBA:", rgb.into_rgba(200))
    accent = Canonical.from_rgb(rgb)
    print("Canonical:", accent, "as unit floats:", accent.to_unit().value)


def demonstrate_codecs() -> None:
    color = Canonical.parse_from_hex("#00aa11")
    print("Hex -> canonical:", color)
    print("Packed:", color.pack(), "unpacked:", Canonical.unpack(color.pack()))
    print("Back to hex:", color.to_hex())

    for text in ("rgb(0.5, 1.0, 0.25)", "rgba(12, 34, 56, 78)", "#ffffff00"):
        print(f"{text!r:>24} ->", parse_color(text))
    print("Forced format:", parse_color("rgb(1.0, 0.0, 0.0)", ColorFormats.RGB_F))


def demonstrate_arrays() -> None:
    colors = np.array([[128, 128, 0, 255], [172, 171, 172, 171]], dtype=np.uint8)
    packed = np_pack(colors)
    print("Packed array:", packed)
    print("Unpacked array:\n", np_unpack(packed))


def demonstrate_scheme() -> None:
    scheme = parse_scheme_lines([
        "Solarized accents",
        "#b58900",
        "rgb(0.796, 0.294, 0.086)",
        "rgba(220, 50, 47, 255)",
    ])
    print(scheme, scheme.packed())


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_codecs()
    demonstrate_arrays()
    demonstrate_scheme()
