import pytest

from okadjust.core import conversions as conv
from okadjust.core.errors import ParseError


def test_hex_to_rgb():
    assert conv.hex_to_rgb("#ff0000") == (255, 0, 0)
    assert conv.hex_to_rgb("ff0000") == (255, 0, 0)
    assert conv.hex_to_rgb("F00") == (255, 0, 0)
    assert conv.hex_to_rgb("#AbC") == (0xaa, 0xbb, 0xcc)
    assert conv.hex_to_rgb("336699") == (0x33, 0x66, 0x99)


@pytest.mark.parametrize("text", ["zzz", "#12", "", "#", "#ff00000", "#gg0000", " #ff0000", "ff 000"])
def test_hex_to_rgb_rejects(text):
    with pytest.raises(ParseError):
        conv.hex_to_rgb(text)


def test_rgb_to_hex():
    assert conv.rgb_to_hex(255, 0, 0) == "ff0000"
    assert conv.rgb_to_hex(0xab, 0xcd, 0xef) == "abcdef"
    # saturates and rounds half up
    assert conv.rgb_to_hex(-3.0, 255.4, 300.0) == "00ffff"
    assert conv.rgb_to_hex(127.5, 0.49, 254.5) == "8000ff"
    assert conv.rgb_to_hex(float("nan"), 0, 0) == "000000"


def test_oklab_reference_values():
    L, a, b = conv.srgb_to_oklab(1.0, 0.0, 0.0)
    assert L == pytest.approx(0.62796, abs=1e-4)
    assert a == pytest.approx(0.22486, abs=1e-4)
    assert b == pytest.approx(0.12585, abs=1e-4)

    L, a, b = conv.srgb_to_oklab(1.0, 1.0, 1.0)
    assert L == pytest.approx(1.0, abs=1e-6)
    assert a == pytest.approx(0.0, abs=1e-6)
    assert b == pytest.approx(0.0, abs=1e-6)

    assert conv.srgb_to_oklab(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_oklch_reference_values():
    L, C, h = conv.srgb_to_oklch(1.0, 0.0, 0.0)
    assert L == pytest.approx(0.62796, abs=1e-4)
    assert C == pytest.approx(0.25768, abs=1e-4)
    assert h == pytest.approx(29.23, abs=0.01)

    # gray has no hue
    L, C, h = conv.srgb_to_oklch(0.5, 0.5, 0.5)
    assert C < 1e-6
    assert h == 0.0


def test_oklab_inverse():
    for rgb in [(1.0, 0.0, 0.0), (0.2, 0.4, 0.6), (0.0, 1.0, 0.0), (0.5, 0.5, 0.5)]:
        back = conv.oklab_to_srgb(*conv.srgb_to_oklab(*rgb))
        # the published 10-digit matrices invert each other to about 1e-6
        assert back == pytest.approx(rgb, abs=1e-5)


def test_toe():
    assert conv._toe(0.0) == pytest.approx(0.0)
    assert conv._toe(1.0) == pytest.approx(1.0)
    assert conv._toe_inv(conv._toe(0.37)) == pytest.approx(0.37)


def test_okhsl_reference_values():
    h, s, l_val = conv.srgb_to_okhsl(1.0, 0.0, 0.0)
    assert h == pytest.approx(29.23, abs=0.01)
    assert s == pytest.approx(1.0, abs=1e-2)
    assert l_val == pytest.approx(0.5681, abs=1e-3)

    h, s, l_val = conv.srgb_to_okhsl(1.0, 1.0, 1.0)
    assert (h, s) == (0.0, 0.0)
    assert l_val == pytest.approx(1.0, abs=1e-6)

    assert conv.srgb_to_okhsl(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)

    h, s, l_val = conv.srgb_to_okhsl(0.5, 0.5, 0.5)
    assert (h, s) == (0.0, 0.0)


def test_okhsl_lightness_extremes():
    assert conv.okhsl_to_srgb(123.0, 0.7, 1.0) == (1.0, 1.0, 1.0)
    assert conv.okhsl_to_srgb(123.0, 0.7, 0.0) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("hex_code", [
    "336699", "ff0000", "00ff00", "0000ff", "ffff00", "808080",
    "000000", "ffffff", "123456", "fedcba", "6b7a8f", "01ff7f",
])
def test_perceptual_round_trip(hex_code):
    srgb = tuple(v / 255.0 for v in conv.hex_to_rgb(hex_code))
    for forward, inverse in [
        (conv.srgb_to_okhsl, conv.okhsl_to_srgb),
        (conv.srgb_to_oklch, conv.oklch_to_srgb),
    ]:
        r, g, b = inverse(*forward(*srgb))
        assert conv.rgb_to_hex(r * 255, g * 255, b * 255) == hex_code


@pytest.mark.parametrize("l_val", [1e-50, 1e-80, 1e-100, 1e-300, 5e-324])
def test_okhsl_tiny_lightness_is_black(l_val):
    r, g, b = conv.okhsl_to_srgb(200.0, 0.9, l_val)
    assert conv.rgb_to_hex(r * 255, g * 255, b * 255) == "000000"


def test_okhsl_lightness_just_below_one():
    r, g, b = conv.okhsl_to_srgb(200.0, 0.9, 1.0 - 1e-16)
    assert conv.rgb_to_hex(r * 255, g * 255, b * 255) == "ffffff"
