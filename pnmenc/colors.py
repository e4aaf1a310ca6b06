#!/usr/bin/env python3
"""Color types and the color conversions needed to produce PNM samples.

All color types expose an `rgba()` method that returns the red, green, blue
and alpha components, alpha-premultiplied and scaled to the [0, 65535] range.
8-bit components are widened to 16 bits by replication, i.e., `v * 0x101`,
so that 0xab becomes 0xabab.

The conversion functions (:func:`to_gray`, :func:`to_rgb` and
:func:`to_bilevel`) only rely on `rgba()`, so any object providing it
(e.g., a user-defined color type) can be encoded.
"""
__author__ = "pnmenc contributors"
__since__ = "2024/03/11"

import collections
import enum


class ColorModel(enum.Enum):
    """Color model declared by an image for all of its pixels.
    """
    #: 8-bit grayscale, pixels are :class:`Gray` instances
    GRAY8 = "gray8"
    #: 16-bit grayscale, pixels are :class:`Gray16` instances
    GRAY16 = "gray16"
    #: 8 bits per component color (24-bit color plus alpha), pixels are :class:`RGBA` instances
    RGBA32 = "rgba32"
    #: 16 bits per component color (48-bit color plus alpha), pixels are :class:`RGBA64` instances
    RGBA64 = "rgba64"
    #: Any other representation, which is always converted when encoding
    OTHER = "other"


class Gray(collections.namedtuple("Gray", ["y"])):
    """8-bit gray level.
    """
    __slots__ = ()

    def rgba(self):
        y = self.y * 0x101
        return y, y, y, 0xffff


class Gray16(collections.namedtuple("Gray16", ["y"])):
    """16-bit gray level.
    """
    __slots__ = ()

    def rgba(self):
        return self.y, self.y, self.y, 0xffff


class RGBA(collections.namedtuple("RGBA", ["r", "g", "b", "a"])):
    """Alpha-premultiplied color with 8 bits per component.
    """
    __slots__ = ()

    def rgba(self):
        return tuple(v * 0x101 for v in self)


class RGBA64(collections.namedtuple("RGBA64", ["r", "g", "b", "a"])):
    """Alpha-premultiplied color with 16 bits per component.
    """
    __slots__ = ()

    def rgba(self):
        return tuple(self)


class NRGBA(collections.namedtuple("NRGBA", ["r", "g", "b", "a"])):
    """Non-premultiplied color with 8 bits per component.
    """
    __slots__ = ()

    def rgba(self):
        a = self.a * 0x101
        return tuple((v * 0x101) * self.a // 0xff for v in self[:3]) + (a,)


class NRGBA64(collections.namedtuple("NRGBA64", ["r", "g", "b", "a"])):
    """Non-premultiplied color with 16 bits per component.
    """
    __slots__ = ()

    def rgba(self):
        return tuple(v * self.a // 0xffff for v in self[:3]) + (self.a,)


# Two-entry palette used to produce PBM samples. Index 0 is preferred on ties.
BILEVEL_PALETTE = (Gray(255), Gray(0))


def to_gray(color, bits=8):
    """Return the luminance of a color as an integer of the given bit depth.

    The ITU-R BT.601 weights (0.299, 0.587, 0.114) are applied with 16-bit
    fixed point arithmetic and rounding, so that gray colors keep
    their exact value.

    :param color: an object with an rgba() method (see module docstring).
    :param bits: 8 or 16.
    """
    assert bits in (8, 16), f"Unsupported bit depth {bits}"
    r, g, b, _ = color.rgba()
    y = 19595 * r + 38470 * g + 7471 * b + (1 << 15)
    return y >> 24 if bits == 8 else y >> 16


def to_rgb(color, bits=8):
    """Return the (r, g, b) components of a color with the given bit depth.
    Alpha is discarded (the components remain premultiplied).

    :param color: an object with an rgba() method (see module docstring).
    :param bits: 8 or 16.
    """
    assert bits in (8, 16), f"Unsupported bit depth {bits}"
    r, g, b, _ = color.rgba()
    if bits == 8:
        return r >> 8, g >> 8, b >> 8
    return r, g, b


def palette_index(palette, color):
    """Return the index of the palette entry closest to color.

    The distance is the sum over all four premultiplied 16-bit components of
    the squared differences divided by 4, and the first entry wins on ties.
    """
    cr, cg, cb, ca = color.rgba()
    best_index, best_distance = 0, None
    for i, entry in enumerate(palette):
        distance = sum(((c - p) ** 2) >> 2
                       for c, p in zip((cr, cg, cb, ca), entry.rgba()))
        if best_distance is None or distance < best_distance:
            best_index, best_distance = i, distance
            if distance == 0:
                break
    return best_index


def to_bilevel(color):
    """Return 0 (black) or 255 (white), whichever of the two
    :data:`BILEVEL_PALETTE` gray levels is closest to color.
    """
    return BILEVEL_PALETTE[palette_index(BILEVEL_PALETTE, color)].y
