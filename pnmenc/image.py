#!/usr/bin/env python3
"""In-memory image contract read by the PNM encoders, and a numpy-based implementation.

Encoders read pixel colors within the image bounds and the color model
declared for the whole image.
Any object implementing :class:`Image` can therefore be encoded.

:class:`ArrayImage` wraps numpy arrays indexed by [x,y] or [x,y,z].
"""
__author__ = "pnmenc contributors"
__since__ = "2024/03/11"

import abc
import collections

import numpy as np

from .colors import ColorModel, Gray, Gray16, RGBA, RGBA64, NRGBA, NRGBA64


class Rectangle(collections.namedtuple("Rectangle", ["min_x", "min_y", "max_x", "max_y"])):
    """Image bounds. Min coordinates are inclusive, max coordinates exclusive.
    """
    __slots__ = ()

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y


class Image(abc.ABC):
    """Rectangular grid of pixels that can be encoded.
    """

    @property
    @abc.abstractmethod
    def bounds(self) -> Rectangle:
        """Rectangle with the coordinates for which `at` is defined.
        """
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def color_model(self) -> ColorModel:
        """Color model of all pixels. Use ColorModel.OTHER for any representation
        not listed in ColorModel.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def at(self, x, y):
        """Return the color at (x, y). The returned object must have an
        rgba() method (see pnmenc.colors).
        """
        raise NotImplementedError

    def __repr__(self):
        bounds = self.bounds
        return f"{self.__class__.__name__}({bounds.width}x{bounds.height} " \
               f"@ ({bounds.min_x}, {bounds.min_y}), {self.color_model.name})"


class ArrayImage(Image):
    """Image backed by a numpy array indexed by [x,y] (one component)
    or [x,y,z] (1, 3 or 4 components).

    The color model is determined by the number of components and the
    data type, which must be uint8 or uint16:

    - 1 component: GRAY8 (uint8) or GRAY16 (uint16)
    - 3 components: RGBA32 (uint8) or RGBA64 (uint16), fully opaque
    - 4 components: OTHER, with non-premultiplied alpha in the last component
    """

    # (component_count, bytes_per_sample) -> (color model, color type)
    _layout_to_model = {
        (1, 1): (ColorModel.GRAY8, Gray),
        (1, 2): (ColorModel.GRAY16, Gray16),
        (3, 1): (ColorModel.RGBA32, RGBA),
        (3, 2): (ColorModel.RGBA64, RGBA64),
        (4, 1): (ColorModel.OTHER, NRGBA),
        (4, 2): (ColorModel.OTHER, NRGBA64),
    }

    def __init__(self, array, origin=(0, 0)):
        """
        :param array: numpy array indexed by [x,y] or [x,y,z].
        :param origin: (x, y) coordinates of the pixel stored at array[0, 0].
        :raises ValueError: if the array shape or data type cannot be represented.
        """
        array = np.asarray(array)
        if len(array.shape) == 2:
            array = np.expand_dims(array, axis=2)
        if len(array.shape) != 3:
            raise ValueError(f"Only 2D or 3D arrays can be used as images ({array.shape=})")
        if array.dtype.kind != "u" or array.dtype.itemsize not in (1, 2):
            raise ValueError(f"Only uint8 and uint16 arrays can be used as images ({array.dtype=})")
        try:
            self._color_model, self._color_type = \
                self._layout_to_model[(array.shape[2], array.dtype.itemsize)]
        except KeyError as ex:
            raise ValueError(f"Invalid number of components {array.shape[2]}. "
                             f"Only 1, 3 and 4 are supported.") from ex

        self.array = array
        self.origin = tuple(int(c) for c in origin)
        if array.shape[2] == 3:
            opaque = 0xff if array.dtype.itemsize == 1 else 0xffff
            self._make_color = lambda samples: self._color_type(*samples, opaque)
        else:
            self._make_color = lambda samples: self._color_type(*samples)

    @classmethod
    def from_row_major(cls, array, origin=(0, 0)):
        """Create an image from an array indexed by [y,x] or [y,x,z], e.g.,
        as returned by imageio.
        """
        return cls(np.swapaxes(np.asarray(array), 0, 1), origin=origin)

    @property
    def bounds(self):
        return Rectangle(min_x=self.origin[0], min_y=self.origin[1],
                         max_x=self.origin[0] + self.array.shape[0],
                         max_y=self.origin[1] + self.array.shape[1])

    @property
    def color_model(self):
        return self._color_model

    def at(self, x, y):
        return self._make_color(
            int(v) for v in self.array[x - self.origin[0], y - self.origin[1]])
