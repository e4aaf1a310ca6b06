#!/usr/bin/env python3
"""Module to write images in binary PBM (P4), PGM (P5) and PPM (P6) formats.
Format specification: http://netpbm.sourceforge.net/doc/pbm.html
(and pgm.html, ppm.html).

Files consist of an ASCII header followed by the binary raster, written row
by row from top to bottom without separators:

- PBM: `P4\\n<width> <height>\\n`, 8 pixels per byte, most significant bit first,
  1 for black. Each row is padded with 0 bits up to a byte boundary.
- PGM: `P5\\n<width> <height>\\n<maxvalue>\\n`, one luminance sample per pixel.
- PPM: `P6\\n<width> <height>\\n<maxvalue>\\n`, red, green and blue samples per pixel.

Samples of PGM and PPM files take 1 byte if maxvalue is 255,
and 2 bytes (most significant byte first) if maxvalue is 65535.

Exceptions raised by the output stream are not handled, so a failed write
stops the encoding and the stream is left with whatever was already written.
Short writes reported by the stream (i.e., write returning fewer bytes than given)
raise OSError in the same way.
Use `buffered=True` (or set `pnmenc.config.options.buffer_raster`)
to write each file with a single call instead.
"""
__author__ = "pnmenc contributors"
__since__ = "2020/04/08"

import enum
import io
import numbers

import numpy as np

import pnmenc
from .colors import ColorModel, to_gray, to_rgb, to_bilevel

#: Maximum sample value when samples are stored with 1 byte
MAXVALUE_8BIT = 255
#: Maximum sample value when samples are stored with 2 bytes
MAXVALUE_16BIT = 65535


class InvalidFormatError(ValueError):
    """Raised when the requested format is not one of PBM, PGM or PPM.
    """


class PNMFormat(enum.IntEnum):
    """Supported binary PNM variants.
    """
    PBM = 0
    PGM = 1
    PPM = 2

    @property
    def magic(self):
        """Magic number that starts the header, e.g., "P4" for PBM.
        """
        return f"P{self.value + 4}"

    @classmethod
    def parse(cls, value):
        """Return the PNMFormat corresponding to value, which can be a PNMFormat,
        one of the integers 0, 1, 2, a magic number ("P4", "P5", "P6")
        or a format name ("pbm", "pgm", "ppm"), case-insensitive.

        :raises InvalidFormatError: if value does not identify any format.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            for pnm_format in cls:
                if key in (pnm_format.name, pnm_format.magic):
                    return pnm_format
        elif isinstance(value, numbers.Integral) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                pass
        raise InvalidFormatError(
            f"Invalid PNM format {value!r}. "
            f"Valid formats: {', '.join(f'{f.name} ({f.magic}, {f.value})' for f in cls)}")


def select_maxvalue(image, pnm_format):
    """Return the maxvalue used to encode image with the given format,
    or None for PBM, which does not use one.

    65535 is selected only when the image declares GRAY16 and PGM is requested,
    or the image declares RGBA64 and PPM is requested. Otherwise, 255 is used.
    """
    pnm_format = PNMFormat.parse(pnm_format)
    if pnm_format is PNMFormat.PBM:
        return None
    deep_model = ColorModel.GRAY16 if pnm_format is PNMFormat.PGM else ColorModel.RGBA64
    return MAXVALUE_16BIT if image.color_model is deep_model else MAXVALUE_8BIT


def encode(stream, image, pnm_format, buffered=None):
    """Write image into stream in the given PNM format.

    Images declaring a color model other than the one needed by the format
    are converted: colors are reduced to black and white for PBM,
    to luminance for PGM, and the alpha channel is discarded for PPM.

    :param stream: file-like object opened for binary writing. Only its
      write method is used.
    :param image: a pnmenc.image.Image instance.
    :param pnm_format: a PNMFormat or any value accepted by PNMFormat.parse.
    :param buffered: if True, the complete file is produced in memory
      and written with a single call to stream.write, so that nothing is written
      if any pixel cannot be converted. If None, pnmenc.config.options.buffer_raster
      is used.
    :raises InvalidFormatError: if pnm_format is not recognized. Nothing is written in this case.
    """
    pnm_format = PNMFormat.parse(pnm_format)
    buffered = buffered if buffered is not None else pnmenc.config.options.buffer_raster
    maxvalue = select_maxvalue(image, pnm_format)

    if pnmenc.log.debug_active():
        pnmenc.log.debug(f"Encoding {image!r} as {pnm_format.name} "
                         f"({maxvalue=}, {buffered=})")

    if buffered:
        with io.BytesIO() as buffer:
            _encode_unbuffered(buffer, image, pnm_format, maxvalue)
            _write(stream, buffer.getvalue())
    else:
        _encode_unbuffered(stream, image, pnm_format, maxvalue)


def _encode_unbuffered(stream, image, pnm_format, maxvalue):
    if pnm_format is PNMFormat.PBM:
        encode_pbm(stream, image)
    elif pnm_format is PNMFormat.PGM:
        encode_pgm(stream, image, maxvalue)
    else:
        encode_ppm(stream, image, maxvalue)


def pack_byte(samples):
    """Pack up to 8 bilevel samples into a byte, the first one being the
    most significant bit.

    Samples equal to 0 (black) produce 1 bits, and any other value produces 0 bits.
    If fewer than 8 samples are given, the remaining (least significant) bits are 0.
    Samples after the 8th one are ignored.
    """
    packed = 0
    for bit, sample in enumerate(samples[:8]):
        if sample == 0:
            packed |= 0x80 >> bit
    return packed


def _write(stream, data):
    """Write data into stream.

    :raises OSError: if stream.write reports that fewer than len(data) bytes
      were written (e.g., raw unbuffered streams). Streams whose write method
      returns None are trusted to either write everything or raise.
    """
    written = stream.write(data)
    if written is not None and written != len(data):
        raise OSError(f"Short write: only {written} out of {len(data)} bytes "
                      f"could be written to {stream!r}")


def _write_header(stream, pnm_format, width, height, maxvalue=None):
    header = f"{pnm_format.magic}\n{width} {height}\n"
    if maxvalue is not None:
        header += f"{maxvalue}\n"
    _write(stream, header.encode("ascii"))


def _sample_dtype(maxvalue, byteorder=">"):
    """Return the numpy dtype of the samples written for maxvalue,
    i.e., 1 byte per sample up to 255, and 2 bytes (big endian) otherwise.
    """
    bytes_per_sample = 1 if maxvalue <= MAXVALUE_8BIT else 2
    return np.dtype(f"{byteorder}u{bytes_per_sample}")


def encode_pbm(stream, image):
    """Write image into stream in PBM (P4) format.
    Each pixel becomes black or white, whichever is closest.
    """
    bounds = image.bounds
    width = bounds.width
    _write_header(stream, PNMFormat.PBM, width, bounds.height)

    row = bytearray(width)
    packed_row = bytearray((width + 7) // 8)
    for y in range(bounds.min_y, bounds.max_y):
        # Read row and convert to black/white
        for i, x in enumerate(range(bounds.min_x, bounds.max_x)):
            row[i] = to_bilevel(image.at(x, y))

        # Pack values and write
        for i, offset in enumerate(range(0, width, 8)):
            packed_row[i] = pack_byte(row[offset:offset + 8])
        _write(stream, bytes(packed_row))


def encode_pgm(stream, image, maxvalue):
    """Write image into stream in PGM (P5) format, with one luminance
    sample per pixel.

    :param maxvalue: maximum sample value written in the header. Samples are
      stored with 8 bits if it is not greater than 255, and with 16 bits otherwise.
    """
    bounds = image.bounds
    _write_header(stream, PNMFormat.PGM, bounds.width, bounds.height, maxvalue)

    dtype = _sample_dtype(maxvalue)
    bits = 8 * dtype.itemsize

    row = np.empty(bounds.width, dtype=dtype)
    for y in range(bounds.min_y, bounds.max_y):
        for i, x in enumerate(range(bounds.min_x, bounds.max_x)):
            row[i] = to_gray(image.at(x, y), bits=bits)
        _write(stream, row.tobytes())


def encode_ppm(stream, image, maxvalue):
    """Write image into stream in PPM (P6) format, with red, green and blue
    samples for each pixel. Alpha is discarded.

    :param maxvalue: maximum sample value written in the header. Samples are
      stored with 8 bits if it is not greater than 255, and with 16 bits otherwise.
    """
    bounds = image.bounds
    _write_header(stream, PNMFormat.PPM, bounds.width, bounds.height, maxvalue)

    dtype = _sample_dtype(maxvalue)
    bits = 8 * dtype.itemsize

    # Rows are stored pixel by pixel, i.e., [x, component]
    row = np.empty((bounds.width, 3), dtype=dtype)
    for y in range(bounds.min_y, bounds.max_y):
        for i, x in enumerate(range(bounds.min_x, bounds.max_x)):
            row[i] = to_rgb(image.at(x, y), bits=bits)
        _write(stream, row.tobytes())
