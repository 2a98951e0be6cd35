# renderer/ppm.py
"""
Plain (ASCII, "P3") PPM encoding and decoding of float RGB pixel arrays.

Only the subset of the format the ray tracer writes is supported: a three
line header followed by whitespace separated channel values, no comments.
"""
import logging
from typing import Union
import numpy as np

logger = logging.getLogger(__name__)

MAXIMUM_COLOR_VALUE = 255
MAX_LINE_LENGTH = 70


class PPMFormatError(ValueError):
    """The data isn't a plain PPM image this decoder understands."""


def scale_channels(pixels: np.ndarray, maximum: int = MAXIMUM_COLOR_VALUE) -> np.ndarray:
    """
    Maps float channels from [0, 1] to integers in [0, maximum], rounding
    half up and clamping anything out of range.
    """
    return np.clip(np.floor(pixels * maximum + 0.5), 0, maximum).astype(np.int64)


def encode(pixels: np.ndarray, maximum: int = MAXIMUM_COLOR_VALUE) -> str:
    """
    Encodes a (height, width, 3) float array as a plain PPM document.

    Every pixel row starts on a new line and lines are wrapped before they
    reach 70 characters. The document ends with a newline.
    """
    height, width, _ = pixels.shape
    lines = []
    for row in scale_channels(pixels, maximum):
        line = ""
        for value in row.reshape(-1):
            token = str(value)
            if len(line) + len(token) >= MAX_LINE_LENGTH:
                lines.append(line)
                line = token
            elif line:
                line += " " + token
            else:
                line = token
        lines.append(line)
    header = f"P3\n{width} {height}\n{maximum}\n"
    return header + "\n".join(lines) + "\n"


def decode(data: Union[str, bytes]) -> np.ndarray:
    """
    Decodes a plain PPM document into a (height, width, 3) float array with
    channels scaled to [0, 1].

    Raises:
        PPMFormatError: If the header or the pixel data is malformed.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as e:
            raise PPMFormatError("Only ASCII encoded images ('P3') are supported.") from e

    lines = data.split("\n")
    if len(lines) < 3 or lines[0].strip() != "P3":
        raise PPMFormatError("PPM HEADER: Only ASCII encoded images ('P3') are supported.")

    try:
        width, height = (int(v) for v in lines[1].split())
    except ValueError as e:
        raise PPMFormatError(f"PPM HEADER: Invalid size information {lines[1]!r}.") from e

    try:
        maximum = int(lines[2])
    except ValueError as e:
        raise PPMFormatError(f"PPM HEADER: Invalid maximum color value {lines[2]!r}.") from e
    if width <= 0 or height <= 0 or maximum <= 0:
        raise PPMFormatError("PPM HEADER: Size and maximum color value must be positive.")

    try:
        values = [int(v) for v in " ".join(lines[3:]).split()]
    except ValueError as e:
        raise PPMFormatError("PPM BODY: Color values must be integers.") from e
    if len(values) != width * height * 3:
        raise PPMFormatError(
            f"PPM BODY: Expected {width * height * 3} color values, got {len(values)}."
        )

    logger.debug("Decoded %dx%d PPM image (max value %d)", width, height, maximum)
    return np.array(values, dtype=np.float64).reshape(height, width, 3) / maximum
