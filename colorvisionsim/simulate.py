"""Simulation of colour vision deficiencies on BGRA pixel arrays."""

from __future__ import annotations

import numpy as np

from colorvisionsim.color import to_linear_rgb, to_srgb
from colorvisionsim.params import (
    Brettel1997Params,
    ColorVisionType,
    Vienot1999Params,
    to_color_vision_type,
)

_F32 = np.float32


def _as_pixels(image) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim == 0 or arr.shape[-1] != 4:
        raise ValueError("image must have a last axis of four BGRA channels")
    if arr.dtype.kind not in "iu":
        raise TypeError("pixel channels must be integers")
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise ValueError("pixel channels must lie in the range 0..255")
    return arr.astype(np.uint8)


def _linear_bgr(pixels: np.ndarray) -> np.ndarray:
    return np.asarray(to_linear_rgb(pixels[..., :3]), dtype=_F32)


def _blend(pixels: np.ndarray, bgr: np.ndarray, simulated, severity) -> np.ndarray:
    rate = _F32(severity)
    mixed = bgr + (np.asarray(simulated, dtype=_F32) - bgr) * rate
    out = pixels.copy()
    out[..., :3] = to_srgb(mixed)
    return out


def simulate(kind, severity, image) -> np.ndarray:
    """Simulate ``kind`` at ``severity`` (0..1) on a BGRA uint8 array.

    Protanopia and deuteranopia use Brettel 1997, tritanopia uses Vienot 1999
    and achromatopsia uses CIE XYZ luminance; common vision returns a copy.
    Alpha is left untouched and a new array is returned.
    """
    kind = ColorVisionType(kind)
    if kind in (ColorVisionType.PROTAN, ColorVisionType.DEUTAN):
        return simulate_brettel1997(kind, severity, image)
    if kind is ColorVisionType.TRITAN:
        return simulate_vienot1999(kind, severity, image)
    if kind is ColorVisionType.ACHROMAT:
        return simulate_achromat(severity, image)
    return _as_pixels(image).copy()


def simulate_brettel1997(kind, severity, image) -> np.ndarray:
    """Apply the Brettel 1997 two-plane dichromacy model."""
    params = Brettel1997Params.for_type(kind)
    pixels = _as_pixels(image)
    bgr = _linear_bgr(pixels)
    normal = np.asarray(params.normal, dtype=_F32)
    mat1 = np.asarray(params.mat1, dtype=_F32)
    mat2 = np.asarray(params.mat2, dtype=_F32)
    side = (bgr @ normal) >= 0
    simulated = np.where(side[..., None], bgr @ mat1.T, bgr @ mat2.T)
    return _blend(pixels, bgr, simulated, severity)


def simulate_vienot1999(kind, severity, image) -> np.ndarray:
    """Apply the Vienot 1999 single-projection dichromacy model."""
    params = Vienot1999Params.for_type(kind)
    pixels = _as_pixels(image)
    bgr = _linear_bgr(pixels)
    mat = np.asarray(params.mat, dtype=_F32)
    return _blend(pixels, bgr, bgr @ mat.T, severity)


def simulate_achromat(severity, image) -> np.ndarray:
    """Blend each pixel towards its CIE XYZ luminance."""
    pixels = _as_pixels(image)
    bgr = _linear_bgr(pixels)
    wide = bgr.astype(np.float64)
    luminance = (
        0.2126 * wide[..., 2] + 0.7152 * wide[..., 1] + 0.0722 * wide[..., 0]
    ).astype(_F32)
    simulated = np.repeat(luminance[..., None], 3, axis=-1)
    return _blend(pixels, bgr, simulated, severity)


def simulate_buffer(kind, severity, data, width, height):
    """Simulate on a raw BGRA byte buffer of ``width * height`` pixels.

    ``kind`` is an integer code; unknown codes leave the pixels unchanged.
    Returns ``(data, width, height)`` with the processed bytes; any bytes past
    the last pixel are kept as they were.
    """
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    raw = bytes(data)
    count = width * height
    size = count * 4
    if len(raw) < size:
        raise ValueError(
            f"buffer holds {len(raw)} bytes, {size} needed for {width}x{height}"
        )
    pixels = np.frombuffer(raw, dtype=np.uint8, count=size).reshape(count, 4)
    result = simulate(to_color_vision_type(kind), severity, pixels)
    return result.tobytes() + raw[size:], width, height