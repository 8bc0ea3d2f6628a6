"""Conversions between 8-bit sRGB channel values and linear RGB intensities."""

from __future__ import annotations

import numpy as np

_F32 = np.float32


def _as_channels(values) -> np.ndarray:
    arr = np.asarray(values)
    if arr.dtype.kind not in "iu":
        raise TypeError("channel values must be integers")
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise ValueError("channel values must lie in the range 0..255")
    return arr.astype(np.uint8)


def to_linear_rgb(v):
    """Decode 8-bit sRGB channel value(s) to linear intensity in [0, 1].

    Accepts an integer or an integer array; returns a float or a float32 array.
    """
    channels = _as_channels(v)
    fv = channels.astype(_F32) / _F32(255)
    low = fv / _F32(12.92)
    high = ((fv + _F32(0.055)) / _F32(1.055)) ** _F32(2.4)
    result = np.where(fv < _F32(0.04045), low, high).astype(_F32)
    if result.ndim == 0:
        return float(result)
    return result


def to_srgb(v):
    """Encode linear intensity value(s) to 8-bit sRGB, clamping to 0..255.

    Values in the gamma segment are truncated rather than rounded.
    Accepts a float or a float array; returns an int or a uint8 array.
    """
    values = np.nan_to_num(np.asarray(v, dtype=_F32), nan=0.0)
    clipped = np.clip(values, _F32(0), _F32(1))
    low = np.floor(_F32(0.5) + clipped * _F32(12.92) * _F32(255))
    high = np.floor(
        _F32(255) * (clipped ** _F32(1 / 2.4) * _F32(1.055) - _F32(0.055))
    )
    encoded = np.where(clipped < _F32(0.0031308), low, high)
    encoded = np.where(values <= 0, 0, encoded)
    encoded = np.where(values >= 1, 255, encoded)
    result = np.clip(encoded, 0, 255).astype(np.uint8)
    if result.ndim == 0:
        return int(result)
    return result