"""Colour vision deficiency kinds and the simulation matrices for each."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Matrix = tuple[tuple[float, float, float], ...]
Vector = tuple[float, float, float]


class ColorVisionType(enum.IntEnum):
    """Kind of colour vision to simulate."""

    COMMON = 0
    PROTAN = 1
    DEUTAN = 2
    TRITAN = 3
    ACHROMAT = 4


def to_color_vision_type(value) -> ColorVisionType:
    """Map an integer code to a kind; unknown codes mean common vision."""
    code = int(value)
    if 1 <= code <= 4:
        return ColorVisionType(code)
    return ColorVisionType.COMMON


def _lookup(table: dict, kind, model: str):
    try:
        return table[ColorVisionType(kind)]
    except (ValueError, KeyError):
        raise ValueError(f"{model} has no parameters for {kind!r}") from None


@dataclass(frozen=True)
class Brettel1997Params:
    """Two half-plane matrices and the normal of the plane separating them."""

    mat1: Matrix
    mat2: Matrix
    normal: Vector

    @classmethod
    def for_type(cls, kind) -> Brettel1997Params:
        """Return the parameters for a dichromacy kind."""
        return _lookup(_BRETTEL1997, kind, "Brettel 1997")


@dataclass(frozen=True)
class Vienot1999Params:
    """A single projection matrix."""

    mat: Matrix

    @classmethod
    def for_type(cls, kind) -> Vienot1999Params:
        """Return the parameters for a dichromacy kind."""
        return _lookup(_VIENOT1999, kind, "Vienot 1999")


BRETTEL1997_PROTAN = Brettel1997Params(
    mat1=(
        (1.00156, -0.00540, 0.00384),
        (0.04372, 0.84864, 0.10764),
        (-0.34528, 1.19548, 0.14980),
    ),
    mat2=(
        (1.00139, -0.00524, 0.00386),
        (0.03892, 0.85291, 0.10816),
        (-0.30742, 1.16172, 0.14570),
    ),
    normal=(-0.00441, 0.00393, 0.00048),
)

BRETTEL1997_DEUTAN = Brettel1997Params(
    mat1=(
        (0.99278, 0.02728, -0.02006),
        (0.09462, 0.64245, 0.26294),
        (-0.22858, 0.86381, 0.36477),
    ),
    mat2=(
        (0.99196, 0.02784, -0.01980),
        (0.10540, 0.63506, 0.25954),
        (-0.25464, 0.88166, 0.37298),
    ),
    normal=(0.00892, -0.00611, -0.00281),
)

BRETTEL1997_TRITAN = Brettel1997Params(
    mat1=(
        (0.11911, 0.80500, 0.07589),
        (0.14431, 0.86812, -0.01243),
        (-0.14826, 0.13548, 1.01277),
    ),
    mat2=(
        (0.24796, 1.12767, -0.37562),
        (0.12320, 0.81526, 0.06154),
        (-0.12657, 0.18979, 0.93678),
    ),
    normal=(-0.01113, -0.02788, 0.03901),
)

VIENOT1999_PROTAN = Vienot1999Params(
    mat=(
        (1.00000, -0.00401, 0.00401),
        (-0.00000, 0.88762, 0.11238),
        (0.00000, 0.88762, 0.11238),
    )
)

VIENOT1999_DEUTAN = Vienot1999Params(
    mat=(
        (1.00000, 0.02234, -0.02234),
        (-0.00000, 0.70725, 0.29275),
        (0.00000, 0.70725, 0.29275),
    )
)

VIENOT1999_TRITAN = Vienot1999Params(
    mat=(
        (0.14076, 0.85924, -0.00000),
        (0.14076, 0.85924, 0.00000),
        (-0.14461, 0.14461, 1.00000),
    )
)

_BRETTEL1997 = {
    ColorVisionType.PROTAN: BRETTEL1997_PROTAN,
    ColorVisionType.DEUTAN: BRETTEL1997_DEUTAN,
    ColorVisionType.TRITAN: BRETTEL1997_TRITAN,
}

_VIENOT1999 = {
    ColorVisionType.PROTAN: VIENOT1999_PROTAN,
    ColorVisionType.DEUTAN: VIENOT1999_DEUTAN,
    ColorVisionType.TRITAN: VIENOT1999_TRITAN,
}