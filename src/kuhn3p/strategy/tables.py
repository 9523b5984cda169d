"""
Fixed legs of the equilibrium profile.

Entries that the family leaves free (or derives from free values) are
``Slot`` references into the parameter vector; everything else is a constant.
Seat tables are indexed ``[situation - 1][rank]``; ``A`` is indexed
``[rank][situation - 1]``.

The constant values are a reconstruction: they have not been checked against
a best response, and the resulting profile is not an exact equilibrium.
"""

from dataclasses import dataclass

from ..constants import (
    B11_INDEX,
    B21_INDEX,
    B23_INDEX,
    B32_INDEX,
    B33_INDEX,
    B41_INDEX,
    C11_INDEX,
    C21_INDEX,
    C33_INDEX,
    C34_INDEX,
)


@dataclass(frozen=True, slots=True)
class Slot:
    index: int


# Seat 0 never opens the betting and only continues with a King or an Ace.
A = (
    (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.5, 0.0),
    (0.0, 1.0, 1.0, 1.0),
)

B31 = 0.0
B12 = 0.0
B22 = 0.0
B42 = 1.0
B13 = 0.0
B43 = 1.0
B14 = 0.0
B24 = 0.0
B34 = 0.0
B44 = 1.0

C31 = 0.0
C12 = 0.0
C22 = 0.0
C32 = 0.0
C13 = 0.0
C23 = 0.0
C14 = 0.0
C24 = 0.0
C4 = (1.0, 1.0, 1.0, 1.0)

SEAT1_TABLE = (
    (Slot(B11_INDEX), Slot(B21_INDEX), B31, Slot(B41_INDEX)),
    (B12, B22, Slot(B32_INDEX), B42),
    (B13, Slot(B23_INDEX), Slot(B33_INDEX), B43),
    (B14, B24, B34, B44),
)

SEAT2_TABLE = (
    (Slot(C11_INDEX), Slot(C21_INDEX), C31, C4[0]),
    (C12, C22, C32, C4[1]),
    (C13, C23, Slot(C33_INDEX), C4[2]),
    (C14, C24, Slot(C34_INDEX), C4[3]),
)
