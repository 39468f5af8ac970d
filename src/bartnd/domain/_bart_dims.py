"""
Dimension semantics used by the BART toolkit.

BART addresses every array through a fixed, positional convention of
`BART_DIMS` (16) dimensions. Each position has a meaning (readout,
phase-encoding, coil, time, ...). Application arrays usually come in a
different axis order and with fewer axes; `BartDims` lets the caller state
what each of its axes means so the remapper can move them into place.
"""

from enum import Enum

BART_DIMS = 16
"""Number of canonical dimension slots in BART's positional convention."""


class BartDims(Enum):
    """
    Enumeration of the canonical BART dimension slots.

    The value of each member is its slot position in BART's positional
    layout. Members are ordered by value.

    Attributes
    ----------
    READ : BartDims
        Readout direction (slot 0).
    PHS1, PHS2 : BartDims
        First and second phase-encoding directions (slots 1, 2).
    COIL : BartDims
        Receive coils (slot 3).
    MAPS : BartDims
        Sensitivity map sets (slot 4).
    TE : BartDims
        Echo times (slot 5).
    COEFF, COEFF2 : BartDims
        Coefficient dimensions (slots 6, 7).
    ITER : BartDims
        Iterations (slot 8).
    CSHIFT : BartDims
        Chemical shift (slot 9).
    TIME, TIME2 : BartDims
        Time frames (slots 10, 11).
    LEVEL : BartDims
        Wavelet levels (slot 12).
    SLICE : BartDims
        Slices (slot 13).
    AVG : BartDims
        Averages (slot 14).
    BATCH : BartDims
        Batch dimension (slot 15).
    """

    READ = 0
    PHS1 = 1
    PHS2 = 2
    COIL = 3
    MAPS = 4
    TE = 5
    COEFF = 6
    COEFF2 = 7
    ITER = 8
    CSHIFT = 9
    TIME = 10
    TIME2 = 11
    LEVEL = 12
    SLICE = 13
    AVG = 14
    BATCH = 15

    def __lt__(self, other: "BartDims") -> bool:
        if not isinstance(other, BartDims):
            return NotImplemented
        return self.value < other.value

    @classmethod
    def first(cls, n: int) -> tuple["BartDims", ...]:
        """
        Return the first `n` slots in positional order.

        Parameters
        ----------
        n : int
            Number of slots, at most `BART_DIMS`.

        Returns
        -------
        tuple[BartDims, ...]
            ``(READ, PHS1, ...)`` truncated to `n` members.

        Raises
        ------
        ValueError
            If `n` is negative or larger than `BART_DIMS`.
        """
        if n < 0 or n > BART_DIMS:
            raise ValueError(f"n must be in [0, {BART_DIMS}], got {n}")
        return tuple(cls(i) for i in range(n))
