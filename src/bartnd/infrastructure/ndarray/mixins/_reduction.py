"""
Reduction and elementwise-map mixin.

Defines `NDArrayReductionMixin`: sums (total or along axes), p-norms, and the
simple elementwise maps (real part, imaginary part, magnitude, conjugate).
Reductions accumulate in double precision and return complex64 results.
"""

from __future__ import annotations

import math
from typing import Any, Union

import numpy as np


class NDArrayReductionMixin:
    """
    Reductions and elementwise maps.

    Notes
    -----
    Maps returning real values (`real`, `imag`, `abs`) return float32 NumPy
    arrays shaped like the receiver; `conj` returns a new dense array.
    """

    def _normalize_axes(self, axes: tuple[Any, ...]) -> tuple[int, ...]:
        if len(axes) == 1 and isinstance(axes[0], (tuple, list)):
            axes = tuple(axes[0])
        out = []
        for a in axes:
            a = int(a)
            k = a + self.ndim if a < 0 else a
            if k < 0 or k >= self.ndim:
                raise ValueError(f"axis {a} is out of range for {self.ndim} dimensions")
            if k in out:
                raise ValueError(f"axis {a} is repeated")
            out.append(k)
        return tuple(out)

    def sum(self, *axes: int) -> Union[complex, Any]:
        """
        Sum elements.

        Parameters
        ----------
        *axes : int
            Axes to reduce. With no axes, every element is summed.

        Returns
        -------
        complex or ComplexFloatNDArray
            The total as a complex number when every axis is reduced,
            otherwise a new dense array with the reduced axes removed.

        Raises
        ------
        ValueError
            If an axis is out of range or repeated.
        """
        from .._dense import ComplexFloatNDArray

        values = self._values().astype(np.complex128)
        if len(axes) == 0:
            return complex(np.complex64(values.sum()))
        reduced = self._normalize_axes(axes)
        if len(reduced) == self.ndim:
            return complex(np.complex64(values.sum()))
        out = values.reshape(self.shape).sum(axis=reduced)
        return ComplexFloatNDArray.from_numpy(out)

    def norm(self, p: float = 2) -> float:
        """
        Compute the p-norm of the flattened array.

        Parameters
        ----------
        p : float, optional
            Order of the norm. ``0`` counts non-zero elements, ``math.inf``
            gives the largest magnitude. Defaults to 2.

        Returns
        -------
        float

        Raises
        ------
        ValueError
            If `p` is negative.
        """
        if p < 0:
            raise ValueError(f"p must be non-negative, got {p}")
        mags = np.abs(self._values().astype(np.complex128))
        if p == 0:
            return float(np.count_nonzero(mags))
        if math.isinf(p):
            return float(mags.max()) if mags.size else 0.0
        if p == 1:
            return float(mags.sum())
        if p == 2:
            return float(np.sqrt(np.sum(mags * mags)))
        return float(np.sum(mags**p) ** (1.0 / p))

    def real(self) -> np.ndarray:
        """Return the real parts as a float32 array of the receiver's shape."""
        return self._values().real.astype(np.float32).reshape(self.shape)

    def imag(self) -> np.ndarray:
        """Return the imaginary parts as a float32 array of the receiver's shape."""
        return self._values().imag.astype(np.float32).reshape(self.shape)

    def abs(self) -> np.ndarray:
        """Return the magnitudes as a float32 array of the receiver's shape."""
        return np.abs(self._values()).astype(np.float32).reshape(self.shape)

    def conj(self) -> Any:
        """Return the complex conjugate as a new dense array."""
        return self._new_from_values(np.conj(self._values()))
