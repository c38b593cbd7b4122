from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple
import math

import numpy as np

Vector3 = Tuple[float, float, float]


class InvalidMatrixError(ValueError):
    """Raised when coefficients do not form a 3x3 matrix of finite numbers."""


@dataclass(frozen=True)
class ColourMatrix:
    """
    Value-object holding a 3x3 colour transformation matrix.

    Rows are stored exactly as supplied. Output channel ``i`` of a transformed
    pixel is the dot product of its (R, G, B) vector with column ``i``, so
    ``rows[r][i]`` weights input channel ``r`` into output channel ``i``.
    """
    rows: Tuple[Vector3, Vector3, Vector3]
    _columns: Tuple[Vector3, Vector3, Vector3] = field(init=False, repr=False, compare=False)

    def __init__(self, rows: Sequence[Sequence[float]]):
        object.__setattr__(self, "rows", self._validate(rows))
        object.__setattr__(self, "_columns", tuple(
            (self.rows[0][i], self.rows[1][i], self.rows[2][i]) for i in range(3)
        ))

    # ── Constructors ─────────────────────────────────────────────────
    @classmethod
    def from_values(cls, values: Iterable[float]) -> "ColourMatrix":
        """Build from nine coefficients given top-to-bottom, left-to-right."""
        values = list(values)
        if len(values) != 9:
            raise InvalidMatrixError(
                f"invalid matrix dimensions: expected 9 coefficients, got {len(values)}"
            )
        return cls([values[0:3], values[3:6], values[6:9]])

    @classmethod
    def identity(cls) -> "ColourMatrix":
        return cls([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])

    @classmethod
    def zeros(cls) -> "ColourMatrix":
        return cls([[0.0] * 3 for _ in range(3)])

    # ── Accessors ────────────────────────────────────────────────────
    def column(self, i: int) -> Vector3:
        return self._columns[i]

    def columns(self) -> Tuple[Vector3, Vector3, Vector3]:
        return self._columns

    def as_array(self) -> np.ndarray:
        arr = np.array(self.rows, dtype=np.float64)
        arr.setflags(write=False)
        return arr

    # ── Validation ───────────────────────────────────────────────────
    @staticmethod
    def _validate(rows) -> Tuple[Vector3, Vector3, Vector3]:
        try:
            rows = [list(row) for row in rows]
        except TypeError as err:
            raise InvalidMatrixError(f"invalid matrix dimensions: {err}") from err

        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            shape = [len(row) for row in rows]
            raise InvalidMatrixError(f"invalid matrix dimensions: expected 3x3, got rows of {shape}")

        validated = []
        for r, row in enumerate(rows):
            coefficients = []
            for c, value in enumerate(row):
                try:
                    value = float(value)
                except (TypeError, ValueError) as err:
                    raise InvalidMatrixError(f"coefficient [{r}][{c}] is not a number: {value!r}") from err
                if not math.isfinite(value):
                    raise InvalidMatrixError(f"coefficient [{r}][{c}] is not finite: {value}")
                coefficients.append(value)
            validated.append(tuple(coefficients))
        return tuple(validated)
