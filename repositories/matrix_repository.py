from typing import Iterator, List, TextIO
import io
import logging

from models.colour_matrix import ColourMatrix, InvalidMatrixError

logger = logging.getLogger(__name__)

COEFFICIENT_COUNT = 9


class MatrixRepository:
    """
    Reads colour matrices from text: nine numbers, row-major, separated by any whitespace.
    """

    @staticmethod
    def _tokens(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    @classmethod
    def read(cls, stream: TextIO) -> ColourMatrix:
        """
        Consume *stream* line by line until nine coefficients are collected.

        Non-numeric tokens raise ValueError from float(). Running out of input
        before nine numbers raises InvalidMatrixError. Anything after the
        ninth number is left unread or ignored.
        """
        values: List[float] = []
        for token in cls._tokens(stream):
            values.append(float(token))
            if len(values) == COEFFICIENT_COUNT:
                break

        if len(values) < COEFFICIENT_COUNT:
            raise InvalidMatrixError(
                f"invalid matrix dimensions: expected {COEFFICIENT_COUNT} coefficients, got {len(values)}"
            )

        logger.debug(f"Read matrix coefficients: {values}")
        return ColourMatrix.from_values(values)

    @classmethod
    def parse(cls, text: str) -> ColourMatrix:
        return cls.read(io.StringIO(text))
