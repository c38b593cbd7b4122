import io

import pytest

from models.colour_matrix import ColourMatrix, InvalidMatrixError
from repositories.matrix_repository import MatrixRepository


def test_parse_single_line():
    m = MatrixRepository.parse("1 2 3 4 5 6 7 8 9")
    assert m == ColourMatrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


def test_parse_any_whitespace_layout():
    m = MatrixRepository.parse("1\t0 0\n0 1\n0\n\n  0 0 1\n")
    assert m == ColourMatrix.identity()


def test_parse_accepts_float_notation():
    m = MatrixRepository.parse("0.5 -1e-1 +2 0 0 0 0 0 .25")
    assert m.rows[0] == (0.5, -0.1, 2.0)
    assert m.rows[2][2] == 0.25


def test_extra_tokens_are_ignored():
    assert MatrixRepository.parse("1 0 0 0 1 0 0 0 1 42 43") == ColourMatrix.identity()


def test_read_stops_after_ninth_number():
    stream = io.StringIO("1 0 0\n0 1 0\n0 0 1\nnot a number\n")
    assert MatrixRepository.read(stream) == ColourMatrix.identity()
    assert stream.readline() == "not a number\n"


@pytest.mark.parametrize("text", ["", "1 2 3", "1 2 3 4 5 6 7 8"])
def test_too_few_numbers(text):
    with pytest.raises(InvalidMatrixError, match="expected 9 coefficients"):
        MatrixRepository.parse(text)


def test_non_numeric_token_raises_plain_value_error():
    with pytest.raises(ValueError) as exc_info:
        MatrixRepository.parse("1 0 0 0 one 0 0 0 1")
    assert not isinstance(exc_info.value, InvalidMatrixError)


def test_non_finite_value_is_rejected():
    with pytest.raises(InvalidMatrixError):
        MatrixRepository.parse("1 0 0 0 nan 0 0 0 1")
