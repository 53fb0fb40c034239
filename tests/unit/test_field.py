"""Unit tests for the generic field contract."""

from exactnum import BigInteger, Field, Rational, one_of, zero_of


def solve_2x2(matrix, rhs, field_type):
    """Cramer's rule written only against the field contract."""
    (a, b), (c, d) = matrix
    determinant = a * d - b * c
    if determinant == zero_of(field_type):
        raise ValueError("singular")
    x = (rhs[0] * d - b * rhs[1]) / determinant
    y = (a * rhs[1] - rhs[0] * c) / determinant
    return x, y


class TestFieldContract:
    """Tests that the value types satisfy the field protocol."""

    def test_rational_is_field(self):
        assert isinstance(Rational(1, 2), Field)

    def test_division_is_exact_for_rational(self):
        half = one_of(Rational) / Rational(2)
        assert half * Rational(2) == one_of(Rational)

    def test_integer_division_truncates(self):
        # Same operators, not a field: structural checks cannot tell them apart
        assert BigInteger(1) / BigInteger(2) * BigInteger(2) == zero_of(BigInteger)

    def test_text_is_not_field(self):
        assert not isinstance("abc", Field)

    def test_identities(self):
        assert zero_of(Rational) == Rational(0)
        assert one_of(Rational) == Rational(1)
        value = Rational(-5, 7)
        assert value + zero_of(Rational) == value
        assert value * one_of(Rational) == value

    def test_generic_solver_is_exact(self):
        matrix = ((Rational(1), Rational(2)), (Rational(3), Rational(4)))
        rhs = (Rational(1), Rational(1, 3))
        x, y = solve_2x2(matrix, rhs, Rational)
        assert x == Rational(-5, 3)
        assert y == Rational(4, 3)
        assert matrix[0][0] * x + matrix[0][1] * y == rhs[0]
        assert matrix[1][0] * x + matrix[1][1] * y == rhs[1]
