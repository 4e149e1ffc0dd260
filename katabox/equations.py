"""Linear equations in one unknown, determinants and 3x3 systems."""

import math


def solve_linear(equation):
    """Solve an equation such as ``"x + 18 - 6 = 10 - 25"`` for ``x``.

    Tokens are separated by whitespace; ``x`` appears once.
    """
    sign = 1
    x_sign = 1
    right_side = False
    x_on_right = False
    left = right = 0
    for token in equation.split():
        if token == "-":
            sign = -1
        elif token == "+":
            sign = 1
        elif token == "x":
            x_sign = sign
            if right_side:
                x_on_right = True
        elif token == "=":
            right_side = True
            sign = 1
        elif right_side:
            right += sign * int(token)
        else:
            left += sign * int(token)
    if x_on_right:
        return (left - right) * x_sign
    return (right - left) * x_sign


def _det(m):
    size = len(m)
    if size == 1:
        return m[0][0]
    if size == 2:
        return m[0][0] * m[1][1] - m[1][0] * m[0][1]
    total = 0
    for col, pivot in enumerate(m[0]):
        minor = [row[:col] + row[col + 1:] for row in m[1:]]
        term = pivot * _det(minor)
        total += -term if col % 2 else term
    return total


def determinant(matrix):
    """Determinant of a square matrix by cofactor expansion."""
    rows = [list(row) for row in matrix]
    if not rows:
        raise ValueError("matrix is empty")
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix is not square")
    return _det(rows)


def _round_half_away(value):
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def solve_system(equations):
    """Solve three equations ``[a, b, c, d]`` meaning ``a*x + b*y + c*z = d``.

    The solution is rounded to integers.
    """
    rows = [list(row) for row in equations]
    if len(rows) != 3 or any(len(row) != 4 for row in rows):
        raise ValueError("expected three equations of four coefficients")
    coeffs = [row[:3] for row in rows]
    rhs = [row[3] for row in rows]
    det = int(determinant(coeffs))
    if det == 0:
        raise ValueError("No real solutions")

    def cofactor(i, j):
        a, b = (i + 1) % 3, (i + 2) % 3
        c, d = (j + 1) % 3, (j + 2) % 3
        return (coeffs[a][c] * coeffs[b][d] - coeffs[a][d] * coeffs[b][c]) / det

    return [
        _round_half_away(sum(cofactor(j, i) * rhs[j] for j in range(3)))
        for i in range(3)
    ]