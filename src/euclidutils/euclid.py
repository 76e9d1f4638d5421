"""Extended Euclidean Algorithm, in both its iterative and recursive forms.

Computes the greatest common divisor of two natural numbers together with the Bezout coefficients, such that
a*x + b*y = gcd(a, b). Results are reported the way a fixed-width machine would store them (unsigned 64-bit operands
and signed 64-bit coefficients by default), with arbitrary precision available as an explicit opt-in via `width=None`.

The coefficient `x` always belongs to the first argument and `y` to the second, even though the strategies swap their
working copies internally so that a >= b.

Typical usage example:

    g, x, y = extended_gcd(240, 46)
    res = extended_gcd_recursive(35, 15)
    res = extended_gcd(2**4000 + 1, 3**2000, method="stack", width=None)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import sys
import typing
import warnings

DEFAULT_WIDTH: int = 64


class EuclidResult(typing.NamedTuple):
    """Outcome of a single extended GCD computation.

    Attributes:
        gcd: The greatest common divisor, non-negative.
        x: Bezout coefficient of the first operand.
        y: Bezout coefficient of the second operand.
    """
    gcd: int
    x: int
    y: int


def _check_width(width: None | int) -> None:
    if width is None:
        return
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ValueError("width must be a positive integer or None")


def _check_operand(name: str, value: int, width: None | int) -> None:
    """Enforce the natural-number precondition on a single operand.

    Args:
        name: Name of the operand, used in error messages.
        value: The operand.
        width: Bit width of the unsigned operand type, or None for unbounded.

    Raises:
        TypeError: If `value` is not an int (bools are rejected too).
        ValueError: If `value` is negative or does not fit into `width` bits.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    if width is not None and value.bit_length() > width:
        raise ValueError(f"{name} does not fit into an unsigned {width}-bit integer")


def _outside_stacklevel() -> int:
    """Stacklevel, relative to the caller, of the first frame outside this module."""
    level = 1
    frame = sys._getframe(1)  # pylint: disable=protected-access
    while frame is not None and frame.f_globals.get("__name__") == __name__:
        frame = frame.f_back
        level += 1
    return level


def _to_signed(value: int, width: None | int) -> int:
    """Reduce a coefficient into the signed two's complement range of `width` bits.

    Args:
        value: The exact coefficient.
        width: Bit width of the signed coefficient type, or None for unbounded.

    Returns:
        `value` itself if it fits (or `width` is None), otherwise the wrapped value.
    """
    if width is None:
        return value
    half = 1 << (width - 1)
    if -half <= value < half:
        return value
    wrapped = (value + half) % (1 << width) - half
    warnings.warn(f"Bezout coefficient {value} overflows a signed {width}-bit integer, wrapped to {wrapped}.",
                  RuntimeWarning,
                  stacklevel=_outside_stacklevel())
    return wrapped


def _finish(g: int, x: int, y: int, swapped: bool, width: None | int) -> EuclidResult:
    """Hand the coefficients back to the slots of the caller's original operand order."""
    if swapped:
        x, y = y, x
    return EuclidResult(g, _to_signed(x, width), _to_signed(y, width))


def _prepare(a: int, b: int, width: None | int) -> tuple[int, int, bool]:
    _check_width(width)
    _check_operand("a", a, width)
    _check_operand("b", b, width)
    if b > a:
        return b, a, True
    return a, b, False


def _iterate(a: int, b: int) -> tuple[int, int, int]:
    r0, r = a, b
    s0, s = 1, 0
    t0, t = 0, 1
    while r != 0:
        q = r0 // r
        r0, r = r, r0 - q * r
        s0, s = s, s0 - q * s
        t0, t = t, t0 - q * t
    return r0, s0, t0


def _recurse(a: int, b: int) -> tuple[int, int, int]:
    # a >= b holds on every level: (b, a % b) keeps the larger value first.
    if b == 0:
        return a, 1, 0
    g, x, y = _recurse(b, a % b)
    return g, y, x - (a // b) * y


def extended_gcd_iterative(a: int, b: int, width: None | int = DEFAULT_WIDTH) -> EuclidResult:
    """Implements the Extended Euclidean Algorithm iteratively.

    Keeps the remainder and both coefficient sequences as pairs of (current, previous) values and advances them all
    with the same quotient until the remainder reaches zero.

    Args:
        a: The first natural number.
        b: The second natural number.
        width: Bit width of the operand and coefficient types. Defaults to 64.
            None selects arbitrary precision.

    Returns:
        Greatest common divisor of `a` and `b` along with Bezout coefficients for `a` and `b` respectively.

    Raises:
        TypeError: If an operand is not an int.
        ValueError: If an operand is negative, too wide for `width`, or `width` is invalid.
    """
    a, b, swapped = _prepare(a, b, width)
    return _finish(*_iterate(a, b), swapped, width)


def extended_gcd_recursive(a: int, b: int, width: None | int = DEFAULT_WIDTH) -> EuclidResult:
    """Implements the Extended Euclidean Algorithm by recursive back-substitution.

    Recursion depth is logarithmic in the smaller operand, about 93 frames at most for 64-bit operands.
    Very large unbounded operands may exceed the interpreter recursion limit, use `extended_gcd_stack` for those.

    Args:
        a: The first natural number.
        b: The second natural number.
        width: Bit width of the operand and coefficient types. Defaults to 64.
            None selects arbitrary precision.

    Returns:
        Greatest common divisor of `a` and `b` along with Bezout coefficients for `a` and `b` respectively.

    Raises:
        TypeError: If an operand is not an int.
        ValueError: If an operand is negative, too wide for `width`, or `width` is invalid.
    """
    a, b, swapped = _prepare(a, b, width)
    return _finish(*_recurse(a, b), swapped, width)


def extended_gcd_stack(a: int, b: int, width: None | int = DEFAULT_WIDTH) -> EuclidResult:
    """Recursive back-substitution unrolled onto an explicit stack of quotients.

    Produces exactly the coefficients of `extended_gcd_recursive` without consuming interpreter frames.

    Args:
        a: The first natural number.
        b: The second natural number.
        width: Bit width of the operand and coefficient types. Defaults to 64.
            None selects arbitrary precision.

    Returns:
        Greatest common divisor of `a` and `b` along with Bezout coefficients for `a` and `b` respectively.

    Raises:
        TypeError: If an operand is not an int.
        ValueError: If an operand is negative, too wide for `width`, or `width` is invalid.
    """
    a, b, swapped = _prepare(a, b, width)
    quotients = []
    while b != 0:
        quotients.append(a // b)
        a, b = b, a % b
    x, y = 1, 0
    for q in reversed(quotients):
        x, y = y, x - q * y
    return _finish(a, x, y, swapped, width)


STRATEGIES: dict[str, typing.Callable[..., EuclidResult]] = {
    "iterative": extended_gcd_iterative,
    "recursive": extended_gcd_recursive,
    "stack": extended_gcd_stack,
}


def extended_gcd(a: int, b: int, method: str = "iterative", width: None | int = DEFAULT_WIDTH) -> EuclidResult:
    """Computes gcd(a, b) and the Bezout coefficients with the selected strategy.

    Args:
        a: The first natural number.
        b: The second natural number.
        method: Name of the strategy in `STRATEGIES`. Defaults to "iterative".
        width: Bit width of the operand and coefficient types. Defaults to 64.
            None selects arbitrary precision.

    Returns:
        The `EuclidResult` of the selected strategy. All strategies agree on every input.

    Raises:
        ValueError: If `method` is unknown, or as raised by the strategy itself.
    """
    try:
        fun = STRATEGIES[method]
    except KeyError:
        raise ValueError(f"Unknown strategy {method!r}, expected one of {', '.join(STRATEGIES)}") from None
    return fun(a, b, width)
