"""Primitive operator dispatcher. Every operator checks its arity first, then the variants of its arguments, and only
then computes its result.
"""

import operator

from sheq.lang.error import ArityMismatch, DivideByZero, IndexOutOfRange, InvalidPrimitive, TypeMismatch, UserError
from sheq.pure.value import Boolean, Real, Text


def expect(op_name, value, cls):
    """Returns value if it is a cls, otherwise raises TypeMismatch."""
    if not isinstance(value, cls):
        raise TypeMismatch(cls.__name__, value.variant, where=op_name)
    return value


def expect_integer(op_name, value):
    """Returns the int held by a Real with an integral value, otherwise raises TypeMismatch."""
    real = expect(op_name, value, Real)
    if not real.value.is_integer():
        raise TypeMismatch("Integer", real.variant, where=op_name)
    return int(real.value)


def binary_real_op(op_name, func, result_cls=Real):
    """Returns a primitive that applies func to the floats of two Reals and wraps the result in result_cls."""

    def primitive(left, right):
        x = expect(op_name, left, Real).value
        y = expect(op_name, right, Real).value
        return result_cls(func(x, y))

    return primitive


def divide(left, right):
    x = expect("/", left, Real).value
    y = expect("/", right, Real).value
    if y == 0.0:
        raise DivideByZero()
    return Real(x / y)


def equal(left, right):
    """Structural equality; accepts any pair of values."""
    return Boolean(left == right)


def substring(text, start, stop):
    """Slice [start, stop) of text. start and stop must be integral and satisfy 0 <= start <= stop <= len(text)."""
    string = expect("substring", text, Text).text
    start = expect_integer("substring", start)
    stop = expect_integer("substring", stop)

    if not 0 <= start <= stop <= len(string):
        raise IndexOutOfRange(start, stop, len(string))
    return Text(string[start:stop])


def strlen(text):
    return Real(len(expect("strlen", text, Text).text))


def error(message):
    """Never returns: raises UserError carrying message."""
    raise UserError(expect("error", message, Text).text)


# op name: (arity, implementation), in top-level environment order
PRIMITIVES = {
    "+": (2, binary_real_op("+", operator.add)),
    "-": (2, binary_real_op("-", operator.sub)),
    "*": (2, binary_real_op("*", operator.mul)),
    "/": (2, divide),
    "<=": (2, binary_real_op("<=", operator.le, Boolean)),
    "equal?": (2, equal),
    "substring": (3, substring),
    "strlen": (1, strlen),
    "error": (1, error),
}

PRIMITIVE_NAMES = list(PRIMITIVES)


def apply_primitive(op_name, args):
    """Applies the primitive named op_name to the already evaluated args."""
    if op_name not in PRIMITIVES:
        raise InvalidPrimitive(op_name)

    arity, func = PRIMITIVES[op_name]
    args = list(args)
    if len(args) != arity:
        raise ArityMismatch(arity, len(args), where=op_name)
    return func(*args)
