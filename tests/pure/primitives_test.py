import unittest

from sheq.lang.error import ArityMismatch, DivideByZero, IndexOutOfRange, InvalidPrimitive, TypeMismatch, UserError
from sheq.pure.environment import Environment
from sheq.pure.expression import Identifier
from sheq.pure.primitives import PRIMITIVE_NAMES, apply_primitive
from sheq.pure.value import Boolean, Closure, Primitive, Real, Text


class PrimitivesTestCase(unittest.TestCase):

    def test_arithmetic(self):
        should_pass = {
            ("+", 1, 2): Real(3),
            ("-", 1, 2): Real(-1),
            ("*", 2.5, 4): Real(10),
            ("/", 1, 4): Real(0.25),
            ("/", -3, 2): Real(-1.5),
        }
        for (op, x, y), result in should_pass.items():
            self.assertEqual(result, apply_primitive(op, [Real(x), Real(y)]), op)

    def test_comparison(self):
        self.assertEqual(Boolean(True), apply_primitive("<=", [Real(1), Real(2)]))
        self.assertEqual(Boolean(True), apply_primitive("<=", [Real(2), Real(2)]))
        self.assertEqual(Boolean(False), apply_primitive("<=", [Real(3), Real(2)]))

    def test_divide_by_zero(self):
        for divisor in [0.0, -0.0]:
            self.assertRaises(DivideByZero, apply_primitive, "/", [Real(1), Real(divisor)])

    def test_real_type_mismatch(self):
        should_fail = [
            ("+", [Text("1"), Real(2)]),
            ("-", [Real(1), Boolean(True)]),
            ("*", [Primitive("+"), Real(2)]),
            ("/", [Real(1), Text("0")]),
            ("<=", [Boolean(False), Boolean(True)]),
        ]
        for op, args in should_fail:
            self.assertRaises(TypeMismatch, apply_primitive, op, args)

        with self.assertRaises(TypeMismatch) as context:
            apply_primitive("+", [Real(1), Text("2")])
        self.assertEqual("Real", context.exception.expected)
        self.assertEqual("Text", context.exception.got)

    def test_arity_checked_before_types(self):
        should_fail = [
            ("+", [Real(1)]),
            ("/", [Text("a"), Text("b"), Text("c")]),
            ("equal?", []),
            ("substring", [Text("hello"), Real(1)]),
            ("strlen", [Boolean(True), Boolean(False)]),
            ("error", []),
        ]
        for op, args in should_fail:
            with self.assertRaises(ArityMismatch) as context:
                apply_primitive(op, args)
            self.assertEqual(len(args), context.exception.got, op)

    def test_equal(self):
        env = Environment()
        should_pass = [
            (Real(1), Real(1)),
            (Text("a"), Text("a")),
            (Boolean(False), Boolean(False)),
            (Primitive("+"), Primitive("+")),
            (Closure(["x"], Identifier("x"), env), Closure(["x"], Identifier("x"), env)),
        ]
        for left, right in should_pass:
            self.assertEqual(Boolean(True), apply_primitive("equal?", [left, right]))

        should_fail = [
            (Real(1), Boolean(True)),
            (Text("a"), Text("b")),
            (Primitive("+"), Primitive("-")),
            (Closure(["x"], Identifier("x"), env), Primitive("+")),
        ]
        for left, right in should_fail:
            self.assertEqual(Boolean(False), apply_primitive("equal?", [left, right]))

    def test_substring(self):
        should_pass = {
            (1, 4): "ell",
            (0, 5): "hello",
            (2, 2): "",
            (5, 5): "",
        }
        for (start, stop), result in should_pass.items():
            self.assertEqual(Text(result), apply_primitive("substring", [Text("hello"), Real(start), Real(stop)]))

        out_of_range = [(-1, 2), (3, 2), (0, 6), (6, 6)]
        for start, stop in out_of_range:
            self.assertRaises(IndexOutOfRange, apply_primitive, "substring",
                              [Text("hello"), Real(start), Real(stop)])

        wrong_types = [
            [Real(1), Real(0), Real(1)],
            [Text("hello"), Text("0"), Real(1)],
            [Text("hello"), Real(0.5), Real(1)],
            [Text("hello"), Real(0), Real(1.5)],
            [Text("hello"), Real(0), Real(float("inf"))],
        ]
        for args in wrong_types:
            self.assertRaises(TypeMismatch, apply_primitive, "substring", args)

        with self.assertRaises(TypeMismatch) as context:
            apply_primitive("substring", [Text("hello"), Real(0.5), Real(1)])
        self.assertEqual("Integer", context.exception.expected)

    def test_strlen(self):
        self.assertEqual(Real(5), apply_primitive("strlen", [Text("hello")]))
        self.assertEqual(Real(0), apply_primitive("strlen", [Text("")]))
        self.assertRaises(TypeMismatch, apply_primitive, "strlen", [Real(5)])

    def test_error(self):
        with self.assertRaises(UserError) as context:
            apply_primitive("error", [Text("boom")])
        self.assertEqual("boom", context.exception.message)

        self.assertRaises(TypeMismatch, apply_primitive, "error", [Real(1)])

    def test_invalid_primitive(self):
        with self.assertRaises(InvalidPrimitive) as context:
            apply_primitive("mod", [Real(1), Real(2)])
        self.assertEqual("mod", context.exception.op_name)
        self.assertTrue(context.exception.internal)

    def test_primitive_names(self):
        self.assertEqual(["+", "-", "*", "/", "<=", "equal?", "substring", "strlen", "error"], PRIMITIVE_NAMES)


if __name__ == '__main__':
    unittest.main()
