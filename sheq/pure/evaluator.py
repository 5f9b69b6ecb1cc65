"""Direct (tree-walking) evaluator. Evaluation is strict and left-to-right: the callee of an Application is evaluated
first, then every argument, before anything is applied. Calls are not tail-call optimized, so recursion depth is
bounded by the Python call stack.

Faults are raised as EvalErrors and are never caught here: the first one terminates the whole evaluation.
"""

from sheq.lang.error import ArityMismatch, InvalidExpression, NotCallable, ReservedWordUsed, TypeMismatch
from sheq.pure.environment import extend
from sheq.pure.expression import Application, Conditional, Identifier, Lambda, NumberLiteral, StringLiteral
from sheq.pure.primitives import apply_primitive
from sheq.pure.value import Boolean, Closure, Primitive, Real, Text


RESERVED_WORDS = frozenset(["if", "lambda", "let", "=", "in", "end", "else"])


def is_reserved(name):
    """Whether or not name is reserved for surface syntax and therefore cannot be used as an identifier."""
    return name in RESERVED_WORDS


def evaluate(expression, environment):
    """Evaluates expression in environment and returns the resulting Value."""
    if isinstance(expression, NumberLiteral):
        return Real(expression.value)

    elif isinstance(expression, StringLiteral):
        return Text(expression.text)

    elif isinstance(expression, Identifier):
        if is_reserved(expression.name):
            raise ReservedWordUsed(expression.name)
        return environment.lookup(expression.name)

    elif isinstance(expression, Conditional):
        test = evaluate(expression.test, environment)
        if not isinstance(test, Boolean):
            raise TypeMismatch("Boolean", test.variant, where="if")

        if test.value:
            return evaluate(expression.then_branch, environment)
        return evaluate(expression.else_branch, environment)

    elif isinstance(expression, Lambda):
        return Closure(expression.params, expression.body, environment)

    elif isinstance(expression, Application):
        callee = evaluate(expression.callee, environment)
        args = [evaluate(arg, environment) for arg in expression.args]
        return apply(callee, args)

    raise InvalidExpression(expression)


def apply(callee, args):
    """Applies an evaluated callee to evaluated args."""
    if isinstance(callee, Closure):
        if len(args) != len(callee.params):
            raise ArityMismatch(len(callee.params), len(args), where="procedure")
        return evaluate(callee.body, extend(callee.params, args, callee.env))

    elif isinstance(callee, Primitive):
        return apply_primitive(callee.op, args)

    raise NotCallable(callee)
