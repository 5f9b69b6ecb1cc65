"""Error handling for the sheq evaluator. Evaluation faults are raised as EvalErrors and propagate unchanged out of
evaluate: the first fault terminates the whole evaluation. Only GenericExceptions should reach ErrorHandler during a
run: any other error that makes it all the way there is assumed to be an internal issue.
"""

import sys

from termcolor import colored

from sheq.lang.serialize import serialize


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to raise a sheq error/warning. exprs are the snippets
    substituted (in bold) into msg; exprs[0] should be the offending snippet.
    """

    def __init__(self, msg, exprs=None, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(str(expr), attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = str(exprs[0]) if exprs else ""
        self.internal = internal

        super().__init__(self.msg)


class EvalError(GenericException):
    """Superclass of every fault raised while evaluating an expression."""


class UnboundIdentifier(EvalError):

    def __init__(self, name):
        self.name = name
        super().__init__("unbound identifier '{}'", name)


class ReservedWordUsed(EvalError):

    def __init__(self, name):
        self.name = name
        super().__init__("'{}' is a reserved word and cannot be used as an identifier", name)


class TypeMismatch(EvalError):
    """expected and got are variant names, e.g. TypeMismatch("Boolean", "Real")."""

    def __init__(self, expected, got, where=None):
        self.expected = expected
        self.got = got
        self.where = where

        if where is None:
            super().__init__("expected {}, got {}", (expected, got))
        else:
            super().__init__("{} expected {}, got {}", (where, expected, got))


class ArityMismatch(EvalError):

    def __init__(self, expected, got, where=None):
        self.expected = expected
        self.got = got
        self.where = where

        if where is None:
            super().__init__("expected {} argument(s), got {}", (expected, got))
        else:
            super().__init__("{} expected {} argument(s), got {}", (where, expected, got))


class DivideByZero(EvalError):

    def __init__(self):
        super().__init__("division by zero")


class IndexOutOfRange(EvalError):

    def __init__(self, start, stop, length):
        self.start = start
        self.stop = stop
        self.length = length
        super().__init__("substring range [{}, {}) is out of range for a string of length {}", (start, stop, length))


class NotCallable(EvalError):

    def __init__(self, value):
        self.value = value
        super().__init__("'{}' is not a procedure", [serialize(value)])


class UserError(EvalError):
    """Raised by the 'error' primitive."""

    def __init__(self, message):
        self.message = message
        super().__init__("user error: {}", message)


class InvalidPrimitive(EvalError):
    """Unknown primitive operator. Unreachable from a well-formed top-level environment."""

    def __init__(self, op_name):
        self.op_name = op_name
        super().__init__("invalid primitive operator '{}'", op_name, internal=True)


class InvalidExpression(EvalError):
    """Object that is not one of the Expression variants was handed to the evaluator."""

    def __init__(self, expression):
        self.expression = expression
        super().__init__("'{}' is not a valid expression", repr(expression), internal=True)


class ErrorHandler:
    """Context manager that reports sheq errors/warnings instead of letting Python tracebacks through."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_step(self, label, expr):
        """Registers the expression currently being evaluated under label. Should be called prior to evaluation."""
        self.traceback[label] = expr

    def remove_step(self, label):
        """Removes label from traceback. Should be called after a successful evaluation."""
        self.traceback.pop(label, None)

    def warn(self, *args, **kwargs):
        """Generates and prints a runtime warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        print(error_msg)

    def throw(self, error):
        """Reports error, which must be a GenericException, along with the registered traceback. Exits if fatal."""
        error_msg = ""
        for label, expr in self.traceback.items():  # dicts are insertion-ordered
            error_msg += f"  In {label}:\n"
            error_msg += f"    {expr!r}\n"

        if len(self.traceback) > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum recursion depth exceeded (calls are not tail-call optimized)"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
