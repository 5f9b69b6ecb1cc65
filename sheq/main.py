"""Runs a handful of demo programs through the sheq evaluator and prints their serialized results. There is no reader,
so the programs are built directly as expression trees. Called from the sheq console script.
"""

import argparse

from sheq.lang.error import ErrorHandler
from sheq.lang.session import Session
from sheq.pure.expression import Application, Conditional, Identifier, Lambda, NumberLiteral, StringLiteral


def call(name, *args):
    """Shorthand for applying the identifier name to args."""
    return Application(Identifier(name), args)


def demo_programs():
    """Returns dict of label: expression tree."""
    # fact(self, n) = if n <= 0 then 1 else n * self(self, n - 1)
    fact = Lambda(["self", "n"], Conditional(
        call("<=", Identifier("n"), NumberLiteral(0)),
        NumberLiteral(1),
        call("*", Identifier("n"), call("self", Identifier("self"), call("-", Identifier("n"), NumberLiteral(1))))
    ))

    # adder(x) returns a closure that outlives the call that created it
    adder = Lambda(["x"], Lambda(["y"], call("+", Identifier("x"), Identifier("y"))))

    return {
        "+": Identifier("+"),
        "(+ 1 2)": call("+", NumberLiteral(1), NumberLiteral(2)),
        "(if true 1 2)": Conditional(Identifier("true"), NumberLiteral(1), NumberLiteral(2)),
        "((lambda (x) x) 42)": Application(Lambda(["x"], Identifier("x")), [NumberLiteral(42)]),
        "(substring \"hello\" 1 4)": call("substring", StringLiteral("hello"), NumberLiteral(1), NumberLiteral(4)),
        "(/ 1 3)": call("/", NumberLiteral(1), NumberLiteral(3)),
        "(fact fact 10)": Application(fact, [fact, NumberLiteral(10)]),
        "((adder 5) 37)": Application(Application(adder, [NumberLiteral(5)]), [NumberLiteral(37)]),
        "(adder 5)": Application(adder, [NumberLiteral(5)]),
    }


def main():
    """Runs the demo programs. Called from sheq console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(description=__doc__)
        parser.add_argument("-k", "--keep-going", action="store_true",
                            help="report faults and continue with the next program instead of exiting")
        args = parser.parse_args()

        error_handler.fatal = not args.keep_going
        sess = Session(error_handler)

        programs = demo_programs()
        for label, expression in programs.items():
            sess.add(expression, label)
            sess.run()

            if sess.results:
                print(f"{label} => {sess.pop()}")


if __name__ == "__main__":
    main()
