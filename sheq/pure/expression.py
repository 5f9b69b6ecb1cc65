"""Expression model: the syntax tree the evaluator walks.

An expression is exactly one of

```
<expr> ::= NumberLiteral(<real>)
         | StringLiteral(<text>)
         | Identifier(<name>)
         | Conditional(<expr> <expr> <expr>)   ; test, then-branch, else-branch
         | Lambda(<name>* <expr>)              ; parameters, body
         | Application(<expr> <expr>*)         ; callee, arguments
```

Trees are built by the caller (there is no reader in this package) and are never mutated afterwards: every variant is
a frozen dataclass, and sequences are stored as tuples.
"""

from abc import ABC
from dataclasses import dataclass


class Expression(ABC):
    """Superclass of every expression variant."""

    @property
    def nodes(self):
        """Sub-expressions of this expression, in evaluation order."""
        return ()

    def label(self):
        """Short one-line description used by display."""
        return type(self).__name__

    def display(self, indents=0):
        """Recursively displays the expression tree with readable format.

        Format:
        <label>[
            <label>[
                ...
                <label>  # <-- if nodes is empty
            ]
        ]
        """
        result = f"{'    ' * indents}{self.label()}"
        if self.nodes:
            result += "[" + "".join(f"\n{node.display(indents + 1)}," for node in self.nodes)
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result


@dataclass(frozen=True)
class NumberLiteral(Expression):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def label(self):
        return f"NumberLiteral({self.value!r})"


@dataclass(frozen=True)
class StringLiteral(Expression):
    text: str

    def label(self):
        return f"StringLiteral({self.text!r})"


@dataclass(frozen=True)
class Identifier(Expression):
    name: str

    def label(self):
        return f"Identifier({self.name!r})"


@dataclass(frozen=True)
class Conditional(Expression):
    test: Expression
    then_branch: Expression
    else_branch: Expression

    @property
    def nodes(self):
        return self.test, self.then_branch, self.else_branch


@dataclass(frozen=True)
class Lambda(Expression):
    params: tuple
    body: Expression

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))

    @property
    def nodes(self):
        return (self.body,)

    def label(self):
        return f"Lambda({', '.join(self.params)})"


@dataclass(frozen=True)
class Application(Expression):
    callee: Expression
    args: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def nodes(self):
        return (self.callee,) + self.args
