"""Runtime values produced by the evaluator. Like expressions, values are frozen dataclasses, so equality is
structural: two values are equal iff they are the same variant with equal contents. In particular two Closures are
equal iff their parameters, bodies, and captured environments are equal.
"""

from abc import ABC
from dataclasses import dataclass

from sheq.pure.expression import Expression


class Value(ABC):
    """Superclass of every runtime value."""

    @property
    def variant(self):
        """Name of this value's variant, as reported in type errors."""
        return type(self).__name__


@dataclass(frozen=True)
class Real(Value):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class Boolean(Value):
    value: bool

    def __post_init__(self):
        object.__setattr__(self, "value", bool(self.value))


@dataclass(frozen=True)
class Text(Value):
    text: str


@dataclass(frozen=True)
class Closure(Value):
    """Procedure created by evaluating a Lambda. env is the environment in effect at that moment; environments are
    immutable, so holding on to it is the same as holding a snapshot.
    """
    params: tuple
    body: Expression
    env: object  # Environment

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))


@dataclass(frozen=True)
class Primitive(Value):
    """Built-in operator, identified by name and resolved by the primitive dispatcher."""
    op: str


@dataclass(frozen=True)
class Binding:
    """A name paired with the value it is bound to."""
    name: str
    value: Value
