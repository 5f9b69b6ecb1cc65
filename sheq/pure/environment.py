"""Environments: ordered sequences of bindings, oldest (top-level) first.

An Environment is a persistent chain of frames. Each frame holds the bindings it added plus a reference to the
environment it extends, so extending never copies or mutates the base: closures can hold on to any environment they
see for as long as they like.
"""

from sheq.lang.error import ArityMismatch, UnboundIdentifier
from sheq.pure.primitives import PRIMITIVE_NAMES
from sheq.pure.value import Binding, Boolean, Primitive


class Environment:
    """Immutable scope chain. Lookup scans newest-first, so later bindings shadow earlier ones of the same name."""
    __slots__ = ("bindings", "base")

    def __init__(self, bindings=(), base=None):
        self.bindings = tuple(bindings)  # bindings added by this frame, oldest first
        self.base = base                 # environment this frame extends (None for the outermost frame)

    def lookup(self, name):
        """Returns the value of the most recently added binding for name. Raises UnboundIdentifier if none exists."""
        env = self
        while env is not None:
            for binding in reversed(env.bindings):
                if binding.name == name:
                    return binding.value
            env = env.base
        raise UnboundIdentifier(name)

    def extend(self, names, values):
        """Returns a new Environment: self plus one binding per (name, value) pair."""
        return extend(names, values, self)

    def frames(self):
        """Returns the frames of this chain, outermost first."""
        chain = []
        env = self
        while env is not None:
            chain.append(env)
            env = env.base
        return chain[::-1]

    def __iter__(self):
        for frame in self.frames():
            yield from frame.bindings

    def __len__(self):
        return sum(len(frame.bindings) for frame in self.frames())

    def __contains__(self, name):
        return any(binding.name == name for binding in self)

    def __eq__(self, other):
        return isinstance(other, Environment) and tuple(self) == tuple(other)

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"Environment({', '.join(binding.name for binding in self)})"


def extend(names, values, base):
    """Binds names to values on top of base. Raises ArityMismatch if there are not exactly as many values as names."""
    names = tuple(names)
    values = tuple(values)

    if len(names) != len(values):
        raise ArityMismatch(len(names), len(values))

    return Environment((Binding(name, value) for name, value in zip(names, values)), base)


def top_level_environment():
    """Returns a fresh environment holding the predefined bindings: the two booleans, then every primitive."""
    names = ["true", "false"] + PRIMITIVE_NAMES
    values = [Boolean(True), Boolean(False)] + [Primitive(op) for op in PRIMITIVE_NAMES]
    return extend(names, values, None)
