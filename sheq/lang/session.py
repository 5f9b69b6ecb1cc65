"""Session control for the sheq evaluator: evaluates a sequence of expression trees against one environment and routes
faults through an ErrorHandler.
"""

from sheq.lang.serialize import serialize
from sheq.pure.environment import top_level_environment
from sheq.pure.evaluator import evaluate


class Session:
    """Governs a sheq session, with control over the environment that expressions are evaluated in."""

    def __init__(self, error_handler, environment=None):
        self.error_handler = error_handler
        self.environment = environment if environment is not None else top_level_environment()

        self.to_eval = {}   # dict of number: (label, expression) waiting to be evaluated
        self.results = []   # values of evaluated expressions, oldest first
        self.count = 0      # number of expressions added so far, used as queue keys and default labels

    def define(self, name, expression):
        """Evaluates expression and binds name to the result for every later evaluation. Closures created earlier
        keep the environment they captured. Warns if name shadows an existing binding.
        """
        label = f"definition of '{name}'"
        self.error_handler.register_step(label, expression)  # in case error is raised

        try:
            value = evaluate(expression, self.environment)
        finally:
            self.error_handler.remove_step(label)

        if name in self.environment:
            self.error_handler.warn("definition of '{}' shadows an existing binding", name)
        self.environment = self.environment.extend([name], [value])
        return value

    def add(self, expression, label=None):
        """Queues expression. Evaluation is delayed until run is called. Labels need not be unique."""
        if label is None:
            label = f"<expr {self.count}>"
        self.to_eval[self.count] = (label, expression)
        self.count += 1

    def run(self):
        """Evaluates every queued expression in order, appending values to self.results. Faults are handed to the error
        handler: a fatal handler exits, a non-fatal one reports the fault and moves on to the next expression.
        """
        for number, (label, expression) in list(self.to_eval.items()):
            del self.to_eval[number]

            with self.error_handler:
                self.error_handler.register_step(label, expression)
                self.results.append(evaluate(expression, self.environment))
                self.error_handler.remove_step(label)

    def pop(self):
        """Removes the oldest result and returns its display text."""
        return serialize(self.results.pop(0))
