from __future__ import annotations

import logging
from typing import Callable, Iterator, Literal

from lispette import SExpression, Datum
from lispette.builtin.env_builtin import register
from lispette.builtin.macro_builtin import register as register_macros
from lispette.config import FAILURE, NO_VALUE
from lispette.errors import LispetteContinuationError
from lispette.evaluation.evaluator import evaluate
from lispette.evaluation.expander import expand
from lispette.printer import to_string
from lispette.reader.parser import InPort, read_all
from lispette.types.continuation import Escape
from lispette.types.environment import Environment
from lispette.types.macro_environment import MacroEnvironment
from lispette.types.symbol import DEFINE, SymbolTable
from lispette.types.unspecified import Unspecified

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One interpreter session: symbol table, macro registry and root environment.

    All three are mutated in place by evaluation (first use of a name,
    define-macro, define) and persist across calls. Separate Interpreter
    instances share nothing, so concurrent users should each get their own.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        output: Callable[[str], None] = print,
    ):
        self.output = output
        self.symbols = SymbolTable()

        self.macros = MacroEnvironment()
        register_macros(self.macros)

        self.env = Environment()
        register(self.env, self.macros, output)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                from lispette.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError:
                logger.debug("no prelude found, continuing without one")
        elif prelude:
            self.eval_prelude(prelude)

    def read(self, code: str) -> Iterator[SExpression]:
        """Yield each top-level form of `code`, interning symbols in this session."""
        return read_all(InPort(code, self.symbols))

    def expand(self, form: SExpression) -> SExpression:
        return expand(form, self.env, self.macros, toplevel=True)

    def parse(self, code: str) -> list[SExpression]:
        """Read and expand every top-level form without evaluating them.

        define-macro forms still take effect, since they run at expansion time.
        """
        return [self.expand(form) for form in self.read(code)]

    def evaluate(self, core: SExpression) -> Datum:
        result = evaluate(core, self.env)
        if isinstance(result, Escape):
            raise LispetteContinuationError("escape reached the top level")
        return result

    def eval_prelude(self, code: str) -> None:
        self.eval(code)

    def eval(self, code: str) -> Datum:
        """Read, expand and evaluate each top-level form in turn; return the last value."""
        result: Datum = Unspecified
        for form in self.read(code):
            result = self.evaluate(self.expand(form))
        return result

    def load(self, code: str) -> str:
        """Evaluate `code` and render the outcome as text. Never raises.

        Returns the printed final value, NO_VALUE when the final form is a
        definition or produced no value, or FAILURE after reporting the error
        to the output sink. The session stays usable either way.
        """
        result: Datum = Unspecified
        core: SExpression = Unspecified
        try:
            for form in self.read(code):
                core = self.expand(form)
                result = self.evaluate(core)
        except Exception as e:  # RecursionError included: deep non-tail recursion
            logger.debug("evaluation failed", exc_info=True)
            self.output(f"{type(e).__name__}: {e}")
            return FAILURE
        if result is Unspecified or (isinstance(core, list) and core[:1] == [DEFINE]):
            return NO_VALUE
        return to_string(result)
