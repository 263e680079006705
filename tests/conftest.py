import pytest

from lispette.builtin.env_builtin import register
from lispette.builtin.macro_builtin import register as register_macros
from lispette.interpreter import Interpreter
from lispette.types.environment import Environment
from lispette.types.macro_environment import MacroEnvironment


@pytest.fixture
def output():
    """Lines written by `display` and by error reporting."""
    return []


@pytest.fixture
def itp(output):
    """A fresh session with the bundled prelude, capturing its output sink."""
    return Interpreter(output=output.append)


@pytest.fixture
def bare(output):
    """A fresh session without a prelude."""
    return Interpreter(prelude=None, output=output.append)


@pytest.fixture
def macros():
    m = MacroEnvironment()
    register_macros(m)
    return m


@pytest.fixture
def env(macros, output):
    """Root environment with builtins loaded."""
    e = Environment()
    register(e, macros, output.append)
    return e
