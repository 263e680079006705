from __future__ import annotations

import logging
from typing import Protocol

from lispette.config import get_prelude_root

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate core.scm from the prelude root into the given session."""
    core = get_prelude_root() / 'core.scm'
    if not core.is_file():
        raise FileNotFoundError(f"Cannot find prelude '{core}'")
    logger.debug("loading prelude %s", core)
    itp.eval_prelude(core.read_text(encoding='utf-8'))
