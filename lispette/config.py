from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (lispette package directory)
_LISPETTE_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LISPETTE_DIR / 'prelude'
_DEFAULT_REPL_HOST = '127.0.0.1'
_DEFAULT_REPL_PORT = 8765

# Driver result markers
NO_VALUE = '!undefined'
FAILURE = '*** ERROR ***'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('LISPETTE_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('LISPETTE_REPL_HOST') or _DEFAULT_REPL_HOST
    port = os.environ.get('LISPETTE_REPL_PORT')
    return host, int(port) if port else _DEFAULT_REPL_PORT
