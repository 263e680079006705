from __future__ import annotations

"""
Simple TCP REPL server for Lispette.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(begin ...)"}
- Response: {"ok": true, "result": <printed value>, "output": [<display lines>]}
         or {"ok": false, "error": <message>, "output": [...]}

Each connection gets its own Interpreter, so definitions persist across the
requests of one client but never leak between clients.
"""

import json
import logging
import socket
import threading
from typing import Any, Dict, List, Optional, Tuple

from lispette.config import get_repl_address
from lispette.interpreter import Interpreter
from lispette.printer import to_string

logger = logging.getLogger(__name__)


class ReplSession:
    """One client's interpreter plus the display lines captured for the current request."""

    def __init__(self, prelude: Optional[str] = 'auto'):
        self.lines: List[str] = []
        self.interp = Interpreter(prelude=prelude, output=self.lines.append)

    def handle(self, req: Any) -> Dict[str, Any]:
        self.lines.clear()
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object", "output": []}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}", "output": []}
        try:
            result = self.interp.eval(req.get("code", ""))
            resp = {"ok": True, "result": to_string(result)}
        except Exception as ex:
            resp = {"ok": False, "error": f"{type(ex).__name__}: {ex}"}
        resp["output"] = list(self.lines)
        return resp


class ReplServer:
    def __init__(self, host: Optional[str] = None, port: Optional[int] = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port or default_port

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("REPL listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        session = ReplSession()
        logger.debug("new session for %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        resp = session.handle(json.loads(line.decode("utf-8")))
                    except ValueError as ex:
                        resp = {"ok": False, "error": f"Invalid request: {ex}", "output": []}
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()
