"""
project: Cavegen
module: server.py
License: MIT

Server bootstrap helpers: logging configuration and the development server.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from cavegen import create_app


def configure_logging(log_dir: str | None = None, level: int = logging.INFO) -> str:
    """Configure logging to both console and a rotating file; returns the log file path.

    The file is ``<log_dir>/cavegen.log`` (default: ``./instance``). Existing root
    handlers are replaced so repeated calls do not duplicate output.
    """
    log_dir = log_dir or os.getenv("CAVEGEN_LOG_DIR", "instance")
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "cavegen.log")

    root = logging.getLogger()
    root.setLevel(level)
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(level)
    file_handler.setFormatter(fmt)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Configure logging and run the Flask development server."""
    configure_logging()
    app = create_app()
    try:
        print(f"[INFO] Starting level server on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)
