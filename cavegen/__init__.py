"""
project: Cavegen
module: __init__.py
License: MIT

Flask application factory for the cave dungeon generator.

The HTTP layer is a thin emitter over ``cavegen.dungeon``: it turns request
parameters into a ``GeneratorConfig``, runs the pipeline and serializes the
finished grid. Defaults come from ``CAVEGEN_*`` environment variables (a local
``.env`` file is loaded when present).
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so CAVEGEN_* defaults can be supplied without exporting shell variables.
load_dotenv()

__version__ = "0.1.0"


def create_app(config: dict | None = None) -> Flask:
    """Build the Flask app, register blueprints and apply ``config`` overrides."""
    app = Flask(__name__)
    app.config.update(
        # Generation defaults for requests that omit a parameter
        CAVEGEN_WIDTH=int(os.getenv("CAVEGEN_WIDTH", "64")),
        CAVEGEN_HEIGHT=int(os.getenv("CAVEGEN_HEIGHT", "64")),
        CAVEGEN_FILL_PERCENT=int(os.getenv("CAVEGEN_FILL_PERCENT", "45")),
        CAVEGEN_SMOOTHING_ITERATIONS=int(os.getenv("CAVEGEN_SMOOTHING_ITERATIONS", "5")),
        CAVEGEN_MARKERS=os.getenv("CAVEGEN_MARKERS", ""),
        # Requests above this many cells are rejected before generation starts
        CAVEGEN_MAX_CELLS=int(os.getenv("CAVEGEN_MAX_CELLS", str(512 * 512))),
    )
    if config:
        app.config.update(config)

    from cavegen.routes.level_api import bp_level

    app.register_blueprint(bp_level)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal server error", "error_id": error_id}), 500

    return app
