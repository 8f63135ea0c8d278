"""
project: Cavegen
module: level_api.py
License: MIT

Level generation API routes.

Every endpoint accepts the same optional query parameters and generates a
fresh level per request (nothing is cached or persisted):

    seed        int or arbitrary string (hashed); omitted => time-derived
    width       int > 0
    height      int > 0
    fill        initial wall percentage, 0-100
    iterations  smoothing passes, >= 0
    markers     comma-separated marker names, e.g. "player,key,door"
"""

import hashlib

from flask import Blueprint, Response, current_app, jsonify, request

from cavegen.dungeon import ConfigurationError, Dungeon, GeneratorConfig, parse_markers
from cavegen.logging_utils import EventLog

bp_level = Blueprint("level_api", __name__)
log = EventLog("cavegen.api")

SEED_MAX = 2**31 - 1


def coerce_seed(raw):
    """Convert a provided seed (int or str) into a bounded non-negative int; None stays None."""
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw % SEED_MAX
    s = str(raw).strip()
    if not s:
        return None
    if s.lstrip("-").isdigit():
        return int(s) % SEED_MAX
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % SEED_MAX


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _config_from_request() -> GeneratorConfig:
    cfg = current_app.config
    raw_markers = request.args.get("markers", cfg["CAVEGEN_MARKERS"])
    extra = {}
    if raw_markers:
        extra["markers"] = parse_markers(raw_markers)
    width = _int_arg("width", cfg["CAVEGEN_WIDTH"])
    height = _int_arg("height", cfg["CAVEGEN_HEIGHT"])
    if width * height > cfg["CAVEGEN_MAX_CELLS"]:
        raise ConfigurationError(f"{width}x{height} exceeds the {cfg['CAVEGEN_MAX_CELLS']} cell limit")
    return GeneratorConfig(
        width=width,
        height=height,
        fill_percent=_int_arg("fill", cfg["CAVEGEN_FILL_PERCENT"]),
        smoothing_iterations=_int_arg("iterations", cfg["CAVEGEN_SMOOTHING_ITERATIONS"]),
        seed=coerce_seed(request.args.get("seed")),
        **extra,
    )


def _generate():
    dungeon = Dungeon(_config_from_request())
    log.generation(dungeon, event="api_level", path=request.path)
    return dungeon


@bp_level.errorhandler(ConfigurationError)
def _bad_config(e):
    return jsonify({"error": str(e)}), 400


@bp_level.route("/api/level")
def level_json():
    """Return the generated level: seed, dimensions, grid rows, placed markers and metrics."""
    return jsonify(_generate().to_json())


@bp_level.route("/api/level/objects")
def level_objects():
    """Return one object per non-empty cell in row-major order: ``{x, y, tile, kind}``."""
    dungeon = _generate()
    objects = [obj.to_dict() for obj in dungeon.emit()]
    return jsonify({"seed": dungeon.seed, "width": dungeon.width, "height": dungeon.height, "objects": objects})


@bp_level.route("/api/level/ascii")
def level_ascii():
    dungeon = _generate()
    return Response(dungeon.to_ascii() + "\n", mimetype="text/plain", headers={"X-Cavegen-Seed": str(dungeon.seed)})
