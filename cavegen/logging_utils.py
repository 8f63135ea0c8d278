"""Generation event log.

One line per event, key=value by default or one JSON object per line with
``CAVEGEN_LOG_JSON=1``. Generation events carry the seed, size, region,
corridor and marker counts plus per-phase timings from ``Dungeon.metrics``, so
a slow or degenerate seed can be found with grep.

Lines go to stderr; stdout stays reserved for the level itself.

Usage:
    from cavegen.logging_utils import log
    log.generation(dungeon, source="cli")
    log.info("listen", host="0.0.0.0", port=5000)
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("CAVEGEN_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("CAVEGEN_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def generation_fields(dungeon) -> Dict[str, Any]:
    """Flatten a finished dungeon's config and metrics into log fields."""
    m = dungeon.metrics
    fields = {
        "seed": dungeon.seed,
        "size": f"{dungeon.width}x{dungeon.height}",
        "fill": dungeon.config.fill_percent,
        "iterations": dungeon.config.smoothing_iterations,
        "regions": m["regions_initial"],
        "regions_final": m["regions_final"],
        "corridors": m["corridors_carved"],
        "corridor_cells": m["corridor_cells"],
        "markers": m["markers_placed"],
        "dropped": m["markers_dropped"],
        "runtime_ms": m["runtime_ms"],
    }
    for phase, ms in m["phase_ms"].items():
        fields[f"{phase}_ms"] = ms
    return fields


def _text(value) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


def render(level: str, event: str, fields: Dict[str, Any]) -> str:
    present = {k: v for k, v in fields.items() if v is not None}
    if JSON_MODE:
        rec = {"ts": int(time.time()), "level": level, "event": event, **present}
        return json.dumps(rec, separators=(",", ":"), default=str)
    head = f"ts={int(time.time())} level={level} event={_text(event)}"
    return " ".join([head] + [f"{k}={_text(v)}" for k, v in present.items()])


class EventLog:
    def __init__(self, name: str = "cavegen"):
        self.name = name

    def emit(self, level: str, event: str, **fields):
        if LEVELS[level] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        # sys.stderr looked up per call so redirected streams are honoured
        print(render(level, event, fields), file=sys.stderr)

    def generation(self, dungeon, event: str = "generate", level: str = "info", **extra):
        fields = generation_fields(dungeon)
        fields.update(extra)
        self.emit(level, event, **fields)

    def debug(self, event: str, **fields):
        self.emit("debug", event, **fields)

    def info(self, event: str, **fields):
        self.emit("info", event, **fields)

    def warn(self, event: str, **fields):
        self.emit("warn", event, **fields)


log = EventLog("cavegen")
