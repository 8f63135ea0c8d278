import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cavegen import create_app  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    # Pin generation defaults so CAVEGEN_* variables in the environment do not leak into tests
    app = create_app(
        {
            "TESTING": True,
            "CAVEGEN_WIDTH": 40,
            "CAVEGEN_HEIGHT": 30,
            "CAVEGEN_FILL_PERCENT": 45,
            "CAVEGEN_SMOOTHING_ITERATIONS": 4,
            "CAVEGEN_MARKERS": "",
            "CAVEGEN_MAX_CELLS": 200 * 200,
        }
    )
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def clean_generator_env(monkeypatch):
    """Remove CAVEGEN_* variables for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("CAVEGEN_"):
            monkeypatch.delenv(key)


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: generation time guardrails")
