"""Pytest configuration and shared fixtures for the gdocs2html test suite.

This module registers markers, configures Hypothesis profiles and provides
loaders for the JSON documents under ``tests/fixtures/documents``.
"""

import json
import os
from pathlib import Path
from typing import Any, Callable

import pytest
from hypothesis import Verbosity, settings

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "documents"

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the JSON fixture documents."""
    return FIXTURES_DIR


@pytest.fixture
def load_document() -> Callable[[str], dict[str, Any]]:
    """Provide a loader for fixture documents by file stem.

    Returns
    -------
    callable
        ``load_document("lists")`` returns the decoded ``lists.json`` payload.

    """

    def _load(name: str) -> dict[str, Any]:
        return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def minimal_payload() -> dict[str, Any]:
    """Provide the smallest valid document: one paragraph with one run."""
    return {
        "documentId": "doc-minimal",
        "title": "Minimal",
        "body": {
            "content": [
                {
                    "startIndex": 1,
                    "endIndex": 7,
                    "paragraph": {"elements": [{"textRun": {"content": "Hello\n", "textStyle": {}}}]},
                }
            ]
        },
    }
