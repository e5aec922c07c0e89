"""Shared fixtures for the advworld test suite."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def world_doc() -> dict:
    """A small valid world document."""
    return {
        "playerStart": "Start",
        "items": [
            {"name": "key", "description": "A small iron key."},
            {"name": "lamp"},
        ],
        "rooms": [
            {
                "name": "Start",
                "description": "A bare room.",
                "exits": {"north": "Hall"},
                "items": ["key"],
            },
            {
                "name": "Hall",
                "exits": {"south": "Start"},
                "items": ["lamp"],
            },
        ],
    }


@pytest.fixture
def write_world(tmp_path: Path):
    """Write a world document to a temporary file and return its path."""

    def _write(doc, name: str = "world.json") -> Path:
        path = tmp_path / name
        if isinstance(doc, str):
            path.write_text(doc, encoding="utf-8")
        else:
            path.write_text(json.dumps(doc), encoding="utf-8")
        return path

    return _write
