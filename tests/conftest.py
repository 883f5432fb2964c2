"""Shared test fixtures for codelock."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def schema_source():
    """A generated file with a stale lock and one filled-in manual section."""
    return (FIXTURES / "SchemaSchema.ts").read_text()


@pytest.fixture
def schema_path(tmp_path, schema_source):
    path = tmp_path / "SchemaSchema.ts"
    path.write_text(schema_source)
    return path
