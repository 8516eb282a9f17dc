"""
Pytest configuration and fixtures for asgraph tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to path for imports
# This allows `from asgraph.transform import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from asgraph.config import TransformerOptions, get_settings  # noqa: E402
from asgraph.resolve import reset_default_resolver  # noqa: E402
from asgraph.transform import (  # noqa: E402
    Transformer,
    reset_default_transformer,
    reset_type_registry,
)


def _reset_globals():
    get_settings.cache_clear()
    reset_type_registry()
    reset_default_transformer()
    reset_default_resolver()


@pytest.fixture(autouse=True)
def reset_globals():
    """Give every test a fresh registry, transformer, resolver and settings."""
    _reset_globals()
    yield
    _reset_globals()


@pytest.fixture
def transformer():
    """Transformer with the built-in vocabulary and default options."""
    return Transformer(options=TransformerOptions())


@pytest.fixture
def sample_note():
    """Sample Note document."""
    return {
        "@context": "https://www.w3.org/ns/activitystreams",
        "type": "Note",
        "id": "https://example.com/notes/1",
        "content": "Fish swim.",
        "published": "2014-12-12T12:12:12Z",
        "attributedTo": "https://example.com/sally",
        "to": [
            "https://example.com/joe",
            "https://example.com/jane",
        ],
    }


@pytest.fixture
def sample_create(sample_note):
    """Sample Create activity wrapping the sample note."""
    return {
        "@context": "https://www.w3.org/ns/activitystreams",
        "type": "Create",
        "id": "https://example.com/activities/1",
        "actor": {"type": "Person", "id": "https://example.com/sally", "name": "Sally"},
        "object": sample_note,
    }
