"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from address_reconcile.models import StructuredAddress  # noqa: E402
from address_reconcile.recognizers import PostType  # noqa: E402


@pytest.fixture
def make_address():
    """Factory for fully structured addresses in Grants Pass, OR."""

    def _make(**overrides):
        values = dict(
            number=100,
            street_name="MAIN",
            post_type=PostType.STREET,
            zip=97526,
            postal_community="GRANTS PASS",
            state="OR",
        )
        values.update(overrides)
        return StructuredAddress(**values)

    return _make


@pytest.fixture
def data_dir():
    return project_root / "data"
