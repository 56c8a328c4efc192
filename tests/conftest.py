from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_uniform() -> Generator[Mock, None, None]:
    """Patch the jitter random source to return a fixed offset of 7."""
    with patch("backoffgen.generator.random.uniform", return_value=7.0) as mock:
        yield mock
