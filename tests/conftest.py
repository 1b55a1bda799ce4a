from __future__ import annotations

from collections.abc import Iterator

import pytest
from playlist_extractor.utils.logging import reset_logger


@pytest.fixture(autouse=True)
def _detach_package_handler() -> Iterator[None]:
    # the handler keeps the stderr stream that was current when it was created
    yield
    reset_logger()
