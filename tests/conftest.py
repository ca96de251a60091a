from __future__ import annotations

from typing import Iterator

import pytest

from rangefilter.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("RANGEFILTER_SEPARATOR", raising=False)
    monkeypatch.delenv("RANGEFILTER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RANGEFILTER_LOG_FILE", raising=False)
    reset_config()
    yield
    reset_config()
