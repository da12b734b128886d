from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

SAMPLE_TEXT = "1 2 3\n4 5 6\n"


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def write_matrix(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing matrix text to a file under ``tmp_path``."""

    def _write(text: str, name: str = "matrix.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
