# pytest configuration

from pathlib import Path
from typing import Dict

import pytest


@pytest.fixture
def write_files(tmp_path: Path):
    """Write files with the given names and texts into a temporary directory.

    Returns the path of the temporary directory.
    """

    def write(files: Dict[str, str]) -> Path:
        for name, text in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return write
