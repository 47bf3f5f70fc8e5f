from __future__ import annotations

import os
from pathlib import Path
import sys
from typing import Iterator


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection,
# so `import tiny_storage` works without an editable install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


SAMPLE_DATASET = {
    "key1": {"subkey1": "value1", "subkey2": "value2"},
    "key2": {"subkey1": 123, "subkey2": 456},
}


@pytest.fixture
def sample_dataset() -> dict:
    return {k: dict(v) for k, v in SAMPLE_DATASET.items()}


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    """
    Path of a not-yet-existing JSON file inside a temp directory.
    """
    return tmp_path / "data.json"


STORAGE_ENV_VARS = (
    "STORAGE_BACKEND",
    "STORAGE_PATH",
    "STORAGE_CREATE_DIRS",
    "STORAGE_ACCESS_MODE",
    "STORAGE_TRUNCATE_ON_WRITE",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """
    Remove STORAGE_* variables so settings tests see only what they set.

    load_dotenv() writes to os.environ directly, so anything left over is removed afterwards too.
    """
    saved = {name: os.environ.pop(name) for name in STORAGE_ENV_VARS if name in os.environ}
    yield monkeypatch
    monkeypatch.undo()
    for name in STORAGE_ENV_VARS:
        os.environ.pop(name, None)
    os.environ.update(saved)
