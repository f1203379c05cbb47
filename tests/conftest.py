"""Root test configuration: fixture diff files and logging reset"""

from pathlib import Path

import pytest

from diffparse.config import Settings
from diffparse.logging import configure_logging


DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(name="data_dir", scope="session")
def data_dir_fixture() -> Path:
    return DATA_DIR


@pytest.fixture(name="read_diff")
def read_diff_fixture():
    """Return a reader for the sample .diff files under tests/data."""
    def _read(name: str) -> str:
        return (DATA_DIR / name).read_text(encoding="utf-8")
    return _read


@pytest.fixture(autouse=True)
def reset_logging():
    """Every test starts from the default WARNING/console logging setup."""
    configure_logging(Settings())
    yield
