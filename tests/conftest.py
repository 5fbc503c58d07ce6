import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if SRC_DIR.exists():
    sys.path.insert(0, str(SRC_DIR))

from passwdqc.params import Policy  # noqa: E402


@pytest.fixture
def policy() -> Policy:
    return Policy()


@pytest.fixture
def strong_password() -> str:
    """Random 40 character password accepted by the default policy."""
    return "o/IiJ/OI/110dA6KMN8m10pk7ff0UDR0rcJIAYhY"


@pytest.fixture
def config_file(tmp_path: Path):
    def _write(*lines: str) -> Path:
        path = tmp_path / "passwdqc.conf"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
