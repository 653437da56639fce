import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from html_transpose.config import reset_config  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    for name in (
        "HTML_TRANSPOSE_PARSER",
        "HTML_TRANSPOSE_ENCODING",
        "HTML_TRANSPOSE_OUTPUT_SUFFIX",
        "HTML_TRANSPOSE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
