from __future__ import annotations

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
for _p in (_SRC, _REPO_ROOT):
    if _p.exists() and str(_p) not in sys.path:
        sys.path.insert(0, str(_p))


@pytest.fixture(autouse=True)
def _clean_form_fields_env(monkeypatch):
    for name in (
        "FORM_FIELDS_LOG_LEVEL",
        "FORM_FIELDS_STRICT_TYPES",
        "FORM_FIELDS_MAX_BATCH",
        "FORM_FIELDS_HTTP_LOG",
        "FORM_FIELDS_HTTP_LOG_HEADERS",
        "FORM_FIELDS_HTTP_LOG_BODY_MAX_BYTES",
    ):
        monkeypatch.delenv(name, raising=False)
