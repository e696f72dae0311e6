import importlib
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from tenpin import config


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, "/api"),
        ("", "/api"),
        ("  ", "/api"),
        ("\t\n", "/api"),
        ("api", "/api"),
        ("/api/", "/api"),
        ("/scores//", "/scores"),
        ("/", "/"),
    ],
)
def test_canon_prefix(raw, expected):
    assert config._canon_prefix(raw) == expected


def test_api_prefix_read_from_env(monkeypatch):
    monkeypatch.setenv("API_PREFIX", "bowling/")
    monkeypatch.delitem(sys.modules, "tenpin.config", raising=False)
    fresh = importlib.import_module("tenpin.config")
    assert fresh.API_PREFIX == "/bowling"


def test_parse_allowed_origins_trims_entries():
    assert config.parse_allowed_origins(" https://a.example ,https://b.example,") == [
        "https://a.example",
        "https://b.example",
    ]
