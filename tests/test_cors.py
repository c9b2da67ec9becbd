import pytest
from app.api.cors import cors_headers, normalize_origin, resolve_cors_origin

ALLOWED = [
    "https://artinamr.xyz",
    "http://localhost",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


@pytest.mark.parametrize("origin,expected", [
    ("http://localhost:3000", "http://localhost:3000"),
    ("http://localhost:3000/quiz?x=1", "http://localhost:3000"),
    ("https://ArtinAmr.xyz", "https://artinamr.xyz"),
    ("https://artinamr.xyz:443", "https://artinamr.xyz"),
    ("http://localhost:80", "http://localhost"),
    ("http://localhost:9999", "http://localhost:9999"),
])
def test_normalize_origin(origin, expected):
    assert normalize_origin(origin) == expected


@pytest.mark.parametrize("origin", ["not a url", "null", "http://localhost:notaport", "", None])
def test_normalize_origin_rejects_unparseable(origin):
    assert normalize_origin(origin) is None


def test_unlisted_port_is_not_allowed():
    assert resolve_cors_origin("http://localhost:9999", ALLOWED, "https://artinamr.xyz") == "https://artinamr.xyz"


def test_allowed_origin_is_echoed():
    assert resolve_cors_origin("http://127.0.0.1:3000", ALLOWED, "https://artinamr.xyz") == "http://127.0.0.1:3000"


def test_unknown_origin_falls_back():
    assert resolve_cors_origin("http://evil.example", ALLOWED, "https://artinamr.xyz") == "https://artinamr.xyz"


def test_missing_origin_falls_back():
    assert resolve_cors_origin(None, ALLOWED, "https://artinamr.xyz") == "https://artinamr.xyz"
    assert resolve_cors_origin("::::", ALLOWED, "https://artinamr.xyz") == "https://artinamr.xyz"


def test_defaults_come_from_settings():
    assert resolve_cors_origin("http://localhost:8788") == "http://localhost:8788"
    assert resolve_cors_origin("http://localhost:5173") == "https://artinamr.xyz"


def test_cors_headers():
    assert cors_headers("http://localhost") == {
        "Access-Control-Allow-Origin": "http://localhost",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
    }
