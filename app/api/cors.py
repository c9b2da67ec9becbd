from typing import Dict, Iterable, Optional
from urllib.parse import urlsplit
from app.config import settings


ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"

DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_origin(origin: Optional[str]) -> Optional[str]:
    """Reduce an Origin header to ``scheme://host[:port]``, or None if unparseable."""
    if not origin:
        return None
    try:
        parts = urlsplit(origin.strip())
        port = parts.port
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None

    base = f"{parts.scheme.lower()}://{parts.hostname}"
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme.lower()):
        base += f":{port}"
    return base


def resolve_cors_origin(
    origin: Optional[str],
    allowed: Optional[Iterable[str]] = None,
    fallback: Optional[str] = None
) -> str:
    """Echo an allowed origin back, otherwise answer with the canonical one."""
    allowed = set(settings.cors_allowed_origins if allowed is None else allowed)
    fallback = fallback or settings.cors_fallback_origin

    base = normalize_origin(origin)
    if base is not None and base in allowed:
        return base
    return fallback


def cors_headers(origin: str) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }
