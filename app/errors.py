class ScienceProxyError(Exception):
    """Base error rendered to the caller as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigError(ScienceProxyError):
    """The server is missing required configuration (e.g. the provider key)."""

    status_code = 500


class BadRequest(ScienceProxyError):
    """The request body is malformed or names an unsupported selection."""

    status_code = 400


class UpstreamError(ScienceProxyError):
    """The provider failed or returned a reply that could not be used."""

    status_code = 500
