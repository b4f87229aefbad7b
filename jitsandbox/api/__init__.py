"""HTTP API for jit-sandbox."""

from jitsandbox.api.main import create_app

__all__ = ["create_app"]
