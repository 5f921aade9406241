"""
Serverless entrypoint: exposes the ASGI app built by `api.main.create_app()`.
"""

from __future__ import annotations

from api.main import app  # noqa: F401
