"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn ton_inspector.api_server.app:app --host 0.0.0.0 --port 8000
"""

from ton_inspector.api_server.server import app

__all__ = ["app"]
