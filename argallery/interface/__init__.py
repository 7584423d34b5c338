"""Mini README: Web interface for the AR model gallery.

Exports the FastAPI application factory that serves the gallery page, the
JSON endpoints consumed by the front-end script, and the static mounts for
models and thumbnails.
"""

from .web_app import create_application

__all__ = ["create_application"]
