"""Mini README: Core package initializer for the AR model gallery.

The gallery stores uploaded ``.glb`` models on disk, derives display
metadata from their filenames, and serves them to a browser viewer. Only
the logging helper is re-exported here so importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
