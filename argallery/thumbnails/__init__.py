"""Mini README: Lazily rendered PNG thumbnails for gallery models.

Exports the presence-checked ``ThumbnailCache`` and the headless
``PlaywrightRenderer`` used in production.
"""

from .renderer import PlaywrightRenderer, ThumbnailCache, ThumbnailRenderer

__all__ = ["PlaywrightRenderer", "ThumbnailCache", "ThumbnailRenderer"]
