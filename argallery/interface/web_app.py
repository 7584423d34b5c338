"""Mini README: FastAPI application serving the AR model gallery.

Structure:
    * create_application - application factory wiring routes, templates and
      static mounts around an ``AssetService`` and a ``ThumbnailCache``.

Listing endpoints degrade to "no models" on storage faults and removal always
answers 200, so the viewer grid keeps working while the disk misbehaves.
Upload write failures and thumbnail render failures are the only requests
that answer with HTTP 500.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..catalogue import AssetService
from ..classification import StaticTaxonomy
from ..configuration import GallerySettings, get_settings
from ..logging_utils import configure_root_logger, get_logger
from ..storage import AssetStore, RemovalOutcome, StorageError
from ..thumbnails import PlaywrightRenderer, ThumbnailCache, ThumbnailRenderer

LOGGER = get_logger(__name__)


def create_application(
    settings: Optional[GallerySettings] = None,
    *,
    renderer: Optional[ThumbnailRenderer] = None,
    clock: Optional[Callable[[], int]] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="AR Model Gallery", version="0.1.0")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.mount("/models", StaticFiles(directory=str(settings.models_directory)), name="models")
    app.mount("/thumbs", StaticFiles(directory=str(settings.thumbnails_directory)), name="thumbs")

    taxonomy = StaticTaxonomy()
    store = AssetStore(settings.models_directory, extension=settings.asset_extension, clock=clock)
    service = AssetService(store, taxonomy=taxonomy)
    thumbnails = ThumbnailCache(
        settings.thumbnails_directory,
        renderer or PlaywrightRenderer(),
        extension=settings.asset_extension,
    )

    @app.get("/", response_class=HTMLResponse)
    async def gallery(request: Request) -> HTMLResponse:
        """Render the gallery page with the current models as first paint."""

        result = service.enumerate_assets()
        LOGGER.debug("Rendering gallery with %s models", len(result.models))
        return templates.TemplateResponse(
            request,
            "gallery.html",
            {
                "models": result.models,
                "categories": taxonomy.export_categories(),
                "extension": settings.asset_extension,
            },
        )

    @app.post("/upload")
    async def upload(model: UploadFile = File(...)) -> RedirectResponse:
        """Store an uploaded model and send the browser back to the gallery."""

        if not model.filename:
            raise HTTPException(status_code=400, detail="Uploaded file has no filename")
        content = await model.read()
        try:
            filename = service.ingest_asset(model.filename, content)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        except StorageError as error:
            LOGGER.exception("Upload of %s could not be stored", model.filename)
            raise HTTPException(status_code=500, detail=str(error)) from error
        LOGGER.info("Received upload %s stored as %s", model.filename, filename)
        return RedirectResponse("/", status_code=302)

    @app.get("/models-list")
    async def models_list() -> JSONResponse:
        """Return visible filenames, empty when the store cannot be read."""

        return JSONResponse(service.list_filenames())

    @app.get("/models-metadata")
    async def models_metadata() -> JSONResponse:
        """Return enriched records in a ``{success, models, message}`` envelope."""

        return JSONResponse(service.enumerate_assets().as_dict())

    @app.get("/generate-thumb/{filename}")
    async def generate_thumb(request: Request, filename: str) -> JSONResponse:
        """Render (or reuse) a PNG thumbnail for a stored model."""

        if not (store.is_visible(filename) and store.path_for(filename).is_file()):
            LOGGER.warning("Thumbnail requested for unknown model %s", filename)
            return JSONResponse(
                {"ok": False, "error": f"Model {filename} not found"}, status_code=500
            )
        model_url = str(request.url_for("models", path=filename))
        try:
            url = await thumbnails.ensure(filename, model_url)
        except Exception as error:
            LOGGER.exception("Thumbnail generation failed for %s", filename)
            return JSONResponse({"ok": False, "error": str(error)}, status_code=500)
        return JSONResponse({"ok": True, "url": url})

    @app.delete("/remove/{filename}")
    async def remove(filename: str) -> PlainTextResponse:
        """Remove a model. Always answers 200 whatever the storage outcome."""

        outcome = service.remove_asset(filename)
        if outcome is RemovalOutcome.OK:
            LOGGER.info("Model %s removed on request", filename)
        return PlainTextResponse("OK", status_code=200)

    return app
