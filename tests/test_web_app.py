"""Mini README: HTTP contract tests for the gallery web application.

Uses FastAPI's ``TestClient`` against an application built on temporary
directories, a fixed clock and a fake thumbnail renderer.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient

from argallery.configuration import GallerySettings
from argallery.interface import create_application

FIXED_MS = 1_700_000_000_000


class FakeRenderer:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.calls: List[str] = []

    async def render(self, model_url: str) -> bytes:
        self.calls.append(model_url)
        if self.fail:
            raise RuntimeError("renderer crashed")
        return b"\x89PNG fake"


@pytest.fixture()
def settings(tmp_path: Path) -> GallerySettings:
    return GallerySettings(
        models_directory=tmp_path / "models",
        thumbnails_directory=tmp_path / "thumbs",
    )


@pytest.fixture()
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture()
def client(settings: GallerySettings, renderer: FakeRenderer) -> TestClient:
    app = create_application(settings, renderer=renderer, clock=lambda: FIXED_MS)
    return TestClient(app)


def _upload(client: TestClient, name: str, content: bytes = b"glTF"):
    return client.post(
        "/upload",
        files={"model": (name, content, "model/gltf-binary")},
        follow_redirects=False,
    )


def test_empty_store_lists_nothing(client: TestClient) -> None:
    assert client.get("/models-list").json() == []
    assert client.get("/models-metadata").json() == {
        "success": True,
        "models": [],
        "message": None,
    }


def test_upload_redirects_and_stores_model(client: TestClient, settings: GallerySettings) -> None:
    response = _upload(client, "helmet.glb", b"model-bytes")

    assert response.status_code == 302
    assert response.headers["location"] == "/"
    filename = f"{FIXED_MS}-helmet.glb"
    assert (settings.models_directory / filename).read_bytes() == b"model-bytes"
    assert client.get("/models-list").json() == [filename]
    assert client.get(f"/models/{filename}").content == b"model-bytes"


def test_metadata_returns_enriched_records(client: TestClient) -> None:
    _upload(client, "helmet.glb")
    _upload(client, "cat.glb")

    payload = client.get("/models-metadata").json()

    assert payload["success"] is True
    assert payload["message"] is None
    assert [(model["name"], model["category"]) for model in payload["models"]] == [
        ("Helmet", "General"),
        ("Cat", "Animals"),
    ]
    assert payload["models"][1]["filename"] == f"{FIXED_MS + 1}-cat.glb"
    assert payload["models"][1]["thumbnailUrl"] is None


def test_non_model_files_are_hidden(client: TestClient, settings: GallerySettings) -> None:
    (settings.models_directory / "1-readme.txt").write_text("hidden")

    assert client.get("/models-list").json() == []
    assert client.get("/models-metadata").json()["models"] == []


def test_read_failure_degrades_to_empty(client: TestClient, settings: GallerySettings) -> None:
    settings.models_directory.rmdir()

    assert client.get("/models-list").json() == []
    assert client.get("/models-metadata").json() == {
        "success": False,
        "models": [],
        "message": "Error reading models directory",
    }


def test_remove_deletes_and_always_answers_ok(client: TestClient, settings: GallerySettings) -> None:
    _upload(client, "cube.glb")
    filename = f"{FIXED_MS}-cube.glb"

    response = client.delete(f"/remove/{filename}")
    assert response.status_code == 200
    assert response.text == "OK"
    assert client.get("/models-list").json() == []

    assert client.delete(f"/remove/{filename}").status_code == 200
    assert client.delete("/remove/never-existed.glb").status_code == 200


def test_remove_leaves_non_model_files(client: TestClient, settings: GallerySettings) -> None:
    notes = settings.models_directory / "notes.txt"
    notes.write_text("keep")

    assert client.delete("/remove/notes.txt").status_code == 200
    assert notes.exists()


def test_generate_thumb_renders_once(
    client: TestClient, renderer: FakeRenderer, settings: GallerySettings
) -> None:
    _upload(client, "cube.glb")
    filename = f"{FIXED_MS}-cube.glb"

    first = client.get(f"/generate-thumb/{filename}")
    second = client.get(f"/generate-thumb/{filename}")

    assert first.status_code == 200
    assert first.json() == {"ok": True, "url": "/thumbs/cube.png"}
    assert second.json() == first.json()
    assert renderer.calls == [f"http://testserver/models/{filename}"]
    assert (settings.thumbnails_directory / "cube.png").exists()
    assert client.get("/thumbs/cube.png").content == b"\x89PNG fake"


def test_generate_thumb_failure_reports_500(settings: GallerySettings) -> None:
    app = create_application(settings, renderer=FakeRenderer(fail=True), clock=lambda: FIXED_MS)
    client = TestClient(app)
    _upload(client, "cube.glb")

    response = client.get(f"/generate-thumb/{FIXED_MS}-cube.glb")

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "renderer crashed"}
    assert list(settings.thumbnails_directory.iterdir()) == []


def test_generate_thumb_for_missing_model_does_not_cache(
    client: TestClient, renderer: FakeRenderer, settings: GallerySettings
) -> None:
    """A thumbnail must never be rendered for a model that is not stored."""

    response = client.get("/generate-thumb/1-ghost.glb")

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "Model 1-ghost.glb not found"}
    assert renderer.calls == []
    assert not (settings.thumbnails_directory / "ghost.png").exists()

    _upload(client, "ghost.glb")
    later = client.get(f"/generate-thumb/{FIXED_MS}-ghost.glb")
    assert later.json() == {"ok": True, "url": "/thumbs/ghost.png"}
    assert renderer.calls == [f"http://testserver/models/{FIXED_MS}-ghost.glb"]


def test_generate_thumb_rejects_non_model_files(
    client: TestClient, renderer: FakeRenderer, settings: GallerySettings
) -> None:
    (settings.models_directory / "notes.txt").write_text("not a model")

    response = client.get("/generate-thumb/notes.txt")

    assert response.status_code == 500
    assert response.json()["ok"] is False
    assert renderer.calls == []


def test_gallery_page_renders_models(client: TestClient) -> None:
    _upload(client, "damaged_helmet.glb")

    response = client.get("/")

    assert response.status_code == 200
    assert "Damaged_helmet" in response.text
    assert "Equipment" in response.text
    assert f'data-filename="{FIXED_MS}-damaged_helmet.glb"' in response.text

    script = client.get("/static/script.js")
    assert script.status_code == 200
    assert "/models-metadata" in script.text
    assert "model.category" in script.text


def test_upload_requires_model_field(client: TestClient) -> None:
    response = client.post("/upload", files={"other": ("a.glb", b"x")})

    assert response.status_code == 422


def test_upload_without_usable_filename_is_rejected(
    client: TestClient, settings: GallerySettings
) -> None:
    response = _upload(client, "/")

    assert response.status_code == 400
    assert "filename" in response.json()["detail"]
    assert list(settings.models_directory.iterdir()) == []


def test_upload_storage_failure_reports_500(client: TestClient, settings: GallerySettings) -> None:
    """A write fault surfaces as a JSON error and the app keeps serving."""

    settings.models_directory.rmdir()
    settings.models_directory.write_text("a file where the directory should be")

    response = _upload(client, "cube.glb")

    assert response.status_code == 500
    assert "Unable to create store directory" in response.json()["detail"]
    assert client.get("/models-list").json() == []
