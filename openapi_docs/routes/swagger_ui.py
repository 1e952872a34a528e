# openapi_docs/routes/swagger_ui.py
from pathlib import Path

from flask import Flask, send_from_directory

from ..config import OpenAPIConfig, normalize_path
from ..services.files import render_template, write_atomic
from ..services.introspection import ENDPOINT_PREFIX
from . import register_view

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
SWAGGER_UI_DIR = PACKAGE_ROOT / "swaggerui"

TEMPLATE_FILE = "template.html"
INDEX_FILE = "index.html"


def serve(app: Flask, directory: Path, mount_path: str) -> None:
    """Serve files under directory at mount_path; the root answers with index.html."""
    base = mount_path.rstrip("/")
    directory = str(directory)

    def swagger_ui_index():
        return send_from_directory(directory, INDEX_FILE)

    def swagger_ui_asset(filename: str):
        return send_from_directory(directory, filename)

    register_view(app, base + "/", f"{ENDPOINT_PREFIX}ui_index:{base}", swagger_ui_index)
    register_view(app, base + "/<path:filename>", f"{ENDPOINT_PREFIX}ui_asset:{base}", swagger_ui_asset)


def install_swagger_ui(api_path: str, ui_dir: Path) -> None:
    """Render template.html into index.html with the definition path filled in."""
    template = (ui_dir / TEMPLATE_FILE).read_text(encoding="utf-8")
    write_atomic(ui_dir / INDEX_FILE, render_template(template, api_path))


def add_swagger_ui(app: Flask, config: OpenAPIConfig) -> bool:
    if not config.ui_path:
        app.logger.info("No path for SwaggerUI")
        return False
    if not config.api_path:
        app.logger.info("No path for OpenAPI definition, SwaggerUI not registered")
        return False

    api_path = normalize_path(config.api_path)
    ui_path = normalize_path(config.ui_path)

    ui_dir = SWAGGER_UI_DIR.resolve()
    if not ui_dir.is_dir():
        app.logger.error("Could not locate SwaggerUI directory %s", ui_dir)
        return False

    try:
        install_swagger_ui(api_path, ui_dir)
    except (OSError, UnicodeError) as e:
        app.logger.error("Failed to render SwaggerUI index in %s: %s", ui_dir, e)
        return False

    serve(app, ui_dir, ui_path)
    app.logger.info("Registered SwaggerUI on %s", ui_path)
    return True
