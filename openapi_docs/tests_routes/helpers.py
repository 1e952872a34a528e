# tests_routes/helpers.py
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

from flask import Flask

from openapi_docs.routes import swagger_ui

TEMPLATE_SOURCE = swagger_ui.SWAGGER_UI_DIR / swagger_ui.TEMPLATE_FILE


class StubSource:
    def __init__(self, body):
        self.body = body
        self.calls = 0

    def current_api_description(self):
        self.calls += 1
        return self.body


def make_app():
    app = Flask(__name__)
    app.config["TESTING"] = True

    @app.get("/api/projects/<int:project_id>")
    def get_project(project_id: int):
        """Single project."""
        return {"id": project_id}

    return app


def isolated_ui_dir(testcase) -> Path:
    """Copy the bundled template to a temp dir and point the installer at it."""
    tmp = tempfile.TemporaryDirectory()
    testcase.addCleanup(tmp.cleanup)
    ui_dir = Path(tmp.name) / "swaggerui"
    ui_dir.mkdir()
    shutil.copy(TEMPLATE_SOURCE, ui_dir / swagger_ui.TEMPLATE_FILE)

    patcher = patch.object(swagger_ui, "SWAGGER_UI_DIR", ui_dir)
    patcher.start()
    testcase.addCleanup(patcher.stop)
    return ui_dir
