# tests_services/conftest.py
import os
import sys

import pytest
from flask import Blueprint, Flask

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


@pytest.fixture
def flask_app():
    """App with a plain route, a blueprint route and a path-converter route."""
    app = Flask("sample")
    app.config["TESTING"] = True

    @app.get("/api/healthz")
    def health():
        return {"ok": True}

    projects_bp = Blueprint("projects", __name__)

    @projects_bp.route("/projects/<int:project_id>", methods=["GET", "DELETE"])
    def project(project_id: int):
        """
        Fetch or delete one project.

        Responses:
          - 200: project
        """
        return {"id": project_id}

    @projects_bp.get("/files/<path:name>")
    def project_file(name):
        return {"name": name}

    app.register_blueprint(projects_bp, url_prefix="/api")
    return app
