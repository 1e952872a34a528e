from flask import Flask, jsonify

from openapi_docs import OpenAPIConfig, add_endpoints
from openapi_docs.cli import register_cli

app = Flask(__name__)

@app.get("/api/healthz")
def health():
    """Liveness probe."""
    return jsonify(ok=True)

@app.get("/api/projects/<int:project_id>")
def get_project(project_id: int):
    """
    GET /api/projects/{project_id} -- single project.

    Responses:
      - 200: {"id": int}
    """
    return jsonify(id=project_id)

config = OpenAPIConfig.from_env()
add_endpoints(app, config)
register_cli(app, config)
