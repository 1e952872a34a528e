# openapi_docs/routes/description.py
from flask import Flask, Response, current_app
from flask_cors import cross_origin

from ..config import OpenAPIConfig, normalize_path
from ..services.introspection import ENDPOINT_PREFIX, APIDescriptionSource
from . import register_view

ERROR_MESSAGE = "Could not generate OpenAPI definition"


def make_description_view(source: APIDescriptionSource):
    def openapi_description():
        """
        GET <api_path> -- current OpenAPI definition of the app's routes.

        Responses:
          - 200: application/json document
          - 500: text/plain "Could not generate OpenAPI definition"
        """
        try:
            body = source.current_api_description()
        except Exception:
            current_app.logger.exception("OpenAPI definition source failed")
            body = None

        if body is None:
            current_app.logger.warning("Could not retrieve OpenAPI definition from router")
            return Response(ERROR_MESSAGE, status=500, mimetype="text/plain")

        return Response(body, status=200, mimetype="application/json")

    return openapi_description


def add_description_endpoint(app: Flask, config: OpenAPIConfig, source: APIDescriptionSource) -> bool:
    if not config.api_path:
        app.logger.info("No path for OpenAPI definition")
        return False

    api_path = normalize_path(config.api_path)
    view = make_description_view(source)
    if config.cors_origins:
        view = cross_origin(origins=list(config.cors_origins))(view)

    register_view(app, api_path, f"{ENDPOINT_PREFIX}description:{api_path}", view)
    app.logger.info("Registered OpenAPI definition on %s", api_path)
    return True
