# openapi_docs/__init__.py
from pathlib import Path
from typing import Optional, Union

from flask import Flask

from .config import DEFAULT_CONFIG, OpenAPIConfig, normalize_path
from .services.files import write_atomic
from .services.introspection import APIDescriptionSource, FlaskRouteIntrospector

__all__ = [
    "DEFAULT_CONFIG",
    "APIDescriptionSource",
    "DescriptionUnavailable",
    "FlaskRouteIntrospector",
    "OpenAPIConfig",
    "add_endpoints",
    "normalize_path",
    "write_description_to_file",
]


class DescriptionUnavailable(RuntimeError):
    pass


def _source_for(app: Flask, config: OpenAPIConfig, source: Optional[APIDescriptionSource]) -> APIDescriptionSource:
    if source is not None:
        return source
    return FlaskRouteIntrospector(app, title=config.title, version=config.version)


def add_endpoints(
    app: Flask,
    config: OpenAPIConfig = DEFAULT_CONFIG,
    source: Optional[APIDescriptionSource] = None,
) -> None:
    """
    Serve the app's OpenAPI definition and a Swagger UI pointing at it.

    Call once while setting the app up, before it handles requests. A
    missing path in config turns the matching endpoint off; a broken UI
    bundle is logged and leaves the definition endpoint alone.

    source defaults to a FlaskRouteIntrospector over app. It is only bound
    to the registered view, so write_description_to_file needs it again.
    """
    from .routes.description import add_description_endpoint
    from .routes.swagger_ui import add_swagger_ui

    app.logger.debug("Registering OpenAPI endpoints")
    add_description_endpoint(app, config, _source_for(app, config, source))
    add_swagger_ui(app, config)


def write_description_to_file(
    app: Flask,
    file_path: Union[str, Path],
    config: OpenAPIConfig = DEFAULT_CONFIG,
    source: Optional[APIDescriptionSource] = None,
) -> None:
    """
    Write the app's current OpenAPI definition to file_path (UTF-8, atomic).

    Pass the same config and source that were given to add_endpoints to get
    exactly what the live endpoint serves; neither is remembered by the app.

    Raises DescriptionUnavailable if no definition can be produced; write
    errors propagate as OSError.
    """
    body = _source_for(app, config, source).current_api_description()
    if body is None:
        raise DescriptionUnavailable("Could not generate OpenAPI definition")
    write_atomic(file_path, body)
