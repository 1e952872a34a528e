# openapi_docs/services/introspection.py
import inspect
import json
import re
from typing import Any, Dict, List, Optional, Protocol, Tuple

from flask import Flask

# endpoints registered by this package are kept out of the document
ENDPOINT_PREFIX = "openapi_docs."

_RULE_VAR = re.compile(r"<(?:(?P<converter>[a-zA-Z_][a-zA-Z0-9_]*)(?:\([^>]*\))?:)?(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)>")

_CONVERTER_SCHEMAS = {
    "int": {"type": "integer"},
    "float": {"type": "number"},
    "uuid": {"type": "string", "format": "uuid"},
}

_SKIPPED_METHODS = {"HEAD", "OPTIONS"}


class APIDescriptionSource(Protocol):
    def current_api_description(self) -> Optional[str]:
        ...


def openapi_path(rule: str) -> str:
    """/projects/<int:project_id> -> /projects/{project_id}"""
    return _RULE_VAR.sub(lambda m: "{" + m.group("name") + "}", rule)


def path_parameters(rule: str) -> List[Dict[str, Any]]:
    params = []
    for m in _RULE_VAR.finditer(rule):
        schema = _CONVERTER_SCHEMAS.get(m.group("converter") or "", {"type": "string"})
        params.append({
            "name": m.group("name"),
            "in": "path",
            "required": True,
            "schema": dict(schema),
        })
    return params


def _split_docstring(view) -> Tuple[Optional[str], Optional[str]]:
    doc = inspect.getdoc(view)
    if not doc:
        return None, None
    lines = doc.strip().splitlines()
    summary = lines[0].strip()
    rest = "\n".join(lines[1:]).strip()
    return summary, rest or None


class FlaskRouteIntrospector:
    """
    Builds an OpenAPI 3 document from the rules currently in app.url_map.

    The map is walked on every call, so routes added after the endpoints
    were registered show up on the next request.
    """

    openapi_version = "3.0.3"

    def __init__(self, app: Flask, title: Optional[str] = None, version: Optional[str] = None):
        self.app = app
        self.title = title
        self.version = version

    def build_document(self) -> Dict[str, Any]:
        paths: Dict[str, Dict[str, Any]] = {}

        for rule in sorted(self.app.url_map.iter_rules(), key=lambda r: (r.rule, r.endpoint)):
            if rule.endpoint == "static" or rule.endpoint.startswith(ENDPOINT_PREFIX):
                continue
            view = self.app.view_functions.get(rule.endpoint)
            if view is None:
                continue

            summary, description = _split_docstring(view)
            params = path_parameters(rule.rule)
            item = paths.setdefault(openapi_path(rule.rule), {})

            for method in sorted((rule.methods or set()) - _SKIPPED_METHODS):
                op: Dict[str, Any] = {
                    "operationId": rule.endpoint,
                    "responses": {"200": {"description": "Successful response"}},
                }
                if summary:
                    op["summary"] = summary
                if description:
                    op["description"] = description
                if "." in rule.endpoint:
                    op["tags"] = [rule.endpoint.rsplit(".", 1)[0]]
                if params:
                    op["parameters"] = params
                item[method.lower()] = op

        return {
            "openapi": self.openapi_version,
            "info": {
                "title": self.title or self.app.name,
                "version": self.version or "1.0.0",
            },
            "paths": {p: ops for p, ops in paths.items() if ops},
        }

    def current_api_description(self) -> Optional[str]:
        try:
            doc = self.build_document()
        except Exception:
            self.app.logger.exception("Failed to build OpenAPI definition from url_map")
            return None
        return json.dumps(doc, indent=2)
