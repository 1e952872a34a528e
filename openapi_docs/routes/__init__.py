# openapi_docs/routes/__init__.py
from flask import Flask


def register_view(app: Flask, rule: str, endpoint: str, view, methods=("GET",)) -> None:
    """
    Add a URL rule, or swap the view if the endpoint already exists.

    Flask refuses a second, different function for the same endpoint, so a
    repeated registration replaces the view instead and the last one wins.
    """
    if endpoint in app.view_functions:
        app.view_functions[endpoint] = view
        return
    app.add_url_rule(rule, endpoint=endpoint, view_func=view, methods=list(methods))
