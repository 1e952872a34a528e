# openapi_docs/cli.py
import click
from flask import Flask, current_app
from flask.cli import AppGroup

from . import DescriptionUnavailable, write_description_to_file
from .config import DEFAULT_CONFIG, OpenAPIConfig

EXTENSION_KEY = "openapi_docs"

openapi_cli = AppGroup("openapi", help="OpenAPI definition tools.")


@openapi_cli.command("write")
@click.argument("file_path", type=click.Path(dir_okay=False, writable=True))
def write_command(file_path: str):
    """Write the app's OpenAPI definition to FILE_PATH."""
    config = current_app.extensions.get(EXTENSION_KEY, DEFAULT_CONFIG)
    try:
        write_description_to_file(current_app, file_path, config)
    except (DescriptionUnavailable, OSError) as e:
        raise click.ClickException(str(e))
    click.echo(f"Wrote OpenAPI definition to {file_path}")


def register_cli(app: Flask, config: OpenAPIConfig = DEFAULT_CONFIG) -> None:
    """Attach `flask openapi`; config should be the one given to add_endpoints."""
    app.extensions[EXTENSION_KEY] = config
    app.cli.add_command(openapi_cli)
