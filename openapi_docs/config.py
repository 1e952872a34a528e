# openapi_docs/config.py
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

_DISABLED_VALUES = {"", "none", "off", "false"}


def normalize_path(path: str) -> str:
    """Make a mount path absolute without double-prefixing it."""
    if path.startswith("/"):
        return path
    return "/" + path


@dataclass(frozen=True)
class OpenAPIConfig:
    """
    Mount paths for the OpenAPI document and the Swagger UI.

    Setting either path to None disables that endpoint; the UI also needs
    api_path since it has nothing to point at otherwise.
    """
    api_path: Optional[str] = "/openapi"
    ui_path: Optional[str] = "/openapi/ui"
    cors_origins: Optional[Tuple[str, ...]] = None
    title: Optional[str] = None
    version: Optional[str] = None

    @classmethod
    def from_env(cls, prefix: str = "OPENAPI_") -> "OpenAPIConfig":
        load_dotenv()
        default = cls()

        def _path(name: str, fallback: Optional[str]) -> Optional[str]:
            raw = os.environ.get(prefix + name)
            if raw is None:
                return fallback
            if raw.strip().lower() in _DISABLED_VALUES:
                return None
            return raw.strip()

        origins = os.environ.get(prefix + "CORS_ORIGINS")
        return cls(
            api_path=_path("PATH", default.api_path),
            ui_path=_path("UI_PATH", default.ui_path),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) if origins else None,
            title=os.environ.get(prefix + "TITLE") or None,
            version=os.environ.get(prefix + "VERSION") or None,
        )


DEFAULT_CONFIG = OpenAPIConfig()
