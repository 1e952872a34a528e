# openapi_docs/services/files.py
import os
import stat
import tempfile
from pathlib import Path
from typing import Union

PLACEHOLDER = "{{openapi}}"


def render_template(template: str, api_path: str) -> str:
    """Swap every occurrence of the placeholder for api_path. No escaping."""
    return template.replace(PLACEHOLDER, api_path)


def _target_mode(target: Path) -> int:
    """Mode of the existing file, or 0o666 minus the umask for a new one."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(file_path: Union[str, Path], contents: str) -> None:
    """
    Write contents as UTF-8 to file_path.

    The data goes to a temporary file in the same directory which then
    replaces the target, so a failed write leaves the old file untouched.
    The target keeps its permissions; a new file gets the umask default.
    """
    target = Path(file_path)
    mode = _target_mode(target)
    fd, tmp_name = tempfile.mkstemp(dir=str(target.parent), prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(contents)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
