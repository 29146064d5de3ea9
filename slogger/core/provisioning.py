"""
Log directory provisioning

WARNING: prepare_directory() deletes any non-directory found at the
requested path (unless replace_conflicts is False). The deleted file
cannot be recovered.
"""

from pathlib import Path
from typing import Union

from slogger.core.errors import LoggerSetupError

DIRECTORY_MODE = 0o755


def prepare_directory(
    directory: Union[str, Path],
    replace_conflicts: bool = True
) -> Path:
    """
    Make sure the log directory exists.

    A missing directory is created with its parents. If the path exists
    but is not a directory, it is removed and a directory is created in
    its place.

    Args:
        directory: Directory path
        replace_conflicts: Remove a conflicting non-directory path. When
                           False the conflict raises instead.

    Returns:
        The directory as a Path

    Raises:
        LoggerSetupError: If the directory cannot be created, or a
                          conflicting path exists and replace_conflicts
                          is False
    """
    path = Path(directory)
    try:
        if path.is_dir():
            return path

        if path.exists() or path.is_symlink():
            if not replace_conflicts:
                raise LoggerSetupError(
                    f"log directory path exists and is not a directory: {path}"
                )
            path.unlink()

        path.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise LoggerSetupError(f"cannot prepare log directory {path}: {e}") from e

    return path
