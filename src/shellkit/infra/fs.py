from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path resolution, strict text reading and single-level directory
listing. Translates low-level OSError instances into FileAccessError so the
CLI layer can report them uniformly.
"""

import errno
import logging
import os
from typing import List, Optional

from shellkit.domain.errors import FileAccessError
from shellkit.utils.i18n import i18n

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Shellkit"
UNIX_APP_DIR_NAME = ".shellkit"
DEFAULT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for application data.

    Standards:
    - Windows: %LOCALAPPDATA%/Shellkit
    - Linux/Mac: ~/.shellkit

    The directory is not created; callers only read from it.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# ERROR TRANSLATION
# -----------------------------------------------------------------------------

def to_access_error(path: str, exc: OSError) -> FileAccessError:
    """
    Build a user-facing FileAccessError from a raw OSError.

    Args:
        path: Path the operation was invoked on.
        exc: The original exception.

    Returns:
        FileAccessError: Error with a catalog message, ready to raise.
    """
    if exc.errno == errno.ENOENT:
        msg = i18n.t("cli.errors.file_not_found", path=path)
    elif exc.errno == errno.ENOTDIR:
        msg = i18n.t("cli.errors.not_a_directory", path=path)
    elif exc.errno == errno.EISDIR:
        msg = i18n.t("cli.errors.is_a_directory", path=path)
    elif exc.errno in (errno.EACCES, errno.EPERM):
        msg = i18n.t("cli.errors.permission_denied", path=path)
    else:
        msg = i18n.t("cli.errors.read_failed", path=path, error=exc.strerror or exc)
    return FileAccessError(msg, path=path)

# -----------------------------------------------------------------------------
# READ API
# -----------------------------------------------------------------------------

def read_text_file(file_path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a whole text file with strict decoding.

    Args:
        file_path: Path to the file.
        encoding: Text encoding used to decode the bytes.

    Returns:
        str: The decoded file content.

    Raises:
        FileAccessError: If the file cannot be opened or decoded.
    """
    try:
        with open(file_path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(
            i18n.t("cli.errors.decode_failed", path=file_path, encoding=encoding, error=e.reason),
            path=file_path,
        ) from e
    except OSError as e:
        raise to_access_error(file_path, e) from e


def list_entry_names(dir_path: str) -> List[str]:
    """
    List the names of the entries directly inside a directory.

    Names are returned in the order the operating system yields them.

    Args:
        dir_path: Directory to enumerate.

    Returns:
        List[str]: Entry base names.

    Raises:
        FileAccessError: If the directory itself cannot be opened.
    """
    try:
        with os.scandir(dir_path) as it:
            return [entry.name for entry in it]
    except OSError as e:
        raise to_access_error(dir_path, e) from e
