"""Reading guides from and writing pages to disk."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, MARKDOWN_EXTENSIONS
from .exceptions import ReadFileError

MAX_FILE_SIZE_ENV_VAR = "GUIDE_MARKDOWN_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Size limit in bytes: ``$GUIDE_MARKDOWN_MAX_FILE_SIZE`` when set, else `default`.

    Raises:
        ValueError: If the variable is set to anything but a positive integer.
    """
    raw = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw is None:
        return default

    try:
        limit = int(raw)
    except ValueError:
        limit = 0
    if limit <= 0:
        raise ValueError(f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {raw!r}")
    return limit


def resolve_guide_path(raw_path: str, base_dir: Path) -> Path:
    """Turn a command-line path into the absolute path of a guide.

    The guide has to be a markdown file below `base_dir`, and neither it nor
    any directory on the way to it may be a symlink.

    Raises:
        ValueError: Describing why the path is refused.

    Examples:
        resolve_guide_path("source/getting_started.md", Path.cwd())
    """
    path = Path(raw_path).expanduser()
    if any(_is_symlink(part) for part in (path, *path.parents)):
        raise ValueError(f"Symlinks are not supported: {path}")

    try:
        resolved = path.resolve(strict=True)
    except OSError as error:
        raise ValueError(f"Cannot resolve {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")
    if not resolved.is_relative_to(base_dir):
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.")
    if resolved.suffix.lower() not in MARKDOWN_EXTENSIONS:
        extensions = ", ".join(MARKDOWN_EXTENSIONS)
        raise ValueError(f"{resolved} is not a Markdown file (expected {extensions}).")
    return resolved


def _is_symlink(path: Path) -> bool:
    try:
        return path.is_symlink()
    except OSError:
        return False


def check_file_size(filepath: Path, max_size: int) -> None:
    """Refuse anything but a regular file of at most `max_size` bytes.

    The file is not followed if it is a symlink, so a symlink is refused too.

    Raises:
        IOError: If the file cannot be examined, is not a regular file, or is
            too large.
    """
    try:
        info = os.lstat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if not stat.S_ISREG(info.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    if info.st_size > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")


def read_document(filepath: Path) -> str:
    """Read a guide as UTF-8 text.

    Raises:
        ReadFileError: If the file cannot be opened or is not valid UTF-8.
    """
    try:
        return filepath.read_text(encoding="UTF-8")
    except UnicodeDecodeError as error:
        raise ReadFileError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except OSError as error:
        raise ReadFileError(f"Error accessing {filepath}: {error}") from error


def write_output(filepath: Path, content: str):
    """Write `content` to `filepath` atomically.

    The page is written to a temporary file in the target directory and moved
    into place, so readers never observe a partially written page. Existing
    symlinks are refused.

    Raises:
        IOError: If the target is a symlink or the file cannot be written.
    """
    if filepath.is_symlink():
        raise IOError(f"Symlinks are not supported: {filepath}.")

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", delete=False, dir=filepath.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        os.chmod(temp_path, 0o644)
        os.replace(temp_path, filepath)
    except OSError as error:
        raise IOError(f"Error writing {filepath}: {error}") from error
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
