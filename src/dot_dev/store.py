"""JSON persistence for :class:`~dot_dev.models.Config`.

Configs are read whole and written whole:
 - ``load_config`` returns an empty Config when the file does not exist and
   raises :class:`ValidationError` for malformed content
 - ``save_config`` pretty-prints with two-space indentation and writes
   atomically (temp file in the same directory, fsync, rename)
"""

from __future__ import annotations
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from .errors import StorageError, ValidationError
from .models import Config

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_config(path: PathLike) -> Config:
    """Load a Config from ``path``; a missing file yields ``Config()``."""
    path = Path(path)
    if not path.exists():
        logger.debug("Config file %s not found; starting empty", path)
        return Config()
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise StorageError(f"Failed to read config file, {path}: {e}") from e
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError(f"Failed to parse config file, {path}: {e}") from e
    logger.debug("Loaded config from %s", path)
    return Config.from_dict(data)


def to_json(config: Config) -> str:
    return json.dumps(config.to_dict(), indent=2) + "\n"


def atomic_write(path: Path, text: str) -> None:
    """Atomically write UTF‑8 text to ``path`` with fsync."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmppath = tempfile.mkstemp(
        prefix=path.name + ".", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmppath, path)
    except BaseException:
        try:
            os.remove(tmppath)
        except OSError:
            pass
        raise


def save_config(config: Config, path: PathLike) -> None:
    """Serialize ``config`` and write it to ``path``."""
    path = Path(path)
    logger.debug("Saving %s", path)
    try:
        atomic_write(path, to_json(config))
    except OSError as e:
        raise StorageError(f"Failed to write config file, {path}: {e}") from e


__all__ = ["load_config", "save_config", "to_json", "atomic_write"]
