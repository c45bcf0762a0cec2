"""
Output Writers
==============

Filesystem helpers shared by every output kind.

Design Rules:
    - Directories are created recursively before anything is written
    - Every OSError is wrapped with the path that failed
    - JSON is pretty-printed with sorted keys and 2-space indent, non-ASCII
      text written as raw UTF-8
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel

from video_to_df.errors import CreateDirectoryError, FileWriteError, SerializationError


logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> None:
    """Create `path` and any missing parents."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CreateDirectoryError(path, e) from e


def write_text(path: Path, text: str) -> None:
    """Write `text` to `path`, replacing any existing file."""
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(path, e) from e


def render_json(record: BaseModel) -> str:
    """
    Serialize a record model to pretty JSON.

    Raises:
        SerializationError: If the record contains non-serializable values
    """
    try:
        return json.dumps(
            record.model_dump(mode="json"),
            indent=2,
            sort_keys=True,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to render output JSON: {e}") from e


def write_record(path: Path, record: BaseModel) -> None:
    """Render `record` and write it to `path`."""
    write_text(path, render_json(record))
