"""
video_to_df Configuration
=========================

This module handles configuration loading for a v2df project directory.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. v2df_config.yaml / v2df_config.yml / v2df_config.json
    3. Default values (lowest priority)

Environment Variable Mapping:
    V2DF_VIDEO_FILE   -> video_file
    V2DF_OUTPUT_ROOT  -> output_root_dir
    V2DF_WORKERS      -> workers
    V2DF_LOG_LEVEL    -> logging.level
    V2DF_LOG_FORMAT   -> logging.format

Relative `video_file` and `output_root_dir` paths are resolved against the
directory that holds the config file.

Example:
    from video_to_df.config import load_config

    settings = load_config(Path("./my-project"))
    for project in settings.projects:
        print(project.namespace, project.frame_dfs_dir)
"""

import os
import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from video_to_df.errors import ConfigNotFoundError, ConfigParseError
from video_to_df.models.records import FrameRecordStyle, GridReferenceStyle
from video_to_df.sdf.transform import TransformMode


logger = logging.getLogger(__name__)


CONFIG_FILENAMES = ("v2df_config.yaml", "v2df_config.yml", "v2df_config.json")
DEFAULT_CONFIG_FILENAME = CONFIG_FILENAMES[0]


# =============================================================================
# Configuration Models
# =============================================================================

class ProjectConfig(BaseModel):
    """Settings for one output project."""

    border_width: int = Field(
        default=32,
        ge=0,
        le=0xFFFF,
        description="Border thickness added around every frame (pixels)",
    )
    border_color: int = Field(
        default=255,
        ge=0,
        le=255,
        description="Border fill value",
    )
    invert_colors: Optional[bool] = Field(
        default=None,
        description="Invert pixel values before padding",
    )
    frame_start: Optional[int] = Field(
        default=1,
        ge=1,
        description="First frame to process (1-based, inclusive)",
    )
    frame_end: Optional[int] = Field(
        default=None,
        ge=1,
        description="Last frame to process (1-based, inclusive)",
    )
    namespace: str = Field(
        default="namespace",
        description="Namespace used in grid references",
    )
    make_frames: bool = Field(default=True, description="Write frame records")
    frame_dfs_dir: Path = Field(
        default=Path("./frames"),
        description="Frame record directory, relative to the output root",
    )
    make_grid: bool = Field(default=True, description="Write the grid record")
    grid_df_dir: Path = Field(
        default=Path("./"),
        description="Grid record directory, relative to the output root",
    )
    make_tp: bool = Field(default=True, description="Write placement commands")
    tp_height: int = Field(
        default=220,
        ge=-32768,
        le=32767,
        description="Vertical coordinate used in placement commands",
    )
    tp_dir: Path = Field(
        default=Path("./frame_tp"),
        description="Placement command directory, relative to the output root",
    )
    test_frame: Optional[int] = Field(
        default=1,
        ge=1,
        description="Frame used by the `test` command (1-based)",
    )
    frame_record_style: FrameRecordStyle = Field(
        default=FrameRecordStyle.CACHED,
        description="Frame record shape: 'cached' or 'plain'",
    )
    grid_reference_style: GridReferenceStyle = Field(
        default=GridReferenceStyle.NAMESPACED,
        description="Grid reference form: 'namespaced' or 'term'",
    )
    transform_mode: TransformMode = Field(
        default=TransformMode.SIGNED,
        description="Distance field encoding: 'signed' or 'magnitude'",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for a v2df project.

    Loads configuration from the project config file and environment
    variables. Environment variables take precedence over file values.
    """

    video_file: Path = Field(default=Path("input.mp4"), description="Input video")
    output_root_dir: Path = Field(
        default=Path("./output"),
        description="Root directory for every project's output",
    )
    projects: List[ProjectConfig] = Field(
        default_factory=lambda: [ProjectConfig()],
        description="Output projects, processed in order",
    )
    workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Frame worker threads (None = executor default)",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def resolve_paths(self, base_dir: Path) -> "Settings":
        """Return a copy with relative input/output paths anchored at `base_dir`."""
        base_dir = Path(base_dir)
        updates = {}
        if not self.video_file.is_absolute():
            updates["video_file"] = base_dir / self.video_file
        if not self.output_root_dir.is_absolute():
            updates["output_root_dir"] = base_dir / self.output_root_dir
        return self.model_copy(update=updates)


# =============================================================================
# Configuration Loading
# =============================================================================

def find_config(directory: Path) -> Path:
    """
    Locate the config file inside a project directory.

    Raises:
        ConfigNotFoundError: If none of CONFIG_FILENAMES exists
    """
    directory = Path(directory)
    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(directory)


def load_config(path: Path) -> Settings:
    """
    Load configuration from a config file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. Config file
        3. Default values

    Args:
        path: Project directory, or the config file itself

    Returns:
        Settings: Loaded configuration with resolved paths

    Raises:
        ConfigNotFoundError: If no config file exists
        ConfigParseError: If the file is unreadable or invalid
    """
    path = Path(path)
    config_path = path if path.is_file() else find_config(path)

    logger.info(f"Loading config from: {config_path}")
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigParseError(f"Failed to read '{config_path.name}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Failed to parse '{config_path.name}': {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigParseError(
            f"Failed to parse '{config_path.name}': top level must be a mapping"
        )

    _apply_env_overrides(config_data)

    try:
        settings = Settings.model_validate(config_data)
    except ValidationError as e:
        raise ConfigParseError(f"Failed to parse '{config_path.name}': {e}") from e

    return settings.resolve_paths(config_path.parent)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    if env_video := os.environ.get("V2DF_VIDEO_FILE"):
        config_data["video_file"] = env_video
    if env_root := os.environ.get("V2DF_OUTPUT_ROOT"):
        config_data["output_root_dir"] = env_root
    if env_workers := os.environ.get("V2DF_WORKERS"):
        config_data["workers"] = env_workers

    # Logging settings
    if env_log := os.environ.get("V2DF_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_format := os.environ.get("V2DF_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_format


def default_config_text() -> str:
    """YAML text of a default project config."""
    data = Settings().model_dump(mode="json", exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False)


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
