"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

TOOL_NAME = "guide-markdown"

# Files checked in each directory, with the tables each may hold, in order.
CONFIG_SOURCES: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    ("pyproject.toml", (("tool", TOOL_NAME),)),
    (f".{TOOL_NAME}.toml", ((TOOL_NAME,), ("tool", TOOL_NAME))),
)


@dataclass
class GuideConfig:
    """Configuration for rendering guides.

    Attributes:
        site_title: Suffix of every page title, and the whole title when the
            header has no title heading.
        index_heading: Text of the chapters index heading.
        index_icon: Image source shown next to the index heading. Empty to omit
            the image.
        index_container_id: Id of the element wrapping the index.
        index_list_class: Class applied to the top-level ordered list of the
            index.
        separator_min_length: Minimum number of hyphens in the line that
            separates the header block from the body.
        max_file_size: Largest guide, in bytes, the CLI will read.
        max_headings: Maximum number of section headings in one document.

    Examples:
        GuideConfig(site_title="Ruby on Rails Guides", index_heading="Contents")
    """

    # Page chrome
    site_title: str = "Guides"
    index_heading: str = "Chapters"
    index_icon: str = "images/chapters_icon.gif"
    index_container_id: str = "subCol"
    index_list_class: str = "chapters"

    # Document structure
    separator_min_length: int = 40

    # Limits
    max_file_size: int = 10 * 1024 * 1024
    max_headings: int = 10_000


# Text settings that may not be blank.
REQUIRED_TEXT = ("site_title", "index_heading", "index_container_id", "index_list_class")

# Integer settings and the smallest value each accepts.
INTEGER_MINIMUMS = {
    "separator_min_length": 3,
    "max_file_size": 1,
    "max_headings": 1,
}


class ConfigError(ValueError):
    """Raised for a malformed settings table or an invalid setting."""


def load_config(search_path: Path) -> GuideConfig:
    """Find the settings that apply to guides under `search_path`.

    Directories are searched from `search_path` upwards. In each one the
    ``[tool.guide-markdown]`` table of `pyproject.toml` wins over the
    ``[guide-markdown]`` (or ``[tool.guide-markdown]``) table of
    `.guide-markdown.toml`. The first table found is used on its own, even when
    empty; unreadable or malformed TOML files are passed over.

    Raises:
        ConfigError: If the table found is not a table or names an unknown
            setting.

    Examples:
        load_config(Path("guides/source")).site_title
    """
    directory = search_path.resolve()
    for candidate in (directory, *directory.parents):
        for filename, tables in CONFIG_SOURCES:
            config = _read_settings(candidate / filename, tables)
            if config is not None:
                return config
    return GuideConfig()


def _read_settings(config_file: Path, tables: tuple[tuple[str, ...], ...]) -> GuideConfig | None:
    try:
        with open(config_file, "rb") as stream:
            document = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for keys in tables:
        table = document
        for key in keys:
            if not isinstance(table, dict) or key not in table:
                break
            table = table[key]
        else:
            return _settings_from_table(table, config_file, ".".join(keys))
    return None


def _settings_from_table(table: object, config_file: Path, name: str) -> GuideConfig:
    if not isinstance(table, dict):
        raise ConfigError(f"Invalid `[{name}]` settings in {config_file}")
    try:
        return GuideConfig(**table)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{name}]` settings in {config_file}") from error


def validate_config(config: GuideConfig) -> None:
    """Check every setting of `config`.

    Raises:
        ConfigError: On a blank text setting, a non-string icon, a non-integer
            limit, or a limit below its minimum.
    """
    for name in REQUIRED_TEXT:
        value = getattr(config, name)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"`{name}` must not be empty")

    if not isinstance(config.index_icon, str):
        raise ConfigError("`index_icon` must be a string")

    for name, minimum in INTEGER_MINIMUMS.items():
        value = getattr(config, name)
        # bool is an int subclass but never a sensible limit.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{name}` must be an integer")
        if value < minimum:
            raise ConfigError(f"`{name}` must be at least {minimum}")


def apply_overrides(config: GuideConfig, **overrides: object) -> GuideConfig:
    """Return `config` with the non-None `overrides` applied.

    `config` itself is returned when every override is None.

    Examples:
        apply_overrides(config, site_title="Handbook", index_heading=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    return replace(config, **changes) if changes else config


def build_config(search_path: Path, **overrides: object) -> GuideConfig:
    """Settings for a CLI run: file settings, then overrides, then validation."""
    config = apply_overrides(load_config(search_path), **overrides)
    validate_config(config)
    return config
