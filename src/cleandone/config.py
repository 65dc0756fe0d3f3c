"""Configuration management for cleandone."""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .core.insertion import InsertPosition
from .errors import ConfigError

logger = logging.getLogger(__name__)

CLEANDONE_HOME = Path(os.environ.get("CLEANDONE_HOME", Path.home() / ".cleandone"))
CONFIG_FILE = CLEANDONE_HOME / "config" / "cleandone.conf"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Config:
    """cleandone configuration."""

    days_threshold: int = 5  # Keep items completed within the last N days
    todo_note_filename: str = "TODO.md"
    insert_position: InsertPosition = InsertPosition.PREPEND
    auto_move_checked: bool = False
    vault_dir: str = ""

    @property
    def vault_path(self) -> Path:
        """Vault directory, defaulting to the current directory."""
        if self.vault_dir:
            return Path(self.vault_dir).expanduser()
        return Path.cwd()

    def snapshot(self) -> "Config":
        """Copy taken once per operation so a run never sees settings change."""
        return replace(self)


def _parse_value(value: str) -> str:
    """Strip quotes or inline comments from a raw config value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_days(value: str) -> int:
    try:
        days = int(value.strip())
    except ValueError:
        raise ConfigError(f"days_threshold must be a whole number, got {value!r}")
    if days < 0:
        raise ConfigError(f"days_threshold must not be negative, got {days}")
    return days


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigError(f"Expected true/false, got {value!r}")


def _parse_position(value: str) -> InsertPosition:
    try:
        return InsertPosition(value.strip().lower())
    except ValueError:
        choices = ", ".join(p.value for p in InsertPosition)
        raise ConfigError(f"insert_position must be one of {choices}, got {value!r}")


def _parse_text(key: str, value: str) -> str:
    value = value.strip()
    if "\"" in value and "'" in value:
        raise ConfigError(f"{key} cannot contain both kinds of quote")
    return value


def _quote(value: str) -> str:
    """Quote a value so _parse_value reads it back unchanged."""
    if "\"" in value:
        return f"'{value}'"
    return f'"{value}"'


def set_option(config: Config, key: str, value: str) -> Config:
    """Return a new Config with one option changed. Raises ConfigError."""
    key = key.strip().lower()
    match key:
        case "days_threshold":
            return replace(config, days_threshold=_parse_days(value))
        case "todo_note_filename":
            name = _parse_text(key, value)
            if not name:
                raise ConfigError("todo_note_filename must not be empty")
            return replace(config, todo_note_filename=name)
        case "insert_position":
            return replace(config, insert_position=_parse_position(value))
        case "auto_move_checked":
            return replace(config, auto_move_checked=_parse_bool(value))
        case "vault_dir":
            return replace(config, vault_dir=_parse_text(key, value))
        case _:
            raise ConfigError(f"Unknown option: {key}")


def config_items(config: Config) -> list[tuple[str, str]]:
    """Options as (key, display value) pairs, in declaration order."""
    items = []
    for f in fields(config):
        value = getattr(config, f.name)
        if isinstance(value, InsertPosition):
            value = value.value
        elif isinstance(value, bool):
            value = "true" if value else "false"
        items.append((f.name, str(value)))
    return items


def load_config(path: Path | None = None) -> Config:
    """Load configuration from cleandone.conf file."""
    path = path or CONFIG_FILE
    config = Config()

    if not path.exists():
        return config

    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        value = _parse_value(value.strip())

        try:
            config = set_option(config, key, value)
        except ConfigError as e:
            # Bad input keeps the previous value
            logger.warning(f"Ignoring {key.strip()} in {path}: {e}")

    return config


def save_config(config: Config, path: Path | None = None) -> Path:
    """Write configuration to cleandone.conf file."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [f"{key.upper()}={_quote(value)}" for key, value in config_items(config)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.debug(f"Saved configuration to {path}")
    return path
