import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_DIR = Path.home() / ".kubehub"


class ConfigError(Exception):
    """Raised when config.toml holds a value of the wrong type."""


@dataclass(frozen=True)
class KubeHubConfig:
    """In-memory representation of `config.toml`.

    Example config.toml:
      [view]
      # Show a notification after each copy attempt
      copy_notice = true
      # Show the generic installation steps beneath each script
      show_instructions = true
    """

    copy_notice: bool
    show_instructions: bool

    @staticmethod
    def default() -> "KubeHubConfig":
        """Create default config (all view extras enabled)."""
        return KubeHubConfig(copy_notice=True, show_instructions=True)


def load_config(config_dir: Path) -> KubeHubConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Args:
        config_dir: Directory that may contain config.toml

    Returns:
        KubeHubConfig with parsed values, defaults for anything missing

    Raises:
        ConfigError: If the file is not valid TOML or a value has the wrong type
    """
    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return KubeHubConfig.default()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {cfg_path}: {e}") from e

    view = data.get("view", {})
    if not isinstance(view, dict):
        raise ConfigError(f"[view] in {cfg_path} must be a table")

    defaults = KubeHubConfig.default()
    return KubeHubConfig(
        copy_notice=_read_bool(view, "copy_notice", defaults.copy_notice, cfg_path),
        show_instructions=_read_bool(
            view, "show_instructions", defaults.show_instructions, cfg_path
        ),
    )


def _read_bool(table: dict, key: str, default: bool, cfg_path: Path) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"view.{key} in {cfg_path} must be true or false, got {value!r}")
    return value
