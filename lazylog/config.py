"""Persistent JSON config helpers.

Stores the preferred skin, the current cluster context, and the directory log
dumps are written to. All access is defensive: malformed or missing config
falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "lazylog"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_DUMP_DIR = Path(user_data_dir(APP_NAME, appauthor=False)) / "dumps"
DEFAULT_CLUSTER = "local"


@dataclass
class AppConfig:
    """Resolved settings handed to the application context."""

    current_cluster: str = DEFAULT_CLUSTER
    dump_dir: Path = DEFAULT_DUMP_DIR
    skin: str | None = None
    no_color: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config dir never breaks the UI.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_str(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_skin_name() -> str | None:
    """Load persisted skin name, returning ``None`` when unset/invalid."""
    return _load_str("skin")


def save_skin_name(skin_name: str) -> None:
    """Persist selected skin name."""
    stripped = str(skin_name).strip()
    if not stripped:
        return
    config = load_config()
    config["skin"] = stripped
    save_config(config)


def load_current_cluster() -> str:
    return _load_str("current_cluster") or DEFAULT_CLUSTER


def load_dump_dir() -> Path:
    value = _load_str("dump_dir")
    if value is None:
        return DEFAULT_DUMP_DIR
    return Path(value).expanduser()


def load_app_config(
    *,
    cluster: str | None = None,
    dump_dir: Path | None = None,
    skin: str | None = None,
    no_color: bool = False,
) -> AppConfig:
    """Combine persisted settings with explicit overrides (overrides win)."""
    return AppConfig(
        current_cluster=cluster or load_current_cluster(),
        dump_dir=dump_dir if dump_dir is not None else load_dump_dir(),
        skin=skin or load_skin_name(),
        no_color=no_color,
    )
