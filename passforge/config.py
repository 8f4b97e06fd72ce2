"""Runtime configuration for PassForge.

Values come from environment variables, falling back to defaults:

    PASSFORGE_HISTORY_FILE  -- path of the JSON history file
    PASSFORGE_HISTORY_SIZE  -- number of passwords kept (default 10)
    PASSFORGE_LOG_LEVEL     -- logging level name (default WARNING)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_HISTORY_SIZE = 10
DEFAULT_LOG_LEVEL = "WARNING"


def default_history_path() -> Path:
    """Return the OS-specific, user-local location of the history file."""
    if os.name == "nt":
        base = os.getenv("APPDATA")
        base_path = Path(base) if base else Path.home() / "AppData" / "Roaming"
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else Path.home() / ".local" / "share"
    return base_path / "passforge" / "history.json"


@dataclass
class PassforgeConfig:
    history_path: Path = field(default_factory=default_history_path)

    # Most-recent passwords kept in history; older ones are evicted.
    history_capacity: int = DEFAULT_HISTORY_SIZE

    log_level: str = DEFAULT_LOG_LEVEL


def load_config(env: Mapping[str, str] | None = None) -> PassforgeConfig:
    """Build a :class:`PassforgeConfig` from *env* (``os.environ`` by default).

    Raises :class:`ValueError` when ``PASSFORGE_HISTORY_SIZE`` is not a
    positive integer.
    """
    env = os.environ if env is None else env
    cfg = PassforgeConfig()

    path = env.get("PASSFORGE_HISTORY_FILE")
    if path:
        cfg.history_path = Path(path).expanduser()

    size = env.get("PASSFORGE_HISTORY_SIZE")
    if size:
        try:
            cfg.history_capacity = int(size)
        except ValueError:
            raise ValueError(f"PASSFORGE_HISTORY_SIZE must be an integer, got {size!r}") from None
        if cfg.history_capacity < 1:
            raise ValueError(f"PASSFORGE_HISTORY_SIZE must be positive, got {size!r}")

    level = env.get("PASSFORGE_LOG_LEVEL")
    if level:
        cfg.log_level = level.upper()

    return cfg
