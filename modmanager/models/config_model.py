# modmanager/models/config_model.py
from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AppConfig:
    """Holds the application's persisted configuration state. Immutable."""

    # --- Per game mode paths, keyed by mode id ---
    installation_paths: dict[str, str] = field(default_factory=dict)
    executable_paths: dict[str, str] = field(default_factory=dict)

    # --- Last Session State ---
    last_active_mode_id: str | None = None
