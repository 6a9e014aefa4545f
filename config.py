"""
config.py — Application Settings
=================================
Class-level settings, overridable through BST_VISUALIZER_* environment
variables.  The Flask app additionally loads any BST_VISUALIZER_* keys via
`app.config.from_prefixed_env`.
"""

import os
import secrets


def _env(name: str, default: str) -> str:
    return os.environ.get(f"BST_VISUALIZER_{name}", default)


class AppConfig:
    # input range the UI accepts (the engine itself only rejects duplicates)
    VALUE_MIN: int = 1
    VALUE_MAX: int = 99

    # playback
    BASE_INTERVAL_MS: int   = 800     # one frame per 800 ms at 1x
    SPEED_MIN:        float = 0.25
    SPEED_MAX:        float = 2.0
    DEFAULT_SPEED:    float = 1.0

    # server
    HOST:       str  = _env("HOST", "127.0.0.1")
    PORT:       str  = _env("PORT", "5000")
    DEBUG:      bool = _env("DEBUG", "0").lower() in ("1", "true", "yes")
    SECRET_KEY: str  = _env("SECRET_KEY", "") or secrets.token_hex(32)

    # logging
    LOG_LEVEL:  str  = _env("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str  = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


CONFIG = AppConfig()
