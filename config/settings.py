"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

The engine only consults these when the caller leaves something unspecified:
start_up() without a policy uses DEFAULT_SCHEDULING_POLICY, and so on.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "fcfs"
    DEFAULT_CORE_COUNT: int = 1

    # ── Logging ─────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_QUEUE_SNAPSHOTS: bool = False  # log show_queue() at DEBUG after every event

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton, import this everywhere
settings = Settings()
