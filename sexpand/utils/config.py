"""Runtime settings for the ``sexpand`` command.

Values are read from the environment (after loading a ``.env`` file) and may be
overridden by the command's options.
"""

import os
from dataclasses import dataclass

import dotenv

_DOTENV_LOADED = False


def getenv(name: str, default: str | None = None) -> str | None:
    """Read an environment variable, loading ``.env`` on first use."""
    global _DOTENV_LOADED
    if not _DOTENV_LOADED:
        dotenv.load_dotenv()
        _DOTENV_LOADED = True
    return os.getenv(name, default)


def _env_flag(name: str) -> bool:
    return getenv(name, "0") == "1"


@dataclass
class Settings:
    debug: bool = False
    rich_traceback: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            debug=_env_flag("SEXPAND_DEBUG"),
            rich_traceback=_env_flag("SEXPAND_RICH_TRACEBACK"),
        )

    def override(
        self, *, debug: bool | None = None, rich_traceback: bool | None = None
    ):
        """Apply command-line values; ``None`` keeps the environment's value."""
        if debug is not None:
            self.debug = debug
        if rich_traceback is not None:
            self.rich_traceback = rich_traceback


SETTINGS = Settings.from_env()
