"""Configuration for the Domolect REPL."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_PROMPT = ">>> "
DEFAULT_EXIT_COMMAND = "exit"
WELCOME_BANNER = "Welcome to the Domolect 2.0 REPL. Type '{exit_command}' to quit."

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _stderr_print(f"Unsupported {name}={raw!r}, falling back to {default!r}")
    return default


@dataclass
class AppConfig:
    """Typed REPL configuration."""

    prompt: str = DEFAULT_PROMPT
    exit_command: str = DEFAULT_EXIT_COMMAND
    vocabulary_file: str = ""
    debug: bool = False

    @property
    def banner(self) -> str:
        return WELCOME_BANNER.format(exit_command=self.exit_command)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        exit_command = os.getenv("DOMOLECT_EXIT_COMMAND", DEFAULT_EXIT_COMMAND).strip()
        if not exit_command:
            _stderr_print(
                f"Empty DOMOLECT_EXIT_COMMAND, falling back to {DEFAULT_EXIT_COMMAND!r}"
            )
            exit_command = DEFAULT_EXIT_COMMAND
        return cls(
            prompt=os.getenv("DOMOLECT_PROMPT", DEFAULT_PROMPT),
            exit_command=exit_command,
            vocabulary_file=os.getenv("DOMOLECT_VOCABULARY_FILE", "").strip(),
            debug=_env_bool("DOMOLECT_DEBUG", False),
        )
