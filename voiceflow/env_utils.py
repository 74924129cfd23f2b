import logging
import os
from pathlib import Path

from dotenv import dotenv_values

_ENV_PATH = Path(".env").resolve()  # absolute path = no cwd surprises
_ENV_EXAMPLE_PATH = Path(".env.example").resolve()
# Some environments cannot commit dotfiles; support a visible fallback as well
_ENV_ALT_EXAMPLE_PATH = Path("env.example").resolve()

_logger = logging.getLogger(__name__)


def _apply(path: Path) -> int:
    """Copy keys from *path* into ``os.environ`` without overriding; return count."""
    if not path.exists():
        return 0
    filled = 0
    for k, v in (dotenv_values(path) or {}).items():
        if k and v is not None and k not in os.environ:
            os.environ[str(k)] = str(v)
            filled += 1
    return filled


def load_env() -> None:
    """Load environment variables from dotenv files.

    Precedence (highest → lowest):
    - the process environment (monkeypatches, shell exports)
    - .env
    - .env.example and env.example

    No file ever overrides a variable that is already set. Parsing is
    handled by python-dotenv; supports quoted values and comments.
    """
    applied_env = _apply(_ENV_PATH)
    filled_example = _apply(_ENV_EXAMPLE_PATH)
    filled_alt = _apply(_ENV_ALT_EXAMPLE_PATH)
    if applied_env or filled_example or filled_alt:
        _logger.info(
            "env_loader: applied .env=%d, filled example=%d, alt=%d",
            applied_env,
            filled_example,
            filled_alt,
        )
