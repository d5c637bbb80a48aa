# /src/core/config.py
# Startup gate. Validates the environment once, at import time, and is the
# only place the process is terminated for bad configuration.
import sys
from typing import Mapping, Optional

from src.core.config_validator import EnvValidationError, format_report, validate
from src.core.env_schema import Env
from src.core.logger import get_logger

log = get_logger("StellarStream.Config")

__all__ = ["Env", "env", "load_env"]


def load_env(raw_environment: Optional[Mapping[str, Optional[str]]] = None) -> Env:
    """Return the validated record, or print every problem and exit with status 1."""
    try:
        return validate(raw_environment)
    except EnvValidationError as e:
        # Field names only; values may hold credentials. Logged first so the
        # operator report is the last thing on the terminal.
        log.critical("ENV_VALIDATION_FAILED", fields=[err.field for err in e.errors])
        print(format_report(e.errors), file=sys.stderr)
        sys.exit(1)


env = load_env()
