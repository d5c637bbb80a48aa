# /src/core/config_validator.py
# Validates the startup environment. Can also be run as a script to check a
# .env file without booting the backend.
from typing import List, Mapping, NamedTuple, Optional

from pydantic import ValidationError

from src.core.env_schema import REQUIRED_MESSAGES, Env, MappingEnv

HEADER = "❌ Missing or invalid environment variables:"
HINT = "💡 Copy backend/.env.example to backend/.env and fill in the values."


class FieldError(NamedTuple):
    field: str
    message: str


class EnvValidationError(ValueError):
    """Raised when one or more environment variables are missing or invalid."""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{e.field}: {e.message}" for e in errors)
        )


def _field_errors(exc: ValidationError) -> List[FieldError]:
    errors = []
    for issue in exc.errors():
        field = str(issue["loc"][0]) if issue["loc"] else "<root>"
        if issue["type"] == "missing":
            message = REQUIRED_MESSAGES.get(field, f"{field} is required")
        else:
            message = issue["msg"]
        errors.append(FieldError(field, message))
    return errors


def validate(raw_environment: Optional[Mapping[str, Optional[str]]] = None) -> Env:
    """Validate every variable and return the record, or raise with all errors.

    ``None`` values count as absent. Without a mapping, the process
    environment (layered over ``.env``) is read.
    """
    try:
        if raw_environment is None:
            return Env()
        present = {k: v for k, v in raw_environment.items() if v is not None}
        return MappingEnv(**present)
    except ValidationError as e:
        raise EnvValidationError(_field_errors(e)) from e


def format_report(errors: List[FieldError]) -> str:
    bullets = "\n".join(f"  ✗ {e.field}: {e.message}" for e in errors)
    return f"\n{HEADER}\n\n{bullets}\n\n{HINT}\n"


if __name__ == "__main__":
    # Importing the config module runs the startup gate, which exits 1 on failure.
    import src.core.config  # noqa: F401
