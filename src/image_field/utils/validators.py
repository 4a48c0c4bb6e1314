"""Configuration validation utilities."""

from typing import Any

from pydantic import ValidationError


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Reduce pydantic validation errors to ``{"field", "message"}`` pairs.

    Removes internal fields like:
    - url
    - ctx
    - input (may hold credentials from client options)
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "config"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This option is required"
        elif "extra inputs" in msg_lower:
            msg = "Unknown option"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def describe_validation_error(exc: ValidationError) -> str:
    """One-line summary of a pydantic error, e.g. ``multi: Input should be a valid boolean``."""
    return "; ".join(
        f"{item['field']}: {item['message']}"
        for item in sanitize_validation_errors(exc.errors())
    )
