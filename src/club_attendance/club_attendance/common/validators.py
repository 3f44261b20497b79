from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def optional_text(value: Any) -> Optional[str]:
    """Normalize an optional field: ``None``, empty and blank all mean absent."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_all(fields: dict[str, Any], message: str) -> dict[str, str]:
    """Strip every field, raising one ValidationError if any of them is empty."""
    cleaned = {name: optional_text(value) for name, value in fields.items()}
    if any(value is None for value in cleaned.values()):
        raise ValidationError(message)
    return cleaned  # type: ignore[return-value]


def require_iso_date(value: str, field_name: str) -> str:
    """Return ``value`` as a zero-padded YYYY-MM-DD string."""
    try:
        return parse_iso_date(value).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid YYYY-MM-DD date") from None
