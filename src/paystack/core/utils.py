from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple, Union
from .exceptions import ValidationError

QueryParams = List[Tuple[str, str]]

def validate_string(value: Optional[str]) -> str:
    """Validate and clean a string value."""
    if not value or not isinstance(value, str) or not value.strip():
        raise ValidationError("String value is required")
    return value.strip()

def validate_path_segment(value: Union[str, int, None]) -> str:
    """Validate an id or code that is appended to a resource URL."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid path segment: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValidationError(f"Identifier must not be negative: {value}")
        return str(value)
    segment = validate_string(value)
    if "/" in segment or "?" in segment or "#" in segment:
        raise ValidationError(f"Invalid path segment: {segment!r}")
    return segment

def query_value(value: Any) -> str:
    """Render a single query parameter value."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

def build_query(params: Sequence[Tuple[str, Any]]) -> QueryParams:
    """
    Assemble query parameters, keeping their order.

    Parameters whose value is None are left out entirely.
    """
    return [(name, query_value(value)) for name, value in params if value is not None]
