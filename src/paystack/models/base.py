"""
Shared machinery for request and response models.

Response models are pydantic models decoded from API payloads. Unknown keys
are ignored and null values are dropped before validation, so when a field is
sent under more than one name the first non-null one wins.
"""

from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError

T = TypeVar('T', bound=BaseModel)

class ResponseModel(BaseModel):
    """Base for entities decoded from API responses"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

class RequestModel(BaseModel):
    """Base for request bodies; built once and never changed"""
    model_config = ConfigDict(frozen=True)

    def to_json(self) -> Dict[str, Any]:
        """JSON body with unset fields left out"""
        return self.model_dump(mode="json", exclude_none=True)

def describe_errors(error: PydanticValidationError) -> str:
    """One-line description of the first validation error"""
    first = error.errors(include_url=False)[0]
    if first["type"] == "json_invalid":
        return f"Response is not valid JSON: {first['msg']}"
    location = ".".join(str(part) for part in first["loc"]) or "body"
    if first["type"] == "missing":
        return f"missing field `{location}`"
    return f"invalid `{location}`: {first['msg']}"

class RequestBuilder(Generic[T]):
    """
    Accumulates request fields and produces the request model.

    Every field of ``model`` gets a chainable setter of the same name.
    ``build`` fails if a required field was never set.
    """

    model: Type[T]

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], "RequestBuilder[T]"]:
        if name.startswith("_") or name not in self._field_names():
            raise AttributeError(f"{type(self).__name__} has no field `{name}`")

        def setter(value: Any) -> "RequestBuilder[T]":
            self._values[name] = value
            return self

        return setter

    @classmethod
    def _field_names(cls) -> List[str]:
        return list(cls.model.model_fields)

    def build(self) -> T:
        missing = [
            name for name, info in self.model.model_fields.items()
            if info.is_required() and self._values.get(name) is None
        ]
        if missing:
            raise ValidationError(
                f"`{missing[0]}` must be initialized",
                details={"missing": missing}
            )
        try:
            return self.model(**self._values)
        except PydanticValidationError as e:
            raise ValidationError(
                describe_errors(e),
                details={"errors": e.errors(include_url=False)}
            ) from e
