from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import pydantic
from pydantic import BaseModel

from .contents.models import Checkpoint, Content
from .exceptions import ContentsValidationError

M = TypeVar("M", bound=BaseModel)


@dataclass
class ValidationResult(Generic[M]):
    valid: bool
    model: M | None = None
    errors: list[str] = field(default_factory=list)


def validate(payload: Any, model_type: type[M]) -> ValidationResult[M]:
    """Check that a payload has the shape of the given model, without raising.

    On failure, `errors` has one "<field>: <reason>" entry per missing or invalid field.
    """
    if not isinstance(payload, dict):
        return ValidationResult(
            valid=False,
            errors=[f"expected an object, got {type(payload).__name__}"],
        )
    try:
        model = model_type.model_validate(payload)
    except pydantic.ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")
        return ValidationResult(valid=False, errors=errors)
    return ValidationResult(valid=True, model=model)


def _validate_or_raise(payload: Any, model_type: type[M]) -> M:
    result = validate(payload, model_type)
    if not result.valid:
        raise ContentsValidationError(result.errors)
    assert result.model is not None
    return result.model


def validate_contents_model(payload: Any) -> Content:
    return _validate_or_raise(payload, Content)


def validate_checkpoint_model(payload: Any) -> Checkpoint:
    return _validate_or_raise(payload, Checkpoint)


def validate_checkpoint_list(payload: Any) -> list[Checkpoint]:
    if not isinstance(payload, list):
        raise ContentsValidationError("Invalid Checkpoint list")
    return [validate_checkpoint_model(item) for item in payload]
