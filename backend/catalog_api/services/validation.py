"""
Catalog API — Document Validation
==================================

What:  Checks a document against its resource schema and reports the
       outcome as a value instead of raising.
How:   Runs Pydantic validation and folds any errors into FieldError
       entries. The document store decides what a failure means (it raises
       DocumentValidationError); callers that only want to inspect a
       payload can use the result directly.

Message format:
    "<Model> validation failed: <path>: <reason>, <path>: <reason>"
    e.g. "Product validation failed: price: Input should be greater than or equal to 0"
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import ValidationError as PydanticValidationError

from catalog_api.schemas.common import DocumentSchema

# Same wording Pydantic uses for declared float fields
NON_FINITE_REASON = "Input should be a finite number"


@dataclass(frozen=True)
class FieldError:
    """One rejected field: dotted camelCase path plus the reason."""
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass
class ValidationResult:
    """
    Outcome of validating one document.

    Exactly one of `document` (success) or `errors` (failure) is populated.
    """
    model_name: str
    document: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        if self.ok:
            return ""
        reasons = ", ".join(str(error) for error in self.errors)
        return f"{self.model_name} validation failed: {reasons}"


def _field_errors(exc: PydanticValidationError) -> List[FieldError]:
    errors = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "document"
        errors.append(FieldError(path=path, reason=error["msg"]))
    return errors


def _non_finite_errors(value: Any, path: str) -> List[FieldError]:
    """Find NaN/Infinity inside keys the schema keeps without declaring."""
    if isinstance(value, float) and not math.isfinite(value):
        return [FieldError(path=path, reason=NON_FINITE_REASON)]
    if isinstance(value, dict):
        return [
            error
            for key, item in value.items()
            for error in _non_finite_errors(item, f"{path}.{key}")
        ]
    if isinstance(value, list):
        return [
            error
            for index, item in enumerate(value)
            for error in _non_finite_errors(item, f"{path}.{index}")
        ]
    return []


def validate_document(
    schema: Type[DocumentSchema],
    model_name: str,
    fields: Mapping[str, Any],
) -> ValidationResult:
    """
    Validate `fields` against `schema`.

    Returns:
        ValidationResult carrying the JSON-ready document (schema defaults
        applied, camelCase keys) or the list of field errors.
    """
    try:
        instance = schema.model_validate(dict(fields))
    except PydanticValidationError as exc:
        return ValidationResult(model_name=model_name, errors=_field_errors(exc))

    extra_errors = [
        error
        for key, value in (instance.model_extra or {}).items()
        for error in _non_finite_errors(value, key)
    ]
    if extra_errors:
        return ValidationResult(model_name=model_name, errors=extra_errors)
    return ValidationResult(model_name=model_name, document=instance.to_document())
