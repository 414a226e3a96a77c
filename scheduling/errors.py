from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fastapi import HTTPException


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_RANGE = "INVALID_RANGE"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    EMPTY_RECURRENCE = "EMPTY_RECURRENCE"


@dataclass(frozen=True)
class ValidationIssue:
    code: ErrorCode
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def codes(self) -> set[ErrorCode]:
        return {i.code for i in self.issues}

    @property
    def status_code(self) -> int:
        # missing references win over shape errors
        return 404 if ErrorCode.NOT_FOUND in self.codes else 422

    def add(self, code: ErrorCode, field_name: str, message: str) -> None:
        self.issues.append(ValidationIssue(code, field_name, message))

    def for_field(self, field_name: str) -> list[ValidationIssue]:
        return [i for i in self.issues if i.field == field_name]

    def as_detail(self, message: str) -> dict[str, Any]:
        return {"message": message, "errors": [i.as_dict() for i in self.issues]}


def reject_if_invalid(result: ValidationResult, message: str) -> None:
    """Raise the HTTP rejection for a failed validation; no-op when the result is ok."""
    if not result.ok:
        raise HTTPException(status_code=result.status_code, detail=result.as_detail(message))


class EmployeeNotFound(LookupError):
    def __init__(self, employee_id: int, org_id: int):
        super().__init__(f"employee {employee_id} not found in organization {org_id}")
        self.employee_id = employee_id
        self.org_id = org_id


class InvalidDateRange(ValueError):
    pass
