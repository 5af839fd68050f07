"""Pydantic base model with built-in process logging.

Every change the verifier makes to a location, and every problem it runs
into while verifying, is recorded on the model's process log so callers can
audit what happened to a record.
"""

from __future__ import annotations

from typing import Any

from abstract_validation_base import ProcessEntry, ProcessLog
from pydantic import BaseModel, ConfigDict, Field

from mappify_address.models.errors import PACKAGE_NAME, MappifyAddressError

__all__ = ["TrackedModel"]


class TrackedModel(BaseModel):
    """Base model with built-in process logging for cleaning and errors.

    All models inheriting from this class automatically get:
    - process_log: ProcessLog field (excluded from serialization)
    - add_error(): Log an error and optionally raise MappifyAddressError
    - add_cleaning_process(): Log a cleaning/transformation operation
    - audit_log(): Export combined entries for analysis

    Example:
        class MyModel(TrackedModel):
            city: str

        model = MyModel(city="RICHMOND")
        model.add_cleaning_process("city", "RICHMOND", "Richmond", "Title-cased suburb")
        print(model.audit_log())
    """

    model_config = ConfigDict(extra="ignore")

    process_log: ProcessLog = Field(default_factory=ProcessLog, exclude=True)

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
        raise_exception: bool = False,
    ) -> None:
        """Log an error and optionally raise an exception.

        Args:
            field: Name of the field with the error.
            message: Error message describing the issue.
            value: The problematic value (optional).
            context: Additional context dict (optional).
            raise_exception: If True, raise MappifyAddressError after logging.
        """
        entry = ProcessEntry(
            entry_type="error",
            field=field,
            message=message,
            original_value=str(value) if value is not None else None,
            context=context or {},
        )
        self.process_log.errors.append(entry)

        if raise_exception:
            raise MappifyAddressError(
                "validation_error",
                f"{field}: {message}",
                {"package": PACKAGE_NAME, "field": field, "value": value, **(context or {})},
            )

    def add_cleaning_process(
        self,
        field: str,
        original_value: Any,
        new_value: Any,
        reason: str,
        operation_type: str = "cleaning",
    ) -> None:
        """Log a cleaning/transformation operation.

        Args:
            field: Name of the field that was changed.
            original_value: The value before the change.
            new_value: The value after the change.
            reason: Explanation of why the change was made.
            operation_type: Category of operation (standardization, geocoding, ...).
        """
        entry = ProcessEntry(
            entry_type="cleaning",
            field=field,
            message=reason,
            original_value=str(original_value) if original_value is not None else None,
            new_value=str(new_value) if new_value is not None else None,
            context={"operation_type": operation_type},
        )
        self.process_log.cleaning.append(entry)

    def audit_log(self, source: str | None = None) -> list[dict[str, Any]]:
        """Export combined cleaning and error entries.

        Args:
            source: Optional source identifier to add to each entry.

        Returns:
            List of dicts sorted by timestamp.
        """
        entries: list[dict[str, Any]] = []
        for entry in [*self.process_log.cleaning, *self.process_log.errors]:
            d = entry.model_dump()
            if source:
                d["source"] = source
            entries.append(d)
        return sorted(entries, key=lambda x: str(x.get("timestamp", "")))
