from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class SchemaError(Exception):
    """A boat constants document, or the schema itself, could not be used.

    `location` is the slash-joined path of the offending node inside the
    document ("<root>" for the whole document).
    """

    def __init__(
        self,
        message: str,
        schema_path: Optional[str | Path] = None,
        schema_name: Optional[str] = None,
        location: Optional[str] = None,
        validation_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.schema_path = str(schema_path) if schema_path else None
        self.schema_name = schema_name
        self.location = location
        self.validation_error = validation_error

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.schema_name:
            parts.append(f"Schema: {self.schema_name}")
        if self.location:
            parts.append(f"At: {self.location}")
        if self.schema_path:
            parts.append(f"Schema file: {self.schema_path}")
        return " | ".join(parts)


class ConfigError(Exception):
    """A boat constant or run setting is out of range, or a config file is unreadable."""

    def __init__(
        self,
        message: str,
        config_path: Optional[str | Path] = None,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
    ):
        super().__init__(message)
        self.config_path = str(config_path) if config_path else None
        self.field_name = field_name
        self.field_value = field_value

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def with_path(self, config_path: str | Path) -> "ConfigError":
        """Copy of this error tagged with the file it came from."""
        return ConfigError(self.message, config_path=config_path, field_name=self.field_name, field_value=self.field_value)

    def __str__(self) -> str:
        parts = [self.message]
        if self.field_name:
            field = self.field_name if self.field_value is None else f"{self.field_name}={self.field_value!r}"
            parts.append(f"Field: {field}")
        if self.config_path:
            parts.append(f"File: {self.config_path}")
        return " | ".join(parts)


class NumericalInstability(Exception):
    """Raised by batch helpers when a non-finite value reaches them."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        value: Optional[float] = None,
        index: Optional[int] = None,
    ):
        super().__init__(message)
        self.component = component
        self.value = value
        self.index = index

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.component:
            parts.append(f"Component: {self.component}")
        if self.value is not None:
            parts.append(f"Value: {self.value}")
        if self.index is not None:
            parts.append(f"Index: {self.index}")
        return " | ".join(parts)
