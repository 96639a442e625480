# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Error classes and error codes for stockroom.

Every error raised by the inventory model carries an error code, a category,
a severity and a context dictionary so it can be logged in structured form.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from pydantic import ValidationError


class ErrorSeverity(str, Enum):
    """Severity levels for stockroom errors."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory:
    """Named error category with optional parent."""

    def __init__(self, name: str, parent: ErrorCategory | None = None) -> None:
        self.name = name
        self.parent = parent

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ErrorCategory({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCategory):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def is_subcategory_of(self, category: ErrorCategory) -> bool:
        """Check if this category is the given category or one of its children."""
        current: ErrorCategory | None = self
        while current:
            if current == category:
                return True
            current = current.parent
        return False

    @classmethod
    def get_or_create(
        cls, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Get a registered category or register a new one."""
        return registry.get_category(name, parent)


class ErrorCode:
    """Error code bound to a category."""

    def __init__(self, code: str, category: ErrorCategory) -> None:
        self.code = code
        self.category = category

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def get_or_create(cls, code: str, category: ErrorCategory) -> ErrorCode:
        """Get a registered error code or register a new one."""
        return registry.get_code(code, category)

    @classmethod
    def get_by_code(cls, code: str) -> ErrorCode | None:
        """Look up a registered error code without creating it."""
        return registry.lookup_code(code)


class ErrorRegistry:
    """Process-wide registry interning error categories and codes."""

    def __init__(self) -> None:
        self._categories: dict[str, ErrorCategory] = {}
        self._codes: dict[str, ErrorCode] = {}

    def get_category(
        self, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        if name not in self._categories:
            self._categories[name] = ErrorCategory(name, parent)
        return self._categories[name]

    def get_code(self, code: str, category: ErrorCategory) -> ErrorCode:
        if code not in self._codes:
            self._codes[code] = ErrorCode(code, self.get_category(category.name))
        return self._codes[code]

    def lookup_code(self, code: str) -> ErrorCode | None:
        return self._codes.get(code)

    def get_all_categories(self) -> list[ErrorCategory]:
        return list(self._categories.values())

    def get_all_codes(self) -> list[ErrorCode]:
        return list(self._codes.values())


registry = ErrorRegistry()

DOMAIN: Final = ErrorCategory.get_or_create("DOMAIN")
VALIDATION: Final = ErrorCategory.get_or_create("VALIDATION", DOMAIN)
CONFIG: Final = ErrorCategory.get_or_create("CONFIG")

INVALID_ARGUMENT: Final = ErrorCode.get_or_create("INVALID_ARGUMENT", VALIDATION)
UNSUPPORTED_CAPABILITY: Final = ErrorCode.get_or_create(
    "UNSUPPORTED_CAPABILITY", DOMAIN
)
CONFIG_ENVIRONMENT_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_ENVIRONMENT_ERROR", CONFIG
)


class StockroomError(Exception):
    """
    Base error class for stockroom errors.
    Should only be subclassed, not instantiated directly.
    """

    message: str
    code: ErrorCode
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> StockroomError:
        if cls is StockroomError:
            raise TypeError(
                "Do not instantiate StockroomError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new error.

        Args:
            message: Human-readable error message
            code: ErrorCode object containing the code and category
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Merged into the context
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> StockroomError:
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.value,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


class InvalidArgumentError(StockroomError, ValueError):
    """Raised when an argument or field value violates the inventory rules."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        code: ErrorCode = INVALID_ARGUMENT,
        **context: Any,
    ) -> None:
        if field:
            context["field"] = field
        super().__init__(message, code=code, context=context)

    @classmethod
    def from_validation_error(
        cls, exc: ValidationError, model: str | None = None
    ) -> InvalidArgumentError:
        """Translate a pydantic ValidationError raised while building a model."""
        errors = exc.errors(include_url=False)
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        # Custom validators raise InvalidArgumentError; keep their message as-is
        original = first.get("ctx", {}).get("error")
        if isinstance(original, InvalidArgumentError):
            message = original.message
            field = original.context.get("field", field)
        else:
            message = first.get("msg", "invalid value")
            if field:
                message = f"{field}: {message}"
        context: dict[str, Any] = {"error_count": len(errors)}
        if model:
            context["model"] = model
        return cls(message, field=field, **context)


class UnsupportedCapabilityError(StockroomError, TypeError):
    """Raised when an item is asked to do something its variant cannot do."""

    def __init__(self, message: str, capability: str, **context: Any) -> None:
        context["capability"] = capability
        super().__init__(message, code=UNSUPPORTED_CAPABILITY, context=context)


class ConfigError(StockroomError):
    """Raised when settings cannot be interpreted."""


__all__ = [
    "CONFIG",
    "CONFIG_ENVIRONMENT_ERROR",
    "DOMAIN",
    "INVALID_ARGUMENT",
    "UNSUPPORTED_CAPABILITY",
    "VALIDATION",
    "ConfigError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorRegistry",
    "ErrorSeverity",
    "InvalidArgumentError",
    "StockroomError",
    "UnsupportedCapabilityError",
    "registry",
]
