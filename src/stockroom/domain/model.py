# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Base pydantic model for stockroom domain objects.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from stockroom.errors import InvalidArgumentError


class DomainModel(BaseModel):
    """Base class for mutable domain objects.

    Construction failures surface as InvalidArgumentError instead of
    pydantic's ValidationError, so callers deal with a single error kind.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidArgumentError.from_validation_error(
                exc, model=type(self).__name__
            ) from exc
