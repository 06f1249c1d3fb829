"""Base model for all request and response models.

This module provides a base Pydantic model with common configuration
shared by the workday report models.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Population by field name or by wire alias (camelCase)
    - Rejection of unknown fields

    Example:
        >>> class Driver(BaseDataModel):
        ...     name: str
        >>> Driver(name="Alice").model_dump()
        {'name': 'Alice'}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like date and bytes
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # RPC payloads use camelCase aliases, Python callers use field names
        populate_by_name=True,
        extra="forbid",
        frozen=False,
    )
