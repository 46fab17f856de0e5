"""Type definitions for userparam validator.

This module re-exports the Pydantic models from models.py for public API.
"""

from typing import Literal

from .models import (
    DEFAULT_USER_SUBTYPES,
    NO_MATCH,
    ParamSettingsModel,
    UserClassification,
    UserSubtype,
)

# Codes a ValidationException may carry
FailureCode = Literal["baduser", "badvalue", "missingparam", "toomanyvalues"]

__all__ = [
    "DEFAULT_USER_SUBTYPES",
    "NO_MATCH",
    "ParamSettingsModel",
    "UserClassification",
    "UserSubtype",
    "FailureCode",
]
