"""userparam validator - schema-driven validation of raw request parameters.

This module turns raw request values (strings, or lists of strings) into
typed values using per-parameter settings and registered type definitions:
- Settings parsing and normalization
- Multi-value splitting, limits and duplicate removal
- The ``user`` type, resolving names, IPs, ranges, interwiki names and ids
- Machine-readable parameter info and localizable help messages

## Key Components

### Core Classes
- `ParamValidator`: Dispatches parameters to type definitions
- `TypeDef`: Base class for type definitions
- `UserDef`: The ``user`` type definition
- `ValidationException`: Structured failure with a code like ``baduser``

### Schema Types
- `ParamSettingsModel`: Settings of one parameter
- `UserSubtype`: Kinds of user reference
- `UserClassification`: Result of classifying a raw value

## Quick Example

```python
from userparam.services import create_param_validator

validator = create_param_validator()

settings = validator.normalize_settings(
    {"type": "user", "allowedUserTypes": ["name", "ip"]}
)
validator.get_value("target", "127.0.0.1", settings)
# Returns: "127.0.0.1"

validator.get_value("target", "192.0.2.0/24", settings)
# Raises ValidationException with code "baduser" (ranges not allowed)
```
"""

from ._types import (
    DEFAULT_USER_SUBTYPES,
    FailureCode,
    ParamSettingsModel,
    UserClassification,
    UserSubtype,
)
from .converters import (
    TypeConverter,
    ValidationError,
    ValidationException,
)
from .core import ParamValidator
from .loaders import load_param_schema, load_param_schema_file
from .typedef import TypeDef
from .typedefs import UserDef

__all__ = [
    # Types
    "DEFAULT_USER_SUBTYPES",
    "FailureCode",
    "ParamSettingsModel",
    "UserClassification",
    "UserSubtype",
    # Converter classes
    "TypeConverter",
    "ValidationError",
    "ValidationException",
    # Core validator
    "ParamValidator",
    "TypeDef",
    "UserDef",
    # Schema loaders
    "load_param_schema",
    "load_param_schema_file",
]
