"""Exceptions and raw value conversion for userparam validator."""

from collections.abc import Mapping
from typing import Any

from userparam.messages import DataMessageValue, MessageFormatter

MULTI_VALUE_SEPARATOR = "|"
MULTI_VALUE_UNIT_SEPARATOR = "\x1f"


class ValidationError(ValueError):
    """Custom exception for validation errors."""

    pass


class ValidationException(ValidationError):
    """A parameter value failed validation.

    Attributes:
        failure: Message describing the failure, with its code and data.
        param_name: Name of the parameter.
        param_value: The raw value that failed.
        settings: Settings of the parameter.

    Example:
        >>> try:
        ...     validator.get_value("user", "Bad|Name", settings)
        ... except ValidationException as e:
        ...     print(e.code)
        baduser
    """

    def __init__(
        self,
        failure: DataMessageValue,
        param_name: str,
        param_value: Any,
        settings: Any = None,
    ):
        self.failure = failure
        self.param_name = param_name
        self.param_value = param_value
        self.settings = settings
        super().__init__(MessageFormatter().format(failure))

    @property
    def code(self) -> str:
        return self.failure.code

    @property
    def data(self) -> dict[str, Any] | None:
        return self.failure.data


class TypeConverter:
    """Utility class for turning raw request values into value lists."""

    @staticmethod
    def explode_multi_value(value: str, limit: int) -> list[str]:
        """Split a multi-value string.

        Values are separated by ``|``, or by U+001F when the string starts
        with it (so values may contain ``|``). At most ``limit`` parts are
        returned; the last part holds the unsplit remainder.
        """
        if value == "" or value == MULTI_VALUE_UNIT_SEPARATOR:
            return []
        if value.startswith(MULTI_VALUE_UNIT_SEPARATOR):
            sep = MULTI_VALUE_UNIT_SEPARATOR
            value = value[1:]
        else:
            sep = MULTI_VALUE_SEPARATOR
        return value.split(sep, limit - 1)

    @staticmethod
    def unique(values: list[Any]) -> list[Any]:
        """Drop repeated values, keeping the first occurrence of each."""
        seen: list[Any] = []
        for v in values:
            if v not in seen:
                seen.append(v)
        return seen

    @staticmethod
    def serialize_for_output(obj: Any) -> Any:
        """Serialize validated values for JSON output."""
        if isinstance(obj, Mapping):
            return {k: TypeConverter.serialize_for_output(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [TypeConverter.serialize_for_output(item) for item in obj]
        elif hasattr(obj, "model_dump"):
            return obj.model_dump(mode="json")
        return obj
