"""Base class for parameter type definitions."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, NoReturn

from userparam.messages import DataMessageValue, MessageValue

from ._types import FailureCode
from .converters import ValidationException
from .models import ParamSettingsModel


class TypeDef(ABC):
    """Validation and documentation for one parameter type.

    A :class:`~userparam.validator.core.ParamValidator` calls these methods;
    subclasses implement :meth:`validate` and extend the others as needed.
    For multi-value parameters :meth:`validate` is called once per value.
    """

    def failure(
        self,
        code: FailureCode,
        name: str,
        value: Any,
        settings: ParamSettingsModel,
        options: Mapping[str, Any],
        data: Mapping[str, Any] | None = None,
    ) -> NoReturn:
        """Raise a :class:`ValidationException` for ``code``."""
        failure = DataMessageValue.new_failure(code, [name, value], data)
        raise ValidationException(failure, name, value, settings)

    @abstractmethod
    def validate(
        self, name: str, value: str, settings: ParamSettingsModel, options: Mapping[str, Any]
    ) -> Any:
        """Validate a single raw value and return the typed value.

        Raises:
            ValidationException: If the value is not acceptable.
        """

    def normalize_settings(self, settings: ParamSettingsModel) -> ParamSettingsModel:
        """Fill in defaults and clean up type-specific settings."""
        return settings

    def get_param_info(
        self, name: str, settings: ParamSettingsModel, options: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Machine-readable information about the parameter."""
        return {}

    def get_help_info(
        self, name: str, settings: ParamSettingsModel, options: Mapping[str, Any]
    ) -> dict[str, MessageValue]:
        """Human-readable help about the parameter, as messages keyed by topic."""
        return {}
