"""Core validation logic for userparam validator."""

import logging
from collections.abc import Mapping
from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from userparam.messages import DataMessageValue, MessageValue

from ._types import FailureCode
from .converters import TypeConverter, ValidationError, ValidationException
from .models import ISMULTI_LIMIT1, ISMULTI_LIMIT2, ParamSettingsModel
from .typedef import TypeDef

logger = logging.getLogger(__name__)

SettingsInput = ParamSettingsModel | Mapping[str, Any]


class ParamValidator:
    """Schema-driven validator that dispatches to registered type definitions.

    This class handles what is common to every parameter type:
    - Settings parsing and normalization
    - Missing values, defaults and required parameters
    - Multi-value splitting, limits and duplicate removal
    - Parameter info and help for documentation

    Args:
        type_defs: Type name to type definition mapping.
        ismulti_limit1: Default maximum number of values for multi-value parameters.
        ismulti_limit2: Default maximum for clients allowed high limits.

    Example:
        >>> validator = ParamValidator({"user": user_def})
        >>> settings = validator.normalize_settings({"type": "user", "isMulti": True})
        >>> validator.get_value("users", "Example|127.0.0.1", settings)
        ['Example', '127.0.0.1']
    """

    def __init__(
        self,
        type_defs: Mapping[str, TypeDef] | None = None,
        ismulti_limit1: int = ISMULTI_LIMIT1,
        ismulti_limit2: int = ISMULTI_LIMIT2,
    ):
        self._type_defs: dict[str, TypeDef] = dict(type_defs or {})
        self.ismulti_limit1 = ismulti_limit1
        self.ismulti_limit2 = ismulti_limit2

    def add_type_def(self, name: str, type_def: TypeDef) -> None:
        """Register a type definition.

        Raises:
            ValueError: If the type name is already registered.
        """
        if name in self._type_defs:
            raise ValueError(f"Type '{name}' is already registered")
        self._type_defs[name] = type_def

    def get_type_def(self, name: str) -> TypeDef | None:
        return self._type_defs.get(name)

    @property
    def known_types(self) -> list[str]:
        return sorted(self._type_defs)

    def normalize_settings(self, settings: SettingsInput, name: str = "") -> ParamSettingsModel:
        """Parse and normalize settings for one parameter.

        Args:
            settings: Settings model or a dict using field names or aliases
            name: Parameter name, used in error messages

        Returns:
            Normalized settings

        Raises:
            ValueError: If the settings are malformed or the type is unknown
        """
        if not isinstance(settings, ParamSettingsModel):
            try:
                settings = ParamSettingsModel.model_validate(dict(settings))
            except PydanticValidationError as e:
                raise ValueError(f"Invalid settings for parameter '{name}': {e}") from e

        type_def = self._type_defs.get(settings.type)
        if type_def is None:
            raise ValueError(f"Parameter '{name}' has unknown type '{settings.type}'")

        normalized = type_def.normalize_settings(settings)
        logger.debug(f"Normalized settings for parameter '{name}': {normalized!r}")
        return normalized

    def get_value(
        self,
        name: str,
        value: str | list[str] | None,
        settings: SettingsInput,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        """Validate the raw value of one parameter.

        Args:
            name: Parameter name
            value: Raw value, None when the parameter was not supplied
            settings: Parameter settings
            options: Per-request options, e.g. ``use_high_limits``

        Returns:
            The typed value, a list of typed values for multi-value
            parameters, the default, or None

        Raises:
            ValidationException: If the value fails validation
        """
        options = options or {}
        settings = self.normalize_settings(settings, name)

        if value is None:
            if settings.required:
                self._failure("missingparam", name, value, settings)
            return settings.default

        return self.validate_value(name, value, settings, options)

    def validate_value(
        self,
        name: str,
        value: str | list[str],
        settings: ParamSettingsModel,
        options: Mapping[str, Any],
    ) -> Any:
        """Validate a supplied value against already-normalized settings."""
        type_def = self._type_defs[settings.type]

        if not settings.ismulti:
            if not isinstance(value, str):
                self._failure("badvalue", name, value, settings)
            return type_def.validate(name, value, settings, options)

        limit1, limit2 = self._limits(settings)
        limit = limit2 if options.get("use_high_limits") else limit1

        if isinstance(value, str):
            values = TypeConverter.explode_multi_value(value, limit + 1)
        elif isinstance(value, list) and all(isinstance(v, str) for v in value):
            values = list(value)
        else:
            self._failure("badvalue", name, value, settings)

        if len(values) > limit:
            self._failure("toomanyvalues", name, value, settings, {"limit": limit})

        validated = [type_def.validate(name, v, settings, options) for v in values]
        if not settings.allow_duplicates:
            validated = TypeConverter.unique(validated)
        return validated

    def validate_input(
        self,
        params: Mapping[str, str | list[str] | None],
        schema: Mapping[str, SettingsInput],
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Validate a whole request.

        Args:
            params: Raw parameter values by name
            schema: Parameter settings by name
            options: Per-request options

        Returns:
            Typed values for every parameter in the schema

        Raises:
            ValidationError: If a parameter is unknown
            ValidationException: If a value fails validation
        """
        unknown = [n for n in params if n not in schema]
        if unknown:
            raise ValidationError(f"Unknown parameter: {', '.join(sorted(unknown))}")

        return {
            name: self.get_value(name, params.get(name), settings, options)
            for name, settings in schema.items()
        }

    def get_param_info(
        self, name: str, settings: SettingsInput, options: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Machine-readable description of a parameter."""
        options = options or {}
        settings = self.normalize_settings(settings, name)

        info: dict[str, Any] = {
            "name": name,
            "type": settings.type,
            "required": settings.required,
            "multi": settings.ismulti,
        }
        if settings.description is not None:
            info["description"] = settings.description
        if settings.ismulti:
            info["limit"], info["highlimit"] = self._limits(settings)
            if settings.allow_duplicates:
                info["allowsduplicates"] = True
        if settings.default is not None:
            info["default"] = settings.default

        info.update(self._type_defs[settings.type].get_param_info(name, settings, options))
        return info

    def get_help_info(
        self, name: str, settings: SettingsInput, options: Mapping[str, Any] | None = None
    ) -> dict[str, MessageValue]:
        """Help messages for a parameter, keyed by topic."""
        options = options or {}
        settings = self.normalize_settings(settings, name)

        info: dict[str, MessageValue] = {}
        if settings.ismulti:
            limit1, limit2 = self._limits(settings)
            info["multi-sep"] = MessageValue.new("paramvalidator-help-multi-sep")
            info["multi-max"] = MessageValue.new("paramvalidator-help-multi-max").num_params(
                limit1, limit2
            )

        info.update(self._type_defs[settings.type].get_help_info(name, settings, options))
        return info

    def _limits(self, settings: ParamSettingsModel) -> tuple[int, int]:
        limit1 = settings.ismulti_limit1 or self.ismulti_limit1
        limit2 = max(limit1, settings.ismulti_limit2 or self.ismulti_limit2)
        return limit1, limit2

    def _failure(
        self,
        code: FailureCode,
        name: str,
        value: Any,
        settings: ParamSettingsModel,
        data: Mapping[str, Any] | None = None,
    ) -> NoReturn:
        params = [name, data["limit"]] if code == "toomanyvalues" and data else [name, value]
        raise ValidationException(
            DataMessageValue.new_failure(code, params, data), name, value, settings
        )
