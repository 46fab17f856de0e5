"""Type definition for user parameters.

A user parameter accepts a single user reference in one of several forms:

- ``name``: a user name, registered or not (``Example``, ``User:Example``)
- ``ip``: an IP address (``192.0.2.7``, ``::1``, masked ``192.0.2.xxx``)
- ``cidr``: an IP range (``192.0.2.0/24``)
- ``interwiki``: a name imported from another wiki (``enwiki>Example``)
- ``id``: an account id (``#123``)

Failure codes:
 - ``baduser``: The value was not a valid user, or not of an allowed kind. No data.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

from userparam.identity.interfaces import ExternalNameQualifier, IdentityStore, TitleParser
from userparam.identity.models import UserIdentity
from userparam.identity.titles import NS_USER
from userparam.iputils import is_ipv4_masked, is_valid, is_valid_range, sanitize_ip
from userparam.messages import MessageValue

from ..models import (
    DEFAULT_USER_SUBTYPES,
    NO_MATCH,
    ParamSettingsModel,
    UserClassification,
    UserSubtype,
)
from ..typedef import TypeDef

_USER_ID = re.compile(r"#([0-9]+)")

ClassificationRule = Callable[[str], UserClassification | None]


class UserDef(TypeDef):
    """Type definition for ``user`` parameters.

    Args:
        identity_store: Account lookups by id and by name.
        title_parser: Used to normalize values that are not plain user names.
        external_names: Recognizes and canonicalizes interwiki names.

    Example:
        >>> user_def = UserDef(store, title_parser, external_names)
        >>> settings = user_def.normalize_settings(ParamSettingsModel(type="user"))
        >>> user_def.validate("target", "127.0.0.1", settings, {})
        '127.0.0.1'
    """

    def __init__(
        self,
        identity_store: IdentityStore,
        title_parser: TitleParser,
        external_names: ExternalNameQualifier,
    ):
        self.identity_store = identity_store
        self.title_parser = title_parser
        self.external_names = external_names
        # Evaluated in order; a value may match several, the first one wins.
        self.rules: tuple[ClassificationRule, ...] = (
            self._classify_id,
            self._classify_interwiki,
            self._classify_name,
            self._classify_address,
        )

    def validate(
        self, name: str, value: str, settings: ParamSettingsModel, options: Mapping[str, Any]
    ) -> str | UserIdentity:
        result = self.classify(value)
        allowed = settings.allowed_user_types or DEFAULT_USER_SUBTYPES

        if result.user is None or result.tag not in allowed:
            self.failure("baduser", name, value, settings, options)
        return result.user if settings.return_object else result.user.name

    def normalize_settings(self, settings: ParamSettingsModel) -> ParamSettingsModel:
        configured = settings.allowed_user_types or []
        allowed = [st.value for st in UserSubtype if st.value in configured]
        if not allowed:
            allowed = list(DEFAULT_USER_SUBTYPES)
        settings = settings.model_copy(update={"allowed_user_types": allowed})
        return super().normalize_settings(settings)

    def classify(self, value: str) -> UserClassification:
        """Work out which kind of user reference ``value`` is and resolve it."""
        for rule in self.rules:
            result = rule(value)
            if result is not None:
                return result
        return NO_MATCH

    def _classify_id(self, value: str) -> UserClassification | None:
        match = _USER_ID.fullmatch(value)
        if not match:
            return None
        user = self.identity_store.lookup_by_id(int(match.group(1)))
        return UserClassification(subtype=UserSubtype.ID, user=user)

    def _classify_interwiki(self, value: str) -> UserClassification | None:
        if not self.external_names.is_external(value):
            return None
        canonical = self.external_names.canonicalize(value)
        user = UserIdentity(id=0, name=value) if isinstance(canonical, str) else None
        return UserClassification(subtype=UserSubtype.INTERWIKI, user=user)

    def _classify_name(self, value: str) -> UserClassification | None:
        user = self.identity_store.lookup_by_valid_name(value)
        if user is None:
            return None
        return UserClassification(subtype=UserSubtype.NAME, user=user)

    def _classify_address(self, value: str) -> UserClassification:
        # Apply the same normalization as user name canonicalization before
        # checking for addresses. '#' would be dropped as a fragment.
        if "#" in value:
            return NO_MATCH

        # The value may carry an explicit "User:" prefix.
        title = self.title_parser.parse_title(value)
        if title is None or title.namespace != NS_USER or title.is_external:
            title = self.title_parser.parse_title(f"User:{value}")
        if title is None or title.namespace != NS_USER or title.is_external:
            return NO_MATCH
        text = title.text

        # Masked addresses are not valid user names, but they are valid IP users.
        if is_valid(text) or is_ipv4_masked(text):
            return UserClassification(
                subtype=UserSubtype.IP, user=UserIdentity(id=0, name=sanitize_ip(text))
            )
        if is_valid_range(text):
            return UserClassification(
                subtype=UserSubtype.CIDR, user=UserIdentity(id=0, name=sanitize_ip(text))
            )
        return NO_MATCH

    def get_param_info(
        self, name: str, settings: ParamSettingsModel, options: Mapping[str, Any]
    ) -> dict[str, Any]:
        info = super().get_param_info(name, settings, options)
        info["subtypes"] = list(settings.allowed_user_types or DEFAULT_USER_SUBTYPES)
        return info

    def get_help_info(
        self, name: str, settings: ParamSettingsModel, options: Mapping[str, Any]
    ) -> dict[str, MessageValue]:
        info = super().get_help_info(name, settings, options)

        subtypes = [
            MessageValue.new(f"paramvalidator-help-type-user-subtype-{st}")
            for st in settings.allowed_user_types or DEFAULT_USER_SUBTYPES
        ]
        info["type"] = (
            MessageValue.new("paramvalidator-help-type-user")
            .params(2 if settings.ismulti else 1)
            .text_list_params(subtypes)
            .num_params(len(subtypes))
        )
        return info
