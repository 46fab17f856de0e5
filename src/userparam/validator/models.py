"""Pydantic models for userparam validator.

This module contains the Pydantic model definitions for parameter settings.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field

from userparam.identity.models import UserIdentity
from userparam.models import UserParamBaseModel

ISMULTI_LIMIT1 = 50
ISMULTI_LIMIT2 = 500


class UserSubtype(str, Enum):
    """Kinds of user reference accepted by the ``user`` parameter type.

    Declaration order is the canonical order used when normalizing settings.

    - NAME: User names, registered or not.
    - IP: IP ("anon") user names.
    - CIDR: IP ranges.
    - INTERWIKI: Names imported from other wikis, like ``prefix>Name``.
    - ID: Account ids written as ``#123``. Each one costs a store lookup.
    """

    NAME = "name"
    IP = "ip"
    CIDR = "cidr"
    INTERWIKI = "interwiki"
    ID = "id"


DEFAULT_USER_SUBTYPES: tuple[str, ...] = (
    UserSubtype.NAME.value,
    UserSubtype.IP.value,
    UserSubtype.CIDR.value,
    UserSubtype.INTERWIKI.value,
)


class ParamSettingsModel(UserParamBaseModel):
    """Settings for a single parameter.

    Fields that only apply to some types live next to the generic ones, the
    same way a JSON-schema property carries ``minLength`` for strings and
    ``minimum`` for numbers.

    Attributes:
        type: Name of the registered type definition, e.g. ``user``.
        description: Optional description of the parameter.
        default: Value used when the parameter is not supplied.
        required: Whether the parameter must be supplied.
        ismulti: Whether the parameter takes a list of values.
        ismulti_limit1: Maximum number of values for normal clients.
        ismulti_limit2: Maximum number of values for clients allowed high limits.
        allow_duplicates: Keep repeated values of a multi-value parameter.
        allowed_user_types: (user type) Allowed user subtypes. Unknown
            entries are dropped during normalization; when nothing is left the
            default ``name``, ``ip``, ``cidr``, ``interwiki`` applies. Avoid
            combining ``id`` with ``ismulti`` unless the limits are low, since
            every id costs a store lookup.
        return_object: (user type) Return the full :class:`UserIdentity`
            instead of the user name.

    Example:
        >>> settings = ParamSettingsModel(
        ...     type="user",
        ...     allowedUserTypes=["name", "id"],
        ...     returnObject=True,
        ... )
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    type: str
    description: str | None = None
    default: Any | None = None
    required: bool = False

    # Multi-value parameters
    ismulti: bool = Field(default=False, alias="isMulti")
    ismulti_limit1: int | None = Field(default=None, alias="isMultiLimit1", gt=0)
    ismulti_limit2: int | None = Field(default=None, alias="isMultiLimit2", gt=0)
    allow_duplicates: bool = Field(default=False, alias="allowDuplicates")

    # User type
    allowed_user_types: list[str] | None = Field(default=None, alias="allowedUserTypes")
    return_object: bool = Field(default=False, alias="returnObject")


class UserClassification(UserParamBaseModel):
    """Outcome of classifying a raw value as a user reference.

    Exactly one subtype is recorded per successful classification. A value
    that matched no rule has neither subtype nor user.

    Attributes:
        subtype: The matching subtype, or None when nothing matched.
        user: The resolved identity. May be None even when a subtype matched,
            e.g. an interwiki name without a canonical form.
    """

    subtype: UserSubtype | None = None
    user: UserIdentity | None = None

    @property
    def tag(self) -> str:
        return self.subtype.value if self.subtype is not None else ""


NO_MATCH = UserClassification()
