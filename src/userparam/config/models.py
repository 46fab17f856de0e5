"""Pydantic models for userparam configuration.

This module defines the configuration read from ``userparam.yaml``: the
title and user name rules the reference collaborators apply, default
multi-value limits, and seed accounts for the in-memory store.
"""

from pydantic import Field, model_validator

from userparam.identity.names import (
    DEFAULT_INVALID_CHARACTERS,
    DEFAULT_MAX_NAME_LENGTH,
    DEFAULT_RESERVED_NAMES,
)
from userparam.identity.titles import DEFAULT_NAMESPACES, NS_USER
from userparam.models import UserParamBaseModel
from userparam.validator.models import ISMULTI_LIMIT1, ISMULTI_LIMIT2


class SeedUserModel(UserParamBaseModel):
    """An account registered in the in-memory store at startup.

    Attributes:
        name: User name; canonicalized when registered.
        id: Account id; allocated when omitted.

    Example:
        >>> SeedUserModel(name="Example", id=7)
    """

    name: str
    id: int | None = Field(default=None, gt=0)


class UserParamConfigModel(UserParamBaseModel):
    """Configuration for userparam.

    Attributes:
        namespaces: Namespace name to id mapping used when parsing titles.
        interwiki_prefixes: Title prefixes that refer to other wikis.
        max_name_length: Maximum user name length in UTF-8 bytes.
        invalid_username_characters: Characters not allowed in user names.
        reserved_usernames: Names reserved for system use.
        ismulti_limit1: Default maximum values for multi-value parameters.
        ismulti_limit2: Default maximum for clients allowed high limits.
        users: Accounts to register in the in-memory store.

    Example:
        >>> config = UserParamConfigModel(
        ...     interwiki_prefixes=["meta", "commons"],
        ...     users=[SeedUserModel(name="Example")],
        ... )
    """

    namespaces: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_NAMESPACES))
    interwiki_prefixes: list[str] = Field(default_factory=list)
    max_name_length: int = Field(default=DEFAULT_MAX_NAME_LENGTH, gt=0)
    invalid_username_characters: str = DEFAULT_INVALID_CHARACTERS
    reserved_usernames: list[str] = Field(default_factory=lambda: list(DEFAULT_RESERVED_NAMES))
    ismulti_limit1: int = Field(default=ISMULTI_LIMIT1, gt=0)
    ismulti_limit2: int = Field(default=ISMULTI_LIMIT2, gt=0)
    users: list[SeedUserModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_consistency(self) -> "UserParamConfigModel":
        """User pages must live in the "User" namespace."""
        if self.namespaces.get("User") != NS_USER:
            raise ValueError(f"Namespace 'User' must be configured with id {NS_USER}")
        if self.ismulti_limit2 < self.ismulti_limit1:
            raise ValueError("ismulti_limit2 must not be lower than ismulti_limit1")
        return self
