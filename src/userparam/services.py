"""Wiring of the reference collaborators into a ready-to-use validator."""

import logging

from userparam.config.models import UserParamConfigModel
from userparam.identity import (
    ExternalUserNames,
    IdentityStore,
    InMemoryIdentityStore,
    SimpleTitleParser,
    UserNameUtils,
)
from userparam.validator import ParamValidator, UserDef

logger = logging.getLogger(__name__)


def create_name_utils(config: UserParamConfigModel) -> UserNameUtils:
    title_parser = SimpleTitleParser(
        namespaces=config.namespaces,
        interwiki_prefixes=config.interwiki_prefixes,
    )
    return UserNameUtils(
        title_parser,
        max_name_length=config.max_name_length,
        invalid_characters=config.invalid_username_characters,
        reserved_names=config.reserved_usernames,
    )


def create_identity_store(
    config: UserParamConfigModel, name_utils: UserNameUtils | None = None
) -> InMemoryIdentityStore:
    """Create an in-memory store holding the configured seed accounts."""
    store = InMemoryIdentityStore(name_utils or create_name_utils(config))
    for user in config.users:
        store.add_user(user.name, user.id)
    logger.debug(f"Seeded identity store with {len(store)} users")
    return store


def create_param_validator(
    config: UserParamConfigModel | None = None,
    identity_store: IdentityStore | None = None,
) -> ParamValidator:
    """Create a :class:`ParamValidator` with the ``user`` type registered.

    Args:
        config: Configuration; defaults apply when omitted.
        identity_store: Account store to use instead of an in-memory store
            seeded from ``config.users``.
    """
    config = config or UserParamConfigModel()
    name_utils = create_name_utils(config)
    if identity_store is None:
        identity_store = create_identity_store(config, name_utils)

    user_def = UserDef(identity_store, name_utils.title_parser, ExternalUserNames(name_utils))
    return ParamValidator(
        {"user": user_def},
        ismulti_limit1=config.ismulti_limit1,
        ismulti_limit2=config.ismulti_limit2,
    )
