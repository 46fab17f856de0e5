"""
Global pytest configuration and fixtures.
"""

import pytest

from userparam.identity import (
    ExternalUserNames,
    InMemoryIdentityStore,
    SimpleTitleParser,
    UserNameUtils,
)
from userparam.validator import ParamValidator, UserDef


@pytest.fixture
def title_parser() -> SimpleTitleParser:
    return SimpleTitleParser(interwiki_prefixes=["meta", "commons"])


@pytest.fixture
def name_utils(title_parser) -> UserNameUtils:
    return UserNameUtils(title_parser)


@pytest.fixture
def identity_store(name_utils) -> InMemoryIdentityStore:
    """Store with three registered accounts: ids 1, 2 and 42."""
    store = InMemoryIdentityStore(name_utils)
    store.add_user("Example", 1)
    store.add_user("Another_user", 2)
    store.add_user("Wiki sysop", 42)
    return store


@pytest.fixture
def user_def(identity_store, title_parser, name_utils) -> UserDef:
    return UserDef(identity_store, title_parser, ExternalUserNames(name_utils))


@pytest.fixture
def validator(user_def) -> ParamValidator:
    return ParamValidator({"user": user_def})


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path):
    """Keep tests away from any userparam config of the developer running them.

    Points the home directory and working directory at an empty temp dir and
    clears the config environment variables.
    """
    monkeypatch.delenv("USERPARAM_CONFIG", raising=False)
    monkeypatch.delenv("USERPARAM_DEBUG", raising=False)
    monkeypatch.delenv("USERPARAM_HIGH_LIMITS", raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
