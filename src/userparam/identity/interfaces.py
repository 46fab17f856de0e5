"""
Protocol definitions for the collaborators the user type depends on.

The user type definition only needs narrow lookups from an account store,
a title parser and an external-name helper. Keeping the protocols separate
lets callers plug in their own backends, or fakes in tests.
"""

from typing import Protocol

from .models import Title, UserIdentity


class IdentityStore(Protocol):
    """Account lookups."""

    def lookup_by_id(self, user_id: int) -> UserIdentity | None:
        """Return the account with this id."""
        ...

    def lookup_by_valid_name(self, name: str) -> UserIdentity | None:
        """Return the identity for a valid user name, or None if the name is invalid.

        Valid names without an account yield an identity with id 0.
        """
        ...


class TitleParser(Protocol):
    """Parses page titles."""

    def parse_title(self, text: str, default_namespace: int = 0) -> Title | None:
        """Return the parsed title, or None if ``text`` is not a valid title.

        ``default_namespace`` applies when ``text`` has no namespace prefix.
        """
        ...


class ExternalNameQualifier(Protocol):
    """Recognizes user names imported from other wikis."""

    def is_external(self, name: str) -> bool:
        ...

    def canonicalize(self, name: str) -> str | None:
        """Return the canonical form of ``name``, or None if it has none."""
        ...
