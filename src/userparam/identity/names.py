"""User name validity and canonicalization rules."""

import re
from collections.abc import Iterable
from typing import Literal

from userparam.iputils import is_ipv6

from .interfaces import TitleParser
from .titles import NS_MAIN, NS_USER

CanonicalMode = Literal["valid", False]

DEFAULT_INVALID_CHARACTERS = "@:>="
DEFAULT_MAX_NAME_LENGTH = 255
DEFAULT_RESERVED_NAMES = (
    "MediaWiki default",
    "Conversion script",
    "Maintenance script",
    "Template namespace initialisation script",
)

_IPV4_LIKE = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.(?:xxx|\d{1,3})")


class UserNameUtils:
    """Decide which strings are user names and what they canonicalize to.

    Args:
        title_parser: Parser used to normalize names the same way titles are.
        max_name_length: Maximum length of a name in UTF-8 bytes.
        invalid_characters: Characters never allowed in a user name.
        reserved_names: Names reserved for system use. They are still valid
            names; only :meth:`is_usable_user_name` rejects them.
    """

    def __init__(
        self,
        title_parser: TitleParser,
        max_name_length: int = DEFAULT_MAX_NAME_LENGTH,
        invalid_characters: str = DEFAULT_INVALID_CHARACTERS,
        reserved_names: Iterable[str] = DEFAULT_RESERVED_NAMES,
    ):
        self.title_parser = title_parser
        self.max_name_length = max_name_length
        self.invalid_characters = invalid_characters
        self.reserved_names = frozenset(reserved_names)

    @staticmethod
    def is_ip(name: str) -> bool:
        """Whether ``name`` looks like an IP address.

        This also matches things like ``300.300.300.300`` that are not valid
        addresses, and masked forms like ``1.2.3.xxx``.
        """
        return bool(_IPV4_LIKE.fullmatch(name)) or is_ipv6(name)

    def is_valid_user_name(self, name: str) -> bool:
        if not isinstance(name, str) or name == "":
            return False
        # '/' would make the user page a subpage.
        if "/" in name or name != name[0].upper() + name[1:]:
            return False

        # Names must not be misread as a different title, e.g. with a namespace prefix.
        parsed = self.title_parser.parse_title(name)
        if (
            parsed is None
            or parsed.namespace != NS_MAIN
            or parsed.is_external
            or parsed.prefixed_text != name
        ):
            return False

        if any(c in name for c in self.invalid_characters):
            return False
        if self.is_ip(name):
            return False
        return len(name.encode("utf-8")) <= self.max_name_length

    def is_usable_user_name(self, name: str) -> bool:
        """Whether ``name`` is valid and may be taken by a new account.

        Reserved names are valid but not usable.
        """
        return self.is_valid_user_name(name) and name not in self.reserved_names

    def get_canonical(self, name: str, validate: CanonicalMode = "valid") -> str | None:
        """Return the canonical form of ``name``, or None if it is rejected.

        With ``validate=False`` the name is only normalized; with ``"valid"``
        it must also parse as a local user page title and pass
        :meth:`is_valid_user_name`.
        """
        if not name:
            return None
        name = name[0].upper() + name[1:]

        # '#' would be cut off as a fragment by title normalization.
        if "#" in name:
            return None

        if validate is False:
            return name.replace("_", " ")

        title = self.title_parser.parse_title(name, NS_USER)
        if title is None or title.namespace != NS_USER or title.is_external:
            return None
        name = title.text

        if validate == "valid":
            return name if self.is_valid_user_name(name) else None
        raise ValueError(f"Invalid parameter value for validate: {validate!r}")
