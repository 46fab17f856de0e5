"""Page title parsing.

A small title parser covering what user name handling needs: namespace and
interwiki prefixes, whitespace and capitalization normalization, invalid
character checks, and canonical IP text in the user namespaces.
"""

import re
from collections.abc import Iterable, Mapping

from userparam.iputils import sanitize_ip

from .models import Title

NS_MAIN = 0
NS_USER = 2
NS_USER_TALK = 3

DEFAULT_NAMESPACES: dict[str, int] = {
    "Media": -2,
    "Special": -1,
    "Talk": 1,
    "User": NS_USER,
    "User talk": NS_USER_TALK,
    "Project": 4,
    "Project talk": 5,
    "File": 6,
    "File talk": 7,
    "MediaWiki": 8,
    "MediaWiki talk": 9,
    "Template": 10,
    "Template talk": 11,
    "Help": 12,
    "Help talk": 13,
    "Category": 14,
    "Category talk": 15,
}

MAX_TITLE_LENGTH = 255

_PREFIX = re.compile(r"^(.+?) *: *(.*)$", re.DOTALL)
_WHITESPACE = re.compile(r"[ \t\u00a0\u3000]+")
_ILLEGAL = re.compile(r"[<>\[\]|{}\x00-\x1f\x7f]")


def _normalize_key(name: str) -> str:
    return _WHITESPACE.sub(" ", name.replace("_", " ")).strip().lower()


class SimpleTitleParser:
    """Parse title text into :class:`Title` objects.

    Args:
        namespaces: Namespace name to id mapping. The first name given for an
            id is its canonical name. Defaults to :data:`DEFAULT_NAMESPACES`.
        interwiki_prefixes: Prefixes that refer to other wikis.
        user_namespaces: Namespaces whose IP titles are sanitized.

    Example:
        >>> parser = SimpleTitleParser(interwiki_prefixes=["meta"])
        >>> parser.parse_title("user:some_body").prefixed_text
        'User:Some body'
        >>> parser.parse_title("meta:Foo").is_external
        True
    """

    def __init__(
        self,
        namespaces: Mapping[str, int] | None = None,
        interwiki_prefixes: Iterable[str] = (),
        user_namespaces: Iterable[int] = (NS_USER, NS_USER_TALK),
    ):
        namespaces = DEFAULT_NAMESPACES if namespaces is None else namespaces
        self._namespace_ids: dict[str, int] = {}
        self._canonical_names: dict[int, str] = {}
        for name, ns_id in namespaces.items():
            self._namespace_ids[_normalize_key(name)] = ns_id
            self._canonical_names.setdefault(ns_id, name.replace("_", " "))
        self._interwiki = {_normalize_key(p) for p in interwiki_prefixes}
        self._user_namespaces = frozenset(user_namespaces)

    def namespace_name(self, ns_id: int) -> str:
        """Canonical name of a namespace, "" for the main namespace."""
        return self._canonical_names.get(ns_id, "") if ns_id != NS_MAIN else ""

    def parse_title(self, text: str, default_namespace: int = NS_MAIN) -> Title | None:
        if not isinstance(text, str):
            return None

        text = _WHITESPACE.sub(" ", text.replace("_", " ")).strip()
        namespace = default_namespace
        interwiki = ""
        fragment = ""

        if "#" in text:
            text, fragment = text.split("#", 1)
            text = text.rstrip()
            fragment = fragment.strip()

        if text.startswith(":"):
            namespace = NS_MAIN
            text = text[1:].lstrip()

        match = _PREFIX.match(text)
        if match:
            prefix = _normalize_key(match.group(1))
            if prefix in self._namespace_ids:
                namespace = self._namespace_ids[prefix]
                text = match.group(2)
            elif namespace == NS_MAIN and prefix in self._interwiki:
                interwiki = prefix
                text = match.group(2)

        if _ILLEGAL.search(text) or len(text.encode("utf-8")) > MAX_TITLE_LENGTH:
            return None
        if text == "" and not interwiki:
            return None

        if text and not interwiki:
            text = text[0].upper() + text[1:]
        if text and namespace in self._user_namespaces:
            text = sanitize_ip(text) or text
        if text.startswith(":"):
            return None

        return Title(
            namespace=namespace,
            text=text,
            interwiki=interwiki,
            fragment=fragment,
            namespace_name=self.namespace_name(namespace),
        )
