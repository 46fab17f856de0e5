"""Helpers for user names imported from other wikis.

Imported names carry a prefix naming their origin, separated by ``>``,
for example ``enwiki>Example``.
"""

from .names import UserNameUtils


class ExternalUserNames:
    """Recognize and canonicalize imported user names."""

    def __init__(self, name_utils: UserNameUtils):
        self.name_utils = name_utils

    @staticmethod
    def is_external(name: str) -> bool:
        return ">" in name

    def canonicalize(self, name: str) -> str | None:
        return self.name_utils.get_canonical(name, validate=False)

    @staticmethod
    def get_local(name: str) -> str:
        """Strip the import prefix: ``enwiki>Example`` becomes ``Example``."""
        return name.split(">", 1)[1] if ">" in name else name
