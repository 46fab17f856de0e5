"""Pydantic models for user identities and titles."""

from pydantic import Field

from userparam.models import UserParamBaseModel


class UserIdentity(UserParamBaseModel):
    """A reference to a user.

    Attributes:
        id: Account id, or 0 for anything that is not a registered account
            (IP addresses, ranges, interwiki names, unregistered valid names).
        name: Display name of the user.

    Example:
        >>> UserIdentity(id=0, name="127.0.0.1").is_registered
        False
    """

    id: int = Field(default=0, ge=0)
    name: str

    @property
    def is_registered(self) -> bool:
        return self.id != 0


class Title(UserParamBaseModel):
    """A parsed page title.

    Attributes:
        namespace: Namespace id (0 is the main namespace).
        text: Normalized title text without the namespace prefix.
        interwiki: Interwiki prefix for titles on another wiki, else "".
        fragment: Section fragment after ``#``, else "".
        namespace_name: Canonical namespace name used by ``prefixed_text``.
    """

    namespace: int = 0
    text: str
    interwiki: str = ""
    fragment: str = ""
    namespace_name: str = ""

    @property
    def is_external(self) -> bool:
        return self.interwiki != ""

    @property
    def prefixed_text(self) -> str:
        prefix = f"{self.interwiki}:" if self.interwiki else ""
        if self.namespace_name:
            prefix += f"{self.namespace_name}:"
        return prefix + self.text
