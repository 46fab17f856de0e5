"""User identities and the collaborators used to resolve them.

## Key Components

- `UserIdentity`: Resolved reference to a user (account id 0 for anonymous)
- `IdentityStore`, `TitleParser`, `ExternalNameQualifier`: Collaborator protocols
- `InMemoryIdentityStore`: Account store kept in process memory
- `SimpleTitleParser`: Namespace-aware title parsing
- `UserNameUtils`: User name validity and canonicalization
- `ExternalUserNames`: Imported (interwiki) user names
"""

from .external import ExternalUserNames
from .interfaces import ExternalNameQualifier, IdentityStore, TitleParser
from .models import Title, UserIdentity
from .names import UserNameUtils
from .store import InMemoryIdentityStore
from .titles import DEFAULT_NAMESPACES, NS_MAIN, NS_USER, NS_USER_TALK, SimpleTitleParser

__all__ = [
    # Models
    "UserIdentity",
    "Title",
    # Protocols
    "IdentityStore",
    "TitleParser",
    "ExternalNameQualifier",
    # Implementations
    "InMemoryIdentityStore",
    "SimpleTitleParser",
    "UserNameUtils",
    "ExternalUserNames",
    # Constants
    "DEFAULT_NAMESPACES",
    "NS_MAIN",
    "NS_USER",
    "NS_USER_TALK",
]
