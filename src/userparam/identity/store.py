"""In-memory account store."""

import logging
import threading

from .models import UserIdentity
from .names import UserNameUtils

logger = logging.getLogger(__name__)


class InMemoryIdentityStore:
    """Account store kept in process memory.

    Accounts are registered under their canonical name. Lookups are safe to
    call from several threads.

    Example:
        >>> store = InMemoryIdentityStore(name_utils)
        >>> store.add_user("example_user")
        UserIdentity(id=1, name='Example user')
        >>> store.lookup_by_valid_name("User:Example user").id
        1
    """

    def __init__(self, name_utils: UserNameUtils):
        self.name_utils = name_utils
        self._lock = threading.Lock()
        self._by_id: dict[int, UserIdentity] = {}
        self._by_name: dict[str, UserIdentity] = {}
        self._next_id = 1

    def add_user(self, name: str, user_id: int | None = None) -> UserIdentity:
        """Register an account.

        Args:
            name: User name, canonicalized before storing.
            user_id: Explicit account id; allocated when omitted.

        Raises:
            ValueError: If the name is not a valid user name, or the name or
                id is already taken.
        """
        canonical = self.name_utils.get_canonical(name, "valid")
        if canonical is None:
            raise ValueError(f"Invalid user name: {name!r}")

        with self._lock:
            if canonical in self._by_name:
                raise ValueError(f"User already exists: {canonical}")
            if user_id is None:
                user_id = self._next_id
            elif user_id <= 0:
                raise ValueError(f"User id must be positive, got {user_id}")
            elif user_id in self._by_id:
                raise ValueError(f"User id already in use: {user_id}")

            user = UserIdentity(id=user_id, name=canonical)
            self._by_id[user_id] = user
            self._by_name[canonical] = user
            self._next_id = max(self._next_id, user_id + 1)

        logger.debug(f"Registered user {canonical!r} with id {user_id}")
        return user

    def lookup_by_id(self, user_id: int) -> UserIdentity | None:
        with self._lock:
            return self._by_id.get(user_id)

    def lookup_by_valid_name(self, name: str) -> UserIdentity | None:
        canonical = self.name_utils.get_canonical(name, "valid")
        if canonical is None:
            return None
        with self._lock:
            user = self._by_name.get(canonical)
        return user if user is not None else UserIdentity(id=0, name=canonical)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)
