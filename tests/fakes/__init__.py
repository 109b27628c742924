"""Sample migration scripts shared by the tests."""

from .scripts import BROKEN_SQL, CREATE_ACCOUNTS, CREATE_POSTS, CREATE_USERS, SEED_USERS

__all__ = [
    "BROKEN_SQL",
    "CREATE_ACCOUNTS",
    "CREATE_POSTS",
    "CREATE_USERS",
    "SEED_USERS",
]
