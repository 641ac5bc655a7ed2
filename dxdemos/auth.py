"""Users, permissions and login sessions backed by SQLite."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass, field

_REQUIRED_ANY = ("Category::View", "Admin::View")


@dataclass
class User:
    id: int
    anonymous: bool
    username: str
    permissions: set[str] = field(default_factory=set)

    @classmethod
    def guest(cls) -> User:
        """The default anonymous user, allowed to view categories."""
        return cls(id=1, anonymous=True, username="Guest", permissions={"Category::View"})

    def is_authenticated(self) -> bool:
        return not self.anonymous

    def is_active(self) -> bool:
        return not self.anonymous

    def is_anonymous(self) -> bool:
        return self.anonymous

    def has(self, perm: str) -> bool:
        return perm in self.permissions


@dataclass
class SqlUser:
    """A row of the users table."""

    id: int
    anonymous: bool
    username: str

    def into_user(self, tokens: list[str] | None) -> User:
        return User(
            id=self.id,
            anonymous=self.anonymous,
            username=self.username,
            permissions=set(tokens) if tokens is not None else set(),
        )


class UserStore:
    """Reads and seeds users held in a SQLite database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def __enter__(self) -> UserStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.connection.close()

    def create_user_tables(self) -> None:
        """Create the tables and seed the guest and test users."""
        with self.connection:
            self.connection.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    "id" INTEGER PRIMARY KEY,
                    "anonymous" BOOLEAN NOT NULL,
                    "username" VARCHAR(256) NOT NULL
                )
                """
            )
            self.connection.execute(
                """
                CREATE TABLE IF NOT EXISTS user_permissions (
                    "user_id" INTEGER NOT NULL,
                    "token" VARCHAR(256) NOT NULL
                )
                """
            )
            upsert = """
                INSERT INTO users (id, anonymous, username) VALUES (?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    anonymous = excluded.anonymous,
                    username = excluded.username
            """
            self.connection.execute(upsert, (1, True, "Guest"))
            self.connection.execute(upsert, (2, False, "Test"))
            self.connection.execute(
                "INSERT INTO user_permissions (user_id, token) VALUES (?, ?)",
                (2, "Category::View"),
            )

    def get_user(self, user_id: int) -> User | None:
        """The user with this id and its permission tokens, or None."""
        try:
            row = self.connection.execute(
                "SELECT id, anonymous, username FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            if row is None:
                return None
            tokens = [
                token
                for (token,) in self.connection.execute(
                    "SELECT token FROM user_permissions WHERE user_id = ?", (user_id,)
                )
            ]
        except sqlite3.Error:
            return None
        return SqlUser(id=row[0], anonymous=bool(row[1]), username=row[2]).into_user(tokens)

    def load_user(self, user_id: int) -> User:
        """Like get_user, but raise LookupError when there is no such user."""
        user = self.get_user(user_id)
        if user is None:
            raise LookupError("Could not load user")
        return user


def connect_to_database() -> UserStore:
    """Open a fresh in-memory user database."""
    return UserStore(sqlite3.connect(":memory:"))


@dataclass
class AuthSession:
    """A login session; falls back to the anonymous user when nobody logged in."""

    store: UserStore
    anonymous_user_id: int | None = 1
    user_id: int | None = None

    def login_user(self, user_id: int) -> None:
        self.user_id = user_id

    def current_user(self) -> User | None:
        uid = self.user_id if self.user_id is not None else self.anonymous_user_id
        if uid is None:
            return None
        return self.store.get_user(uid)

    def user_name(self) -> str:
        user = self.current_user()
        if user is None:
            raise LookupError("no current user in session")
        return user.username


def _debug_set(values: set[str]) -> str:
    return "{" + ", ".join(json.dumps(v, ensure_ascii=False) for v in sorted(values)) + "}"


def permission_report(user: User | None = None) -> str:
    """Describe whether the user may view the page; a missing user counts as guest."""
    if user is None:
        user = User.guest()
    if not any(user.has(perm) for perm in _REQUIRED_ANY):
        return (
            f"User {user.username}, Does not have permissions needed to view this page "
            "please login"
        )
    return (
        "User has Permissions needed. Here are the Users permissions: "
        f"{_debug_set(user.permissions)}"
    )