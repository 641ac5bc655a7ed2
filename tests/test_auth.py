import pytest

from dxdemos.auth import (
    AuthSession,
    SqlUser,
    User,
    UserStore,
    connect_to_database,
    permission_report,
)


@pytest.fixture
def store():
    with connect_to_database() as db:
        db.create_user_tables()
        yield db


def test_guest_defaults():
    guest = User.guest()
    assert guest.id == 1
    assert guest.username == "Guest"
    assert guest.permissions == {"Category::View"}
    assert guest.is_anonymous()
    assert not guest.is_authenticated()
    assert not guest.is_active()


def test_has_permission():
    user = User(id=5, anonymous=False, username="u", permissions={"Admin::View"})
    assert user.has("Admin::View")
    assert not user.has("Category::View")
    assert user.is_authenticated() and user.is_active()


def test_into_user_with_and_without_tokens():
    row = SqlUser(id=3, anonymous=False, username="x")
    assert row.into_user(["a", "b", "a"]).permissions == {"a", "b"}
    assert row.into_user(None).permissions == set()


def test_seeded_users(store):
    test_user = store.get_user(2)
    assert test_user.username == "Test"
    assert not test_user.anonymous
    assert test_user.permissions == {"Category::View"}
    guest = store.get_user(1)
    assert guest.username == "Guest"
    assert guest.anonymous
    assert guest.permissions == set()


def test_missing_user(store):
    assert store.get_user(99) is None
    with pytest.raises(LookupError):
        store.load_user(99)


def test_get_user_without_tables_is_none():
    with connect_to_database() as db:
        assert db.get_user(1) is None


def test_seeding_twice_keeps_users(store):
    store.create_user_tables()
    assert store.load_user(2).permissions == {"Category::View"}
    assert store.load_user(1).username == "Guest"


def test_session_anonymous_then_login(store):
    session = AuthSession(store)
    assert session.user_name() == "Guest"
    session.login_user(2)
    assert session.user_name() == "Test"
    assert session.current_user().is_authenticated()


def test_session_without_anonymous_user(store):
    session = AuthSession(store, anonymous_user_id=None)
    assert session.current_user() is None
    with pytest.raises(LookupError):
        session.user_name()


def test_report_denied_for_stored_guest(store):
    session = AuthSession(store)
    assert permission_report(session.current_user()) == (
        "User Guest, Does not have permissions needed to view this page please login"
    )


def test_report_granted_after_login(store):
    session = AuthSession(store)
    session.login_user(2)
    assert permission_report(session.current_user()) == (
        'User has Permissions needed. Here are the Users permissions: {"Category::View"}'
    )


def test_report_defaults_to_guest():
    assert permission_report(None).startswith("User has Permissions needed.")


def test_store_wraps_given_connection():
    import sqlite3

    connection = sqlite3.connect(":memory:")
    store = UserStore(connection)
    store.create_user_tables()
    assert store.load_user(2).id == 2
    store.close()
    with pytest.raises(sqlite3.ProgrammingError):
        connection.execute("SELECT 1")