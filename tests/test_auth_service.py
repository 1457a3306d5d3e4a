"""Tests for admin accounts."""

import pytest

from gallery.config import settings
from gallery.errors import ConflictError
from gallery.services.auth_service import (
    authenticate_admin,
    change_password,
    create_admin,
    ensure_default_admin,
    get_admin_by_username,
)


def test_password_is_stored_hashed(session):
    admin = create_admin("editor", "correct-horse", session)
    assert admin.password != "correct-horse"
    assert admin.password.startswith("$2")


def test_duplicate_username(session):
    create_admin("editor", "correct-horse", session)
    with pytest.raises(ConflictError):
        create_admin("editor", "another-pass", session)


class TestAuthenticate:
    def test_valid_credentials(self, session):
        created = create_admin("editor", "correct-horse", session)
        assert authenticate_admin("editor", "correct-horse", session).id == created.id

    def test_wrong_password(self, session):
        create_admin("editor", "correct-horse", session)
        assert authenticate_admin("editor", "wrong-horse", session) is None

    def test_unknown_user(self, session):
        assert authenticate_admin("ghost", "correct-horse", session) is None


class TestDefaultAdmin:
    def test_created_when_none_exist(self, session):
        admin = ensure_default_admin(session)
        assert admin.username == settings.default_admin_username
        assert authenticate_admin(admin.username, settings.default_admin_password, session)

    def test_not_created_twice(self, session):
        ensure_default_admin(session)
        assert ensure_default_admin(session) is None

    def test_skipped_when_other_admin_exists(self, session):
        create_admin("owner", "owner-pass", session)
        assert ensure_default_admin(session) is None
        assert get_admin_by_username(settings.default_admin_username, session) is None


def test_change_password(session):
    admin = create_admin("editor", "correct-horse", session)
    change_password(admin, "battery-staple", session)
    assert authenticate_admin("editor", "battery-staple", session) is not None
    assert authenticate_admin("editor", "correct-horse", session) is None
