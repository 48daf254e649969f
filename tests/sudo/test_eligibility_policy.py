"""
Eligibility Policy Tests

Elevation is offered iff base role is the highest tier and the active
role is not.
"""

import pytest
from pydantic import ValidationError

from sudo import HIGHEST_ROLE, Role, SessionIdentity, can_elevate


class TestRole:
    def test_highest_role_is_admin(self):
        assert HIGHEST_ROLE is Role.ADMIN

    @pytest.mark.parametrize("value,expected", [
        (2, Role.ADMIN),
        ("2", Role.ADMIN),
        ("1", Role.USER),
        ("admin", Role.ADMIN),
        ("Guest", Role.GUEST),
        (Role.USER, Role.USER),
    ])
    def test_parse(self, value, expected):
        assert Role.parse(value) is expected

    @pytest.mark.parametrize("value", ["7", "root", 9])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ValueError):
            Role.parse(value)


class TestSessionIdentity:
    def test_coerces_backend_codes(self):
        identity = SessionIdentity(base_role="2", active_role="1")

        assert identity.base_role is Role.ADMIN
        assert identity.active_role is Role.USER

    def test_invalid_role_rejected(self):
        with pytest.raises(ValidationError):
            SessionIdentity(base_role="superuser", active_role=1)

    def test_frozen(self):
        identity = SessionIdentity(base_role=2, active_role=1)

        with pytest.raises(ValidationError):
            identity.active_role = Role.ADMIN


class TestCanElevate:
    @pytest.mark.parametrize("base,active", [
        (Role.ADMIN, Role.USER),
        (Role.ADMIN, Role.GUEST),
    ])
    def test_downgraded_superuser_may_elevate(self, base, active):
        assert can_elevate(SessionIdentity(base_role=base, active_role=active)) is True

    def test_already_elevated_superuser_may_not(self):
        assert can_elevate(SessionIdentity(base_role=Role.ADMIN, active_role=Role.ADMIN)) is False

    @pytest.mark.parametrize("base", [Role.USER, Role.GUEST])
    @pytest.mark.parametrize("active", list(Role))
    def test_non_superuser_never_elevates(self, base, active):
        assert can_elevate(SessionIdentity(base_role=base, active_role=active)) is False
