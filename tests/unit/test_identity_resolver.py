"""Unit tests for IdentityResolver.

These tests use the fake unit of work to check the name ambiguity policy
and the NotFound / StoreUnavailable distinction without a database.
"""

import pytest

from nlogin_web.application.exceptions import InvalidSearchModeError
from nlogin_web.application.services.identity_resolver import (
    IdentityResolver,
    coerce_search_mode,
)
from nlogin_web.domain.entities.account import Account
from nlogin_web.domain.entities.lookup import LookupResult, SearchMode
from nlogin_web.domain.entities.platform_identity import PlatformIdentity
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

pytestmark = pytest.mark.unit

HASH = "$2A$HASHED$pw"
UID = "0123456789abcdef0123456789abcdef"


def make_account(account_id, name, identity=None):
    return Account(
        account_id=account_id,
        display_name=name,
        password_hash=HASH,
        unique_id=UID,
        platform_identity=identity or PlatformIdentity.none(),
    )


@pytest.fixture
def shared_name_uow():
    """Three accounts sharing the name "Steve" plus one bedrock account."""
    return FakeUnitOfWork(
        initial_accounts=[
            make_account(1, "Steve"),
            make_account(2, "Steve", PlatformIdentity.primary("a" * 32)),
            make_account(3, "Steve", PlatformIdentity.primary("f" * 32)),
            make_account(4, "Steve", PlatformIdentity.alternate("bedrock-4")),
        ]
    )


def resolver_for(uow, strict=False):
    return IdentityResolver(lambda: uow, strict_name_uniqueness=strict)


class TestCoerceSearchMode:
    """Test cases for search mode validation."""

    @pytest.mark.parametrize("value", [1, 2, 3])
    def test_integer_modes(self, value):
        assert coerce_search_mode(value) == SearchMode(value)

    @pytest.mark.parametrize("value", [0, 4, -1, "1", None, True, 2.5])
    def test_invalid_modes_raise(self, value):
        """Test anything but the three modes is rejected."""
        with pytest.raises(InvalidSearchModeError) as exc_info:
            coerce_search_mode(value)

        assert exc_info.value.error_code == "INVALID_SEARCH_MODE"


class TestResolveByPlatformId:
    """Test cases for platform id lookups."""

    def test_by_primary_id(self, shared_name_uow):
        result = resolver_for(shared_name_uow).resolve("f" * 32, SearchMode.BY_PRIMARY_ID)

        assert result == LookupResult.found(3)

    def test_by_alternate_id(self, shared_name_uow):
        result = resolver_for(shared_name_uow).resolve("bedrock-4", SearchMode.BY_ALTERNATE_ID)

        assert result == LookupResult.found(4)

    def test_primary_id_does_not_match_alternate_column(self, shared_name_uow):
        """Test namespaces do not leak into each other."""
        result = resolver_for(shared_name_uow).resolve("bedrock-4", SearchMode.BY_PRIMARY_ID)

        assert result.is_not_found

    def test_search_value_is_trimmed(self, shared_name_uow):
        result = resolver_for(shared_name_uow).resolve("  bedrock-4 ", 2)

        assert result == LookupResult.found(4)

    def test_integer_mode_accepted(self, shared_name_uow):
        """Test plain integers work like SearchMode members."""
        result = resolver_for(shared_name_uow).resolve("a" * 32, 1)

        assert result == LookupResult.found(2)


class TestResolveByDisplayName:
    """Test cases for the display-name ambiguity policy."""

    def test_lenient_prefers_claimed_rows(self, shared_name_uow):
        """Test a row with a primary id wins over unclaimed ones."""
        # Act
        result = resolver_for(shared_name_uow, strict=False).resolve(
            "Steve", SearchMode.BY_DISPLAY_NAME
        )

        # Assert
        assert result == LookupResult.found(3)

    def test_lenient_falls_back_to_unclaimed(self):
        """Test the unclaimed row matches when no claimed row exists."""
        # Arrange
        uow = FakeUnitOfWork(initial_accounts=[make_account(5, "Alex")])

        # Act
        result = resolver_for(uow).resolve("Alex", SearchMode.BY_DISPLAY_NAME)

        # Assert
        assert result == LookupResult.found(5)

    def test_strict_matches_only_unclaimed(self, shared_name_uow):
        """Test strict mode ignores rows bound to any platform."""
        result = resolver_for(shared_name_uow, strict=True).resolve(
            "Steve", SearchMode.BY_DISPLAY_NAME
        )

        assert result == LookupResult.found(1)

    def test_strict_ignores_alternate_bound_rows(self):
        """Test an alternate-bound row is not unclaimed."""
        # Arrange
        uow = FakeUnitOfWork(
            initial_accounts=[
                make_account(4, "Steve", PlatformIdentity.alternate("bedrock-4"))
            ]
        )

        # Act
        result = resolver_for(uow, strict=True).resolve("Steve", SearchMode.BY_DISPLAY_NAME)

        # Assert
        assert result.is_not_found

    def test_unknown_name_is_not_found(self, shared_name_uow):
        result = resolver_for(shared_name_uow).resolve("Herobrine", SearchMode.BY_DISPLAY_NAME)

        assert result == LookupResult.not_found()


class TestResolveStoreUnavailable:
    """Test cases for store outages."""

    @pytest.mark.parametrize("mode", list(SearchMode))
    def test_outage_is_not_not_found(self, shared_name_uow, mode):
        """Test an outage is reported as such, never as NotFound."""
        # Arrange
        shared_name_uow.unavailable = True

        # Act
        result = resolver_for(shared_name_uow).resolve("Steve", mode)

        # Assert
        assert result.is_store_unavailable
        assert not result.is_not_found

    def test_invalid_mode_raises_before_store_access(self, fake_uow):
        """Test mode validation happens before opening a unit of work."""
        with pytest.raises(InvalidSearchModeError):
            resolver_for(fake_uow).resolve("Steve", 9)

        assert fake_uow.enter_count == 0
