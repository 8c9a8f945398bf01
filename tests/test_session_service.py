"""
Session validation and expired-token purge tests
"""

import asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from customers_service.application.services.session_service import (
    as_utc,
    authenticate_token,
    purge_expired_tokens,
)
from customers_service.application.services.token_service import issue_token
from customers_service.core.exceptions import ExpiredTokenError, InternalError, NoSuchUserError
from customers_service.domain.models.customer_token import CustomerToken
from customers_service.scheduler.jobs import purge_expired_tokens_job


def add_token(db, customer_id, value, expires_at):
    db.add(CustomerToken(
        token=value,
        customer_id=customer_id,
        issued_at=expires_at - timedelta(hours=1),
        expires_at=expires_at,
    ))
    db.commit()


class TestAuthenticateToken:
    def test_never_issued_token(self, store, customer):
        with pytest.raises(NoSuchUserError):
            authenticate_token(store, "f" * 512)

    def test_expiry_boundary(self, store, customer):
        token = issue_token(store, "5551234", "secret")
        _, expires_at = store.find_token_owner(token)
        expires_at = as_utc(expires_at)

        assert authenticate_token(store, token, now=expires_at - timedelta(seconds=1)) == customer.id

        with pytest.raises(ExpiredTokenError):
            authenticate_token(store, token, now=expires_at)
        with pytest.raises(ExpiredTokenError):
            authenticate_token(store, token, now=expires_at + timedelta(days=1))

    def test_validation_does_not_extend_expiry(self, store, customer):
        token = issue_token(store, "5551234", "secret")
        _, before = store.find_token_owner(token)
        authenticate_token(store, token)
        _, after = store.find_token_owner(token)
        assert before == after

    def test_comparison_is_chronological_across_offsets(self):
        # 13:30 at +02:00 is 11:30 UTC, still before a 12:00 UTC expiry
        store = MagicMock()
        store.find_token_owner.return_value = (3, datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))
        now = datetime(2026, 1, 1, 13, 30, tzinfo=timezone(timedelta(hours=2)))
        assert authenticate_token(store, "t", now=now) == 3

    def test_naive_expiry_is_treated_as_utc(self):
        store = MagicMock()
        store.find_token_owner.return_value = (3, datetime(2026, 1, 1, 12, 0))
        with pytest.raises(ExpiredTokenError):
            authenticate_token(store, "t", now=datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))

    def test_lookup_failure(self):
        store = MagicMock()
        store.find_token_owner.side_effect = SQLAlchemyError("timeout")
        with pytest.raises(InternalError):
            authenticate_token(store, "t")


class TestPurgeExpiredTokens:
    def test_purges_only_expired(self, db, store, customer):
        now = datetime.now(timezone.utc)
        add_token(db, customer.id, "a" * 512, now - timedelta(minutes=5))
        add_token(db, customer.id, "b" * 512, now + timedelta(minutes=5))

        assert purge_expired_tokens(store, now=now, grace=timedelta(0)) == 1
        assert store.find_token_owner("a" * 512) is None
        assert store.find_token_owner("b" * 512) is not None

    def test_default_grace_keeps_recently_expired(self, db, store, customer):
        now = datetime.now(timezone.utc)
        add_token(db, customer.id, "d" * 512, now - timedelta(days=2))
        add_token(db, customer.id, "e" * 512, now - timedelta(minutes=5))

        assert purge_expired_tokens(store, now=now) == 1
        assert store.find_token_owner("d" * 512) is None
        assert store.find_token_owner("e" * 512) is not None

    def test_expired_token_inside_grace_stays_expired_after_purge(self, store, customer):
        token = issue_token(store, "5551234", "secret")
        _, expires_at = store.find_token_owner(token)
        later = as_utc(expires_at) + timedelta(seconds=1)

        assert purge_expired_tokens(store, now=later) == 0
        with pytest.raises(ExpiredTokenError):
            authenticate_token(store, token, now=later)

    def test_cutoff_passed_to_store(self):
        store = MagicMock()
        store.purge_expired_tokens.return_value = 0
        now = datetime(2026, 1, 2, 12, 0, tzinfo=timezone.utc)

        purge_expired_tokens(store, now=now, grace=timedelta(hours=3))

        store.purge_expired_tokens.assert_called_once_with(datetime(2026, 1, 2, 9, 0, tzinfo=timezone.utc))

    def test_purge_failure(self):
        store = MagicMock()
        store.purge_expired_tokens.side_effect = SQLAlchemyError("locked")
        with pytest.raises(InternalError):
            purge_expired_tokens(store)

    def test_scheduled_job(self, db, customer):
        add_token(db, customer.id, "c" * 512, datetime.now(timezone.utc) - timedelta(days=2))

        assert asyncio.run(purge_expired_tokens_job()) == 1
        assert db.scalar(select(func.count()).select_from(CustomerToken)) == 0
