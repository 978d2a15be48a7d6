# tests/test_session_gate.py
from datetime import timedelta

import pytest
from jose import jwt

from vibespecs.auth import SessionGate
from vibespecs.core.exceptions import (
    MalformedCredentialError,
    MissingCredentialError,
    SessionExpiredError,
    UnknownSubjectError,
)
from vibespecs.stores import MemoryUserStore

SECRET = "test-secret"


@pytest.fixture
def users():
    return MemoryUserStore()


@pytest.fixture
def gate(users):
    return SessionGate(users, secret_key=SECRET)


@pytest.mark.asyncio
async def test_issue_then_verify_returns_same_identity(users, gate):
    user = await users.create("grace@example.com", "Grace", "hash", plan="pro")
    identity = user.identity()

    resolved = await gate.verify(gate.issue(identity))

    assert resolved == identity
    assert resolved.plan == "pro"


@pytest.mark.asyncio
async def test_empty_credential_is_missing(gate):
    with pytest.raises(MissingCredentialError):
        await gate.verify("")


@pytest.mark.asyncio
async def test_expired_credential(users):
    user = await users.create("grace@example.com", "Grace", "hash")
    gate = SessionGate(users, secret_key=SECRET, ttl=timedelta(seconds=-30))
    with pytest.raises(SessionExpiredError):
        await gate.verify(gate.issue(user.identity()))


@pytest.mark.asyncio
async def test_garbage_credential_is_malformed(gate):
    with pytest.raises(MalformedCredentialError):
        await gate.verify("not-a-jwt")


@pytest.mark.asyncio
async def test_credential_signed_with_other_key_is_malformed(users, gate):
    user = await users.create("grace@example.com", "Grace", "hash")
    forged = SessionGate(users, secret_key="someone-else").issue(user.identity())
    with pytest.raises(MalformedCredentialError):
        await gate.verify(forged)


@pytest.mark.asyncio
async def test_credential_without_identity_claims_is_malformed(gate):
    token = jwt.encode({"sub": "abc"}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedCredentialError):
        await gate.verify(token)


@pytest.mark.asyncio
async def test_deleted_subject_is_unknown(users, gate):
    user = await users.create("grace@example.com", "Grace", "hash")
    token = gate.issue(user.identity())

    other_gate = SessionGate(MemoryUserStore(), secret_key=SECRET)
    with pytest.raises(UnknownSubjectError):
        await other_gate.verify(token)
