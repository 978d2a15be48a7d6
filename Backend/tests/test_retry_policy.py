# tests/test_retry_policy.py
from unittest.mock import AsyncMock

import pytest

from vibespecs.core.exceptions import ConfigurationError, UpstreamError, ValidationError
from vibespecs.generation import RetryPolicy


@pytest.mark.asyncio
async def test_default_policy_is_one_shot():
    fn = AsyncMock(side_effect=UpstreamError("gemini", "boom"))
    with pytest.raises(UpstreamError):
        await RetryPolicy().run(fn, "idea")
    assert fn.await_count == 1


@pytest.mark.asyncio
async def test_upstream_errors_are_retried_until_success():
    fn = AsyncMock(side_effect=[UpstreamError("gemini", "boom"), UpstreamError("gemini", "boom"), "doc"])
    policy = RetryPolicy(max_retries=2, base_delay=0)
    assert await policy.run(fn, "idea") == "doc"
    assert fn.await_count == 3
    fn.assert_awaited_with("idea")


@pytest.mark.asyncio
async def test_retries_are_bounded():
    fn = AsyncMock(side_effect=UpstreamError("gemini", "boom"))
    with pytest.raises(UpstreamError):
        await RetryPolicy(max_retries=2, base_delay=0).run(fn)
    assert fn.await_count == 3


@pytest.mark.asyncio
async def test_configuration_error_is_never_retried():
    fn = AsyncMock(side_effect=ConfigurationError("GEMINI_API_KEY not configured"))
    with pytest.raises(ConfigurationError):
        await RetryPolicy(max_retries=5, base_delay=0, retry_on=(Exception,)).run(fn)
    assert fn.await_count == 1


@pytest.mark.asyncio
async def test_validation_error_is_not_retried_by_default():
    fn = AsyncMock(side_effect=ValidationError("bad output"))
    with pytest.raises(ValidationError):
        await RetryPolicy(max_retries=3, base_delay=0).run(fn)
    assert fn.await_count == 1


def test_linear_backoff():
    policy = RetryPolicy(base_delay=2.0)
    assert [policy.get_retry_delay(i) for i in range(3)] == [2.0, 4.0, 6.0]
