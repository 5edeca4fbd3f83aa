from unittest.mock import AsyncMock

import pytest

from rapidjobs.domain.waitlist import join_waitlist_use_case as use_case
from rapidjobs.domain.waitlist.entities import ConfirmationEmailError
from rapidjobs.domain.waitlist.entities import EmailProviderError
from rapidjobs.domain.waitlist.entities import WaitlistConfig
from rapidjobs.domain.waitlist.entities import WaitlistSignup
from rapidjobs.domain.waitlist.entities import WaitlistSignupResult
from rapidjobs.repository.email_api_repository import EmailApiRepository

SENDER = "Rapid Jobs <no-reply@emails.rapidjobs.app>"
OWNER = "owner@rapidjobs.app"


def _repository() -> AsyncMock:
    repository = AsyncMock(spec=EmailApiRepository)
    repository.send.side_effect = ["confirmation-id", "notification-id"]
    return repository


async def test_confirmation_only_without_owner():
    repository = _repository()

    result = await use_case.execute(
        WaitlistSignup(email="a@b.com"), WaitlistConfig(sender=SENDER), repository
    )

    assert result == WaitlistSignupResult(confirmation_id="confirmation-id")
    repository.send.assert_awaited_once()
    message = repository.send.await_args.args[0]
    assert message.to == ["a@b.com"]
    assert message.sender == SENDER


async def test_notifies_owner():
    repository = _repository()

    result = await use_case.execute(
        WaitlistSignup(email="a@b.com"),
        WaitlistConfig(sender=SENDER, owner_email=OWNER),
        repository,
    )

    assert result == WaitlistSignupResult(
        confirmation_id="confirmation-id", notification_id="notification-id"
    )
    assert repository.send.await_count == 2
    confirmation = repository.send.await_args_list[0].args[0]
    notification = repository.send.await_args_list[1].args[0]
    assert confirmation.to == ["a@b.com"]
    assert notification.to == [OWNER]
    assert "a@b.com" in notification.html


async def test_confirmation_failure_skips_notification():
    repository = AsyncMock(spec=EmailApiRepository)
    repository.send.side_effect = EmailProviderError(422, "Invalid `to` field")

    with pytest.raises(ConfirmationEmailError) as e:
        await use_case.execute(
            WaitlistSignup(email="a@b.com"),
            WaitlistConfig(sender=SENDER, owner_email=OWNER),
            repository,
        )
    assert e.value.email == "a@b.com"
    assert e.value.reason == "Invalid `to` field"
    repository.send.assert_awaited_once()


async def test_notification_failure_keeps_signup():
    repository = AsyncMock(spec=EmailApiRepository)
    repository.send.side_effect = [
        "confirmation-id",
        EmailProviderError(500, "provider down"),
    ]

    result = await use_case.execute(
        WaitlistSignup(email="a@b.com"),
        WaitlistConfig(sender=SENDER, owner_email=OWNER),
        repository,
    )

    assert result.confirmation_id == "confirmation-id"
    assert result.notification_id is None
    assert result.notification_failed
    assert repository.send.await_count == 2


async def test_same_email_twice_sends_twice():
    repository = AsyncMock(spec=EmailApiRepository)
    repository.send.return_value = "id"
    config = WaitlistConfig(sender=SENDER)

    await use_case.execute(WaitlistSignup(email="test@example.com"), config, repository)
    await use_case.execute(WaitlistSignup(email="test@example.com"), config, repository)

    assert repository.send.await_count == 2
