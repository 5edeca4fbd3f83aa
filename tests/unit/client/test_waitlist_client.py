import json
from unittest.mock import AsyncMock
from unittest.mock import MagicMock

import aiohttp

from rapidjobs.client.waitlist_client import SubmissionResult
from rapidjobs.client.waitlist_client import WaitlistClient


def _mock_session(status: int, body=None, json_error: Exception = None):
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=body, side_effect=json_error)
    session = MagicMock()
    session.post.return_value.__aenter__.return_value = response
    return session, response


async def test_invalid_email_sends_nothing():
    session, _ = _mock_session(200, {"ok": True})
    client = WaitlistClient("http://localhost:5000", session=session)

    result = await client.join("not-an-email")

    assert result == SubmissionResult(
        ok=False, message="Please enter a valid email.", request_sent=False
    )
    session.post.assert_not_called()


async def test_invalid_email_localized():
    session, _ = _mock_session(200, {"ok": True})
    client = WaitlistClient("http://localhost:5000", locale="es", session=session)

    result = await client.join("nope")

    assert result.message == "Ingresa un correo válido."


async def test_success():
    session, _ = _mock_session(200, {"ok": True})
    client = WaitlistClient("http://localhost:5000", session=session)

    result = await client.join("user@example.com")

    assert result == SubmissionResult(
        ok=True, message="You're on the waitlist - thanks!", request_sent=True
    )
    session.post.assert_called_once_with(
        "http://localhost:5000/api/waitlist", json={"email": "user@example.com"}
    )
    assert not client.is_busy


async def test_busy_while_request_in_flight():
    session, response = _mock_session(200)
    client = WaitlistClient("http://localhost:5000", session=session)
    busy_states = []

    async def _json(**kwargs):
        busy_states.append(client.is_busy)
        return {"ok": True}

    response.json = _json

    await client.join("user@example.com")

    assert busy_states == [True]
    assert not client.is_busy


async def test_server_error_message():
    session, _ = _mock_session(400, {"error": "Invalid email"})
    client = WaitlistClient("http://localhost:5000", session=session)

    result = await client.join("user@example.com")

    assert result == SubmissionResult(
        ok=False, message="Invalid email", request_sent=True
    )
    assert not client.is_busy


async def test_server_error_without_message():
    session, _ = _mock_session(500, {"unexpected": True})
    client = WaitlistClient("http://localhost:5000", session=session)

    result = await client.join("user@example.com")

    assert result.message == "Server error"
    assert not result.ok


async def test_malformed_response():
    session, _ = _mock_session(
        200, json_error=json.JSONDecodeError("Expecting value", "<html>", 0)
    )
    client = WaitlistClient("http://localhost:5000", session=session)

    result = await client.join("user@example.com")

    assert result == SubmissionResult(
        ok=False, message="Server error", request_sent=True
    )
    assert not client.is_busy


async def test_network_error():
    session = MagicMock()
    session.post.side_effect = aiohttp.ClientConnectionError("refused")
    client = WaitlistClient("http://localhost:5000/", session=session)

    result = await client.join("user@example.com")

    assert not result.ok
    assert result.message == "Server error"
    assert not client.is_busy
