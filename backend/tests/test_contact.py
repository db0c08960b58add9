"""
Site Content API — Contact Form and Inbox Tests
================================================

What we test:
    ✅ Any empty required field → 400 "All fields are required", nothing stored
    ✅ A complete submission → 201, stored with status "new"
    ✅ A demo request needs all four slot fields; the slot is stored
    ✅ Per-IP rate limit → 429 with Retry-After, keyed on the forwarded client IP
    ✅ Inbox is admin-only, newest first; only status/adminNotes are editable
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from starlette.requests import Request

from content_api.config import settings
from content_api.middleware.logging import client_ip_of
from content_api.middleware.rate_limit import SlidingWindowLimiter, contact_limiter
from content_api.models import ContactMessage

VALID_SUBMISSION = {
    "name": "Ana Cruz",
    "email": "ana@example.com",
    "contactNo": "09171234567",
    "message": "I'd like a quote for a mobile app.",
}


async def _count_messages(session_factory) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count(ContactMessage.id)))).scalar_one()


class TestSubmission:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["name", "email", "contactNo", "message"])
    async def test_each_empty_field_is_rejected(self, test_client, session_factory, field):
        body = {**VALID_SUBMISSION, field: ""}

        response = await test_client.post("/api/contact", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "All fields are required"
        assert await _count_messages(session_factory) == 0

    @pytest.mark.asyncio
    async def test_missing_field_is_rejected(self, test_client):
        body = {k: v for k, v in VALID_SUBMISSION.items() if k != "email"}
        response = await test_client.post("/api/contact", json=body)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_whitespace_only_field_is_rejected(self, test_client):
        response = await test_client.post("/api/contact", json={**VALID_SUBMISSION, "name": "   "})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_valid_submission_is_stored_as_new(self, test_client, session_factory):
        body = {**VALID_SUBMISSION, "projectId": 4, "projectTitle": "Inventory App"}

        response = await test_client.post("/api/contact", json=body)

        assert response.status_code == 201
        assert response.json() == {"success": True, "message": "Message sent successfully!"}
        async with session_factory() as session:
            stored = (await session.execute(select(ContactMessage))).scalar_one()
        assert stored.status == "new"
        assert stored.contact_no == "09171234567"
        assert stored.project_id == 4
        assert stored.project_title == "Inventory App"
        assert stored.admin_notes is None

    @pytest.mark.asyncio
    async def test_client_cannot_choose_status(self, test_client, session_factory):
        await test_client.post("/api/contact", json={**VALID_SUBMISSION, "status": "archived"})
        async with session_factory() as session:
            stored = (await session.execute(select(ContactMessage))).scalar_one()
        assert stored.status == "new"


DEMO_SLOT = {"demoMonth": "3", "demoDay": "14", "demoYear": "2026", "demoTime": "10:00 AM"}


class TestDemoRequest:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["demoMonth", "demoDay", "demoYear", "demoTime"])
    async def test_each_missing_slot_field_is_rejected(self, test_client, session_factory, field):
        body = {**VALID_SUBMISSION, "wantsDemo": True, **DEMO_SLOT, field: ""}

        response = await test_client.post("/api/contact", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == (
            "All demo date and time fields are required when requesting a demo"
        )
        assert await _count_messages(session_factory) == 0

    @pytest.mark.asyncio
    async def test_required_fields_are_checked_first(self, test_client):
        body = {**VALID_SUBMISSION, "name": "", "wantsDemo": True}
        response = await test_client.post("/api/contact", json=body)
        assert response.json()["error"] == "All fields are required"

    @pytest.mark.asyncio
    async def test_demo_slot_is_stored(self, test_client, session_factory):
        body = {**VALID_SUBMISSION, "wantsDemo": True, **DEMO_SLOT, "demoYear": 2026}

        response = await test_client.post("/api/contact", json=body)

        assert response.status_code == 201
        async with session_factory() as session:
            stored = (await session.execute(select(ContactMessage))).scalar_one()
        assert stored.wants_demo is True
        assert (stored.demo_month, stored.demo_day, stored.demo_year, stored.demo_time) == (
            "3", "14", "2026", "10:00 AM"
        )

    @pytest.mark.asyncio
    async def test_slot_is_discarded_without_demo_request(self, test_client, session_factory):
        response = await test_client.post("/api/contact", json={**VALID_SUBMISSION, **DEMO_SLOT})

        assert response.status_code == 201
        async with session_factory() as session:
            stored = (await session.execute(select(ContactMessage))).scalar_one()
        assert stored.wants_demo is False
        assert stored.demo_month is None
        assert stored.demo_time is None

    @pytest.mark.asyncio
    async def test_inbox_shows_demo_slot(self, test_client, auth_headers):
        await test_client.post("/api/contact", json={**VALID_SUBMISSION, "wantsDemo": True, **DEMO_SLOT})

        stored = (
            await test_client.get("/api/admin/contact-messages", headers=auth_headers)
        ).json()[0]

        assert stored["wantsDemo"] is True
        assert stored["demoTime"] == "10:00 AM"


class TestNotification:
    @pytest.mark.asyncio
    async def test_stored_message_is_forwarded(self, test_client):
        with patch(
            "content_api.routes.contact.mail_service.forward_contact_message",
            new_callable=AsyncMock,
        ) as forward:
            response = await test_client.post("/api/contact", json=VALID_SUBMISSION)

        assert response.status_code == 201
        forward.assert_awaited_once()
        notification = forward.await_args.args[0]
        assert notification.name == "Ana Cruz"
        assert notification.message_id > 0

    @pytest.mark.asyncio
    async def test_rejected_submission_is_not_forwarded(self, test_client):
        with patch(
            "content_api.routes.contact.mail_service.forward_contact_message",
            new_callable=AsyncMock,
        ) as forward:
            await test_client.post("/api/contact", json={**VALID_SUBMISSION, "email": ""})

        forward.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_mail_failure_does_not_fail_request(
        self, test_client, session_factory, mail_settings
    ):
        with patch("content_api.services.mail_service.smtplib.SMTP_SSL") as smtp:
            smtp.side_effect = OSError("connection refused")
            response = await test_client.post("/api/contact", json=VALID_SUBMISSION)

        assert response.status_code == 201
        assert smtp.called
        assert await _count_messages(session_factory) == 1


class TestRateLimit:
    @pytest.mark.asyncio
    async def test_sixth_submission_in_window_is_limited(self, test_client, session_factory):
        for _ in range(contact_limiter.max_requests):
            response = await test_client.post("/api/contact", json=VALID_SUBMISSION)
            assert response.status_code == 201

        response = await test_client.post("/api/contact", json=VALID_SUBMISSION)

        assert response.status_code == 429
        assert response.json()["error"] == "Too many submissions. Please try again in a minute."
        assert int(response.headers["Retry-After"]) > 0
        assert await _count_messages(session_factory) == contact_limiter.max_requests

    def test_window_slides(self):
        now = [1000.0]
        limiter = SlidingWindowLimiter(max_requests=2, window=60, clock=lambda: now[0])

        assert limiter.hit("1.2.3.4") is None
        assert limiter.hit("1.2.3.4") is None
        assert limiter.hit("1.2.3.4") == 61
        assert limiter.hit("5.6.7.8") is None

        now[0] += 61
        assert limiter.hit("1.2.3.4") is None

    def test_reset_clears_counts(self):
        limiter = SlidingWindowLimiter(max_requests=1, window=60)
        limiter.hit("ip")
        limiter.reset()
        assert limiter.hit("ip") is None

    @pytest.mark.asyncio
    async def test_forwarded_clients_have_separate_buckets(self, test_client):
        first = {"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}
        for _ in range(contact_limiter.max_requests):
            await test_client.post("/api/contact", json=VALID_SUBMISSION, headers=first)

        limited = await test_client.post("/api/contact", json=VALID_SUBMISSION, headers=first)
        other = await test_client.post(
            "/api/contact", json=VALID_SUBMISSION, headers={"X-Forwarded-For": "198.51.100.9"}
        )

        assert limited.status_code == 429
        assert other.status_code == 201


def _request(headers=None, client=("10.0.0.1", 5000)) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "POST", "path": "/", "headers": raw, "client": client})


class TestClientIp:
    def test_first_forwarded_entry_wins(self):
        request = _request({"X-Forwarded-For": " 203.0.113.7 , 10.0.0.1", "X-Real-IP": "1.1.1.1"})
        assert client_ip_of(request) == "203.0.113.7"

    def test_real_ip_when_not_forwarded(self):
        assert client_ip_of(_request({"X-Real-IP": "198.51.100.9"})) == "198.51.100.9"

    def test_socket_peer_without_proxy_headers(self):
        assert client_ip_of(_request()) == "10.0.0.1"

    def test_unknown_without_client(self):
        assert client_ip_of(_request(client=None)) == "unknown"

    def test_forwarded_headers_ignored_when_untrusted(self):
        request = _request({"X-Forwarded-For": "203.0.113.7"})
        with patch.object(settings, "trust_forwarded_headers", False):
            assert client_ip_of(request) == "10.0.0.1"


class TestInbox:
    @pytest.mark.asyncio
    async def test_requires_auth(self, test_client):
        assert (await test_client.get("/api/admin/contact-messages")).status_code == 401
        assert (await test_client.delete("/api/admin/contact-messages/1")).status_code == 401

    @pytest.mark.asyncio
    async def test_lists_newest_first(self, test_client, auth_headers):
        await test_client.post("/api/contact", json={**VALID_SUBMISSION, "name": "First"})
        await test_client.post("/api/contact", json={**VALID_SUBMISSION, "name": "Second"})

        response = await test_client.get("/api/admin/contact-messages", headers=auth_headers)

        assert response.status_code == 200
        assert [m["name"] for m in response.json()] == ["Second", "First"]
        assert response.json()[0]["contactNo"] == "09171234567"

    @pytest.mark.asyncio
    async def test_update_status_and_notes(self, test_client, auth_headers):
        await test_client.post("/api/contact", json=VALID_SUBMISSION)
        message_id = (
            await test_client.get("/api/admin/contact-messages", headers=auth_headers)
        ).json()[0]["id"]

        response = await test_client.put(
            f"/api/admin/contact-messages/{message_id}",
            json={"status": "replied", "adminNotes": "Sent quote", "message": "changed"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        stored = (
            await test_client.get("/api/admin/contact-messages", headers=auth_headers)
        ).json()[0]
        assert stored["status"] == "replied"
        assert stored["adminNotes"] == "Sent quote"
        assert stored["message"] == VALID_SUBMISSION["message"]

    @pytest.mark.asyncio
    async def test_unknown_status_is_422(self, test_client, auth_headers):
        response = await test_client.put(
            "/api/admin/contact-messages/1", json={"status": "spam"}, headers=auth_headers
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delete(self, test_client, auth_headers, session_factory):
        await test_client.post("/api/contact", json=VALID_SUBMISSION)
        message_id = (
            await test_client.get("/api/admin/contact-messages", headers=auth_headers)
        ).json()[0]["id"]

        response = await test_client.delete(
            f"/api/admin/contact-messages/{message_id}", headers=auth_headers
        )

        assert response.status_code == 200
        assert await _count_messages(session_factory) == 0
