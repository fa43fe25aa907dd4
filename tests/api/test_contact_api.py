"""
API tests for the contact form endpoint.
"""

import pytest

from bcb_sounds_ms.features.notifications.infrastructure import get_notification_dispatcher

pytestmark = [pytest.mark.api, pytest.mark.asyncio]


class TestContactEndpoint:
    """Tests for POST /api/contact."""

    async def test_submit_contact(self, async_client, mail_gateway):
        response = await async_client.post(
            "/api/contact",
            json={
                "name": "Jane Doe",
                "email": "jane@example.com",
                "projectType": "Podcast intro",
                "message": "Looking for a 30 second intro.",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Your message has been sent successfully. "
            "We'll get back to you within 24 hours.",
        }
        assert [m.to for m in mail_gateway.outbox] == [
            ["orders@bcbsounds.test"],
            ["jane@example.com"],
        ]
        assert mail_gateway.outbox[0].subject.endswith("Podcast intro")

    async def test_missing_fields(self, async_client, mail_gateway):
        response = await async_client.post("/api/contact", json={"name": "Jane"})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Name, email, and message are required"
        assert mail_gateway.outbox == []

    async def test_invalid_email(self, async_client, mail_gateway):
        response = await async_client.post(
            "/api/contact",
            json={"name": "Jane", "email": "not-an-email", "message": "Hi"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide a valid email address"
        assert mail_gateway.outbox == []

    async def test_malformed_body(self, async_client):
        response = await async_client.post(
            "/api/contact",
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"

    async def test_mail_failure(self, app, async_client, failing_dispatcher):
        app.dependency_overrides[get_notification_dispatcher] = lambda: failing_dispatcher

        response = await async_client.post(
            "/api/contact",
            json={"name": "Jane", "email": "a@b.co", "message": "Hi"},
        )

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Failed to send message. Please try again later."
