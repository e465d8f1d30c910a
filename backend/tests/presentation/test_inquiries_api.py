"""API tests for the contact, event and network forms."""

from fakes import MiB, PDF


class TestContact:
    """Test POST /contact."""

    async def test_contact_message_created(self, api_client):
        response = await api_client.post(
            "/api/v1/contact",
            json={"name": "Ada", "email": "ada@example.com", "message": "When is the next cohort?"},
        )

        assert response.status_code == 201
        assert response.json() == {"success": True, "id": 1}

    async def test_invalid_phone(self, api_client):
        response = await api_client.post(
            "/api/v1/contact",
            json={"name": "Ada", "email": "ada@example.com", "phone": "12-34", "message": "Hi"},
        )

        assert response.status_code == 422
        assert "phone" in response.json()["errors"]


class TestEventRegistration:
    """Test POST /events/registrations."""

    async def test_registration_created(self, api_client):
        response = await api_client.post(
            "/api/v1/events/registrations",
            json={"eventName": "Demo Day", "email": "ada@example.com", "organization": "Engines Ltd"},
        )

        assert response.status_code == 201

    async def test_invalid_email(self, api_client):
        response = await api_client.post(
            "/api/v1/events/registrations",
            json={"eventName": "Demo Day", "email": "ada"},
        )

        assert response.status_code == 422
        assert "email" in response.json()["errors"]


class TestNetworkSignup:
    """Test POST /network/signups."""

    async def test_signup_with_cv(self, api_client):
        response = await api_client.post(
            "/api/v1/network/signups",
            data={"name": "Grace Hopper", "role": "Mentor", "expertiseAreas": "compilers, leadership"},
            files={"cv": ("cv.pdf", b"%PDF-1.4 cv", PDF)},
        )

        assert response.status_code == 201
        assert response.json()["success"] is True

    async def test_unknown_role(self, api_client):
        response = await api_client.post("/api/v1/network/signups", data={"name": "Grace", "role": "Founder"})

        assert response.status_code == 422
        assert "role" in response.json()["errors"]

    async def test_oversized_cv(self, api_client):
        response = await api_client.post(
            "/api/v1/network/signups",
            data={"name": "Grace", "role": "Investor"},
            files={"cv": ("cv.pdf", b"\0" * (5 * MiB + 1), PDF)},
        )

        assert response.status_code == 422
        assert "cv" in response.json()["errors"]

    async def test_blank_name_rejected_without_storing_cv(self, api_client):
        response = await api_client.post(
            "/api/v1/network/signups",
            data={"name": "  ", "role": "Mentor"},
            files={"cv": ("cv.pdf", b"%PDF-1.4 cv", PDF)},
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"name": "Name is required."}
        root = api_client.file_storage.root
        assert not root.exists() or not any(p.is_file() for p in root.rglob("*"))
