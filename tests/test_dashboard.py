"""
Tests for the dashboard shell
"""
import httpx

API = "/api/v1/dashboard"


class TestDashboard:

    def test_dashboard_composes_all_tabs(self, client, seeded_store, admin_context):
        seeded_store.grant("Administrator", "read:users")

        response = client.get(API)

        assert response.status_code == 200
        body = response.json()
        assert body["tabs"] == ["permissions", "roles", "assignments"]
        assert body["user"]["user_id"] == admin_context.user_id
        assert len(body["permissions"]) == 9
        assert len(body["roles"]) == 4
        assert body["assignments"]["role_permissions"][0]["permission_name"] == "read:users"
        assert body["notifications"] == []

    def test_failed_tab_is_empty_and_reported(self, client, seeded_store):
        seeded_store.fail_next("permissions", "select", httpx.ConnectError("connection refused"))

        response = client.get(API)

        assert response.status_code == 200
        body = response.json()
        assert body["permissions"] == []
        assert len(body["roles"]) == 4
        assert [n["description"] for n in body["notifications"]] == ["Failed to fetch permissions"]

    def test_requires_authentication(self, anonymous_client):
        response = anonymous_client.get(API)

        assert response.status_code in (401, 403)
