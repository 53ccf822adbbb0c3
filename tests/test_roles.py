"""
Tests for the role manager routes
"""

API = "/api/v1/roles"


class TestRoleRoutes:
    """Same contract as permissions, applied to roles"""

    def test_list_roles_ordered_by_name(self, client, seeded_store):
        response = client.get(API)

        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == [
            "Administrator", "Content Editor", "Support Agent", "Viewer"
        ]

    def test_create_role(self, client, seeded_store):
        response = client.post(API, json={"name": "Auditor", "description": "Reviews access"})

        assert response.status_code == 201
        body = response.json()
        assert body["role"]["name"] == "Auditor"
        assert body["notifications"][0]["description"] == "Role created successfully"
        assert [r["name"] for r in body["roles"]][0] == "Administrator"
        assert len(body["roles"]) == 5

    def test_create_duplicate_role_fails(self, client, seeded_store):
        response = client.post(API, json={"name": "Viewer"})

        assert response.status_code == 409
        assert response.json()["detail"] == 'A role named "Viewer" already exists'
        assert len(seeded_store.find_by("roles", name="Viewer")) == 1

    def test_update_role_refreshes_updated_at(self, client, seeded_store):
        role_id = seeded_store.role_id("Viewer")
        created_at = seeded_store.find("roles", role_id)["created_at"]

        response = client.put(f"{API}/{role_id}", json={"name": "Read Only", "description": None})

        assert response.status_code == 200
        role = response.json()["role"]
        assert role["name"] == "Read Only"
        assert role["description"] is None
        assert seeded_store.find("roles", role_id)["updated_at"] >= created_at

    def test_update_unknown_role_is_a_no_op(self, client, seeded_store):
        response = client.put(f"{API}/00000000-0000-0000-0000-000000000000", json={"name": "Ghost"})

        assert response.status_code == 200
        assert response.json()["role"] is None
        assert not seeded_store.find_by("roles", name="Ghost")

    def test_delete_requires_confirmation(self, client, seeded_store):
        role_id = seeded_store.role_id("Viewer")

        response = client.delete(f"{API}/{role_id}", params={"confirm": "false"})

        assert response.status_code == 400
        assert seeded_store.find("roles", role_id) is not None

    def test_delete_role_cascades_only_its_rows(self, client, seeded_store, admin_context):
        seeded_store.grant("Viewer", "read:users", "read:roles")
        seeded_store.grant("Support Agent", "read:users")
        viewer_id = seeded_store.role_id("Viewer")
        support_id = seeded_store.role_id("Support Agent")
        seeded_store.rows["user_roles"].extend([
            {"user_id": admin_context.user_id, "role_id": viewer_id, "created_at": "2025-07-30T00:00:00+00:00"},
            {"user_id": admin_context.user_id, "role_id": support_id, "created_at": "2025-07-30T00:00:00+00:00"},
        ])

        response = client.delete(f"{API}/{viewer_id}", params={"confirm": "true"})

        assert response.status_code == 200
        assert response.json()["notifications"][0]["description"] == "Role deleted successfully"
        assert not seeded_store.find_by("role_permissions", role_id=viewer_id)
        assert not seeded_store.find_by("user_roles", role_id=viewer_id)
        assert seeded_store.permission_names_for("Support Agent") == {"read:users"}
        assert len(seeded_store.find_by("user_roles", role_id=support_id)) == 1
