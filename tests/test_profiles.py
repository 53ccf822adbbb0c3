"""
Tests for account profiles
"""
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.profiles.service import ProfileService, default_full_name

API = "/api/v1/profiles"


def test_default_full_name_prefers_metadata():
    assert default_full_name("ada@example.com", {"full_name": "Ada Lovelace"}) == "Ada Lovelace"
    assert default_full_name("ada@example.com", {}) == "ada@example.com"
    assert default_full_name("ada@example.com", None) == "ada@example.com"


class TestProfileRoutes:

    def test_list_profiles(self, client, store):
        store.provision_account("zed@example.com")

        response = client.get(API)

        assert response.status_code == 200
        assert [p["email"] for p in response.json()] == ["admin@example.com", "zed@example.com"]

    def test_get_own_profile(self, client, admin_context):
        response = client.get(f"{API}/me")

        assert response.status_code == 200
        assert response.json()["full_name"] == "Ada Admin"
        assert response.json()["user_id"] == admin_context.user_id

    def test_get_profile_by_user(self, client, store):
        user_id = store.provision_account("bob@example.com")

        response = client.get(f"{API}/{user_id}")

        assert response.status_code == 200
        assert response.json()["full_name"] == "bob@example.com"

    def test_get_unknown_profile(self, client):
        response = client.get(f"{API}/missing")

        assert response.status_code == 404

    def test_update_own_profile(self, client, store, admin_context):
        response = client.put(f"{API}/{admin_context.user_id}", json={"full_name": "Ada L."})

        assert response.status_code == 200
        assert response.json()["full_name"] == "Ada L."
        assert store.find_by("profiles", user_id=admin_context.user_id)[0]["full_name"] == "Ada L."

    def test_cannot_update_someone_elses_profile(self, client, store):
        user_id = store.provision_account("bob@example.com", {"full_name": "Bob"})

        response = client.put(f"{API}/{user_id}", json={"full_name": "Robert"})

        assert response.status_code == 403
        assert store.find_by("profiles", user_id=user_id)[0]["full_name"] == "Bob"


def test_missing_profile_is_created_with_defaults(store):
    user_id = store.provision_account("carol@example.com", with_profile=False)
    context = SessionContext(user_id=user_id, email="carol@example.com", access_token="t")

    profile = ProfileService(store, context).get_own_profile()

    assert profile.full_name == "carol@example.com"
    assert len(store.find_by("profiles", user_id=user_id)) == 1
