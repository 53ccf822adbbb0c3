"""
Pytest configuration and fixtures for backend tests
"""
import pytest
from fastapi.testclient import TestClient

from rbac_dashboard.main import app
from rbac_dashboard.core.dependencies import get_session_context, get_user_supabase
from rbac_dashboard.database.supabase_client import get_supabase
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.auth.service import clear_auth_cache
from rbac_dashboard.scripts.seed_permissions_roles import seed_permissions, seed_roles
from tests.fake_supabase import FakeSupabase


@pytest.fixture
def store():
    """Empty in-memory data store"""
    return FakeSupabase()


@pytest.fixture
def seeded_store(store):
    """Store holding the default permissions and roles, with the call log cleared"""
    seed_permissions(store)
    seed_roles(store)
    store.calls.clear()
    return store


@pytest.fixture
def admin_context(store):
    """Session of a signed-in administrator"""
    user_id = store.provision_account("admin@example.com", {"full_name": "Ada Admin"})
    return SessionContext(
        user_id=user_id,
        email="admin@example.com",
        access_token="test-token",
        user_metadata={"full_name": "Ada Admin"},
    )


@pytest.fixture
def client(store, admin_context):
    """Test client already authenticated as the administrator"""
    app.dependency_overrides[get_supabase] = lambda: store
    app.dependency_overrides[get_user_supabase] = lambda: store
    app.dependency_overrides[get_session_context] = lambda: admin_context
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(store):
    """Test client that has to authenticate through the auth endpoints"""
    app.dependency_overrides[get_supabase] = lambda: store
    app.dependency_overrides[get_user_supabase] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_auth_cache()
