from supabase import create_client, Client
from rbac_dashboard.config import settings


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Use in the seed script."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @staticmethod
    def get_client_for_token(access_token: str) -> Client:
        """Fresh client acting as the token's user, so row-level policies apply to the caller."""
        client = create_client(settings.supabase_url, settings.supabase_key)
        client.postgrest.auth(access_token)
        return client

    @staticmethod
    def close_client(client: Client):
        """Release the HTTP connection pool of a per-request client"""
        client.postgrest.session.close()


def get_supabase() -> Client:
    return SupabaseClient.get_client()
