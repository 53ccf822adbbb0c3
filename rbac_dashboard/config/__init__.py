from rbac_dashboard.config.settings import settings, Settings

__all__ = ["settings", "Settings"]
