"""
Seed data for the RBAC dataset.
Permissions follow the ``action:resource`` naming convention.
Used by the seed script and mirrored by the schema migration.
"""

RESOURCES = ["users", "roles", "permissions"]

ACTIONS = {
    "read": "Can view {resource}",
    "write": "Can create and update {resource}",
    "delete": "Can delete {resource}",
}

# Descriptions that do not follow the generated pattern
DESCRIPTION_OVERRIDES = {
    "read:users": "Can view user information",
}

SEED_ROLES = [
    {"name": "Administrator", "description": "Full system access"},
    {"name": "Content Editor", "description": "Can manage content"},
    {"name": "Support Agent", "description": "Can view and assist users"},
    {"name": "Viewer", "description": "Read-only access"},
]


def get_seed_permissions():
    """
    Returns the seed permissions, grouped by resource in declaration order.
    Format: [{"name": "read:users", "description": "Can view user information"}, ...]
    """
    permissions = []
    for resource in RESOURCES:
        for action, template in ACTIONS.items():
            name = f"{action}:{resource}"
            permissions.append({
                "name": name,
                "description": DESCRIPTION_OVERRIDES.get(name, template.format(resource=resource)),
            })
    return permissions


SEED_PERMISSIONS = get_seed_permissions()
