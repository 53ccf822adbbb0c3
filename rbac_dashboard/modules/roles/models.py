# Supabase table: roles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

roles:
- id: uuid (primary key, default gen_random_uuid())
- name: text (not null, unique) - e.g., "Administrator", "Viewer"
- description: text (nullable)
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now(), refreshed by trigger on update)

Deleting a role cascades to role_permissions.role_id and user_roles.role_id.
"""
