# Supabase table: permissions
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

permissions:
- id: uuid (primary key, default gen_random_uuid())
- name: text (not null, unique) - "action:resource", e.g. "read:users"
- description: text (nullable)
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now(), refreshed by trigger on update)

Deleting a permission cascades to role_permissions.permission_id.
"""
