# Supabase table: role_permissions
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

role_permissions:
- role_id: uuid (foreign key to roles.id, not null, on delete cascade)
- permission_id: uuid (foreign key to permissions.id, not null, on delete cascade)
- created_at: timestamptz (default: now())
- primary key (role_id, permission_id)

Rows have no identity beyond the pair. The overview embeds both parents:
select("role_id, permission_id, roles!inner(name), permissions!inner(name)")
"""
