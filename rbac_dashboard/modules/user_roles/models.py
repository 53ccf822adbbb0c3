# Supabase table: user_roles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

user_roles:
- user_id: uuid (foreign key to auth.users.id, not null, on delete cascade)
- role_id: uuid (foreign key to roles.id, not null, on delete cascade)
- created_at: timestamptz (default: now())
- primary key (user_id, role_id)
"""
