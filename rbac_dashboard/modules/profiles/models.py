# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, default gen_random_uuid())
- user_id: uuid (foreign key to auth.users.id, unique, not null, on delete cascade)
- email: text (nullable)
- full_name: text (nullable)
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now(), refreshed by trigger on update)

Row-level policies: every authenticated user may read all profiles, but may
only insert or update the row whose user_id is their own (auth.uid()).
"""
