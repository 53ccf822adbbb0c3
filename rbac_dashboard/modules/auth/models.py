# Supabase Auth
# This module uses Supabase's built-in authentication system
# Accounts live in auth.users; the profile row is created by a trigger

"""
Supabase Auth provides:
- auth.sign_up() - Register new accounts (options.data becomes raw_user_meta_data)
- auth.sign_in_with_password() - Authenticate accounts
- auth.get_user() - Resolve the account behind a JWT
- auth.sign_out() - Logout

The on_auth_user_created trigger inserts public.profiles with
full_name = COALESCE(raw_user_meta_data ->> 'full_name', email).
"""
