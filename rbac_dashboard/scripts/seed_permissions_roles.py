"""
Seed Permissions and Roles Script
This script populates the permissions and roles tables with the default RBAC dataset.
Safe to re-run: existing rows (matched by name) get their description refreshed.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from rbac_dashboard.config.seed_data import SEED_PERMISSIONS, SEED_ROLES
from rbac_dashboard.database.supabase_client import SupabaseClient
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def upsert_by_name(supabase: Client, table: str, row: dict) -> str:
    """Insert the row, or update its description when the name exists. Returns "created" or "updated"."""
    existing = supabase.table(table)\
        .select("id")\
        .eq("name", row["name"])\
        .execute()

    if existing.data:
        supabase.table(table)\
            .update({"description": row["description"]})\
            .eq("name", row["name"])\
            .execute()
        logger.debug(f"Updated {table} row: {row['name']}")
        return "updated"

    supabase.table(table).insert({
        "name": row["name"],
        "description": row["description"]
    }).execute()
    logger.debug(f"Created {table} row: {row['name']}")
    return "created"


def seed_table(supabase: Client, table: str, rows: list) -> int:
    logger.info(f"Seeding {table}...")
    counts = {"created": 0, "updated": 0}
    for row in rows:
        try:
            counts[upsert_by_name(supabase, table, row)] += 1
        except Exception as e:
            logger.error(f"Error processing {table} row {row['name']}: {e}")

    logger.info(f"{table} seeded: {counts['created']} created, {counts['updated']} updated")
    return counts["created"] + counts["updated"]


def seed_permissions(supabase: Client) -> int:
    """Seed the action:resource permissions"""
    return seed_table(supabase, "permissions", SEED_PERMISSIONS)


def seed_roles(supabase: Client) -> int:
    """Seed the default roles"""
    return seed_table(supabase, "roles", SEED_ROLES)


def main():
    """Main function to seed permissions and roles"""
    try:
        supabase = SupabaseClient.get_service_client()

        logger.info("Starting permissions and roles seeding...")

        perm_count = seed_permissions(supabase)
        role_count = seed_roles(supabase)

        logger.info("Seeding completed successfully!")
        logger.info(f"Total: {perm_count} permissions, {role_count} roles processed")

    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
