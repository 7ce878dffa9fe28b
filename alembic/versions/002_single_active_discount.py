"""Single active discount

- Partial unique index: at most one discount with is_active = true
- set_active_row(table_name, target_id): deactivate every other row and
  activate the target in one transaction. Returns false when the target
  does not exist. Called through the Supabase RPC endpoint.

Revision ID: 002_single_active_discount
Revises: 001_content_tables
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "002_single_active_discount"
down_revision = "001_content_tables"
branch_labels = None
depends_on = None


SET_ACTIVE_ROW = """
CREATE OR REPLACE FUNCTION set_active_row(table_name text, target_id uuid)
RETURNS boolean
LANGUAGE plpgsql
SECURITY DEFINER
SET search_path = public
AS $$
DECLARE
    found boolean;
BEGIN
    IF table_name NOT IN ('discounts') THEN
        RAISE EXCEPTION 'set_active_row: table % not allowed', table_name;
    END IF;

    EXECUTE format('SELECT EXISTS (SELECT 1 FROM %I WHERE id = $1)', table_name)
        INTO found USING target_id;
    IF NOT found THEN
        RETURN false;
    END IF;

    EXECUTE format(
        'UPDATE %I SET is_active = false, updated_at = now() WHERE is_active AND id <> $1',
        table_name
    ) USING target_id;
    EXECUTE format(
        'UPDATE %I SET is_active = true, updated_at = now() WHERE id = $1',
        table_name
    ) USING target_id;
    RETURN true;
END;
$$;
"""


def upgrade() -> None:
    # Keep the most recently updated active row if several exist
    op.execute("""
        UPDATE discounts SET is_active = false
        WHERE is_active AND id NOT IN (
            SELECT id FROM discounts WHERE is_active
            ORDER BY updated_at DESC LIMIT 1
        )
    """)

    op.create_index(
        "uq_discounts_single_active",
        "discounts",
        ["is_active"],
        unique=True,
        postgresql_where=sa.text("is_active"),
    )

    op.execute(SET_ACTIVE_ROW)
    op.execute("REVOKE ALL ON FUNCTION set_active_row(text, uuid) FROM PUBLIC")
    op.execute("GRANT EXECUTE ON FUNCTION set_active_row(text, uuid) TO service_role")


def downgrade() -> None:
    op.execute("DROP FUNCTION IF EXISTS set_active_row(text, uuid)")
    op.drop_index("uq_discounts_single_active", table_name="discounts")
