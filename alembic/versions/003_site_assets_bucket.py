"""Site assets storage bucket

Public bucket for uploaded images with read access for everyone and upload
access for signed-in admins.

Revision ID: 003_site_assets_bucket
Revises: 002_single_active_discount
Create Date: 2026-10-19
"""

from alembic import op

from dairy_site.services.storage import BUCKET_SETUP_SQL

# revision identifiers, used by Alembic.
revision = "003_site_assets_bucket"
down_revision = "002_single_active_discount"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute(BUCKET_SETUP_SQL)


def downgrade() -> None:
    op.execute('DROP POLICY IF EXISTS "Authenticated users can upload site assets" ON storage.objects')
    op.execute('DROP POLICY IF EXISTS "Public read access for site assets" ON storage.objects')
