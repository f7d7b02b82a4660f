"""create option tables

Revision ID: 20241220_0001
Revises:
Create Date: 2024-12-20 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20241220_0001'
down_revision = None
branch_labels = None
depends_on = None


# Options whose id is generated by the service ("TENDER_STATUS_OPT_<timestamp>_<n>")
STRING_ID_TABLES = (
    'account_type_option',
    'position_option',
    'user_status_option',
    'archive_strategy_option',
    'log_level_option',
    'metadata_type_option',
    'bid_security_type_option',
    'clarification_request_status_option',
    'evaluation_criteria_phase_option',
    'lot_bidding_eligibility_option',
    'market_scope_option',
    'prebid_event_type',
    'selection_method_option',
    'tender_required_document_type',
    'tender_stage_option',
    'tender_status_option',
    'business_category_option',
    'business_type_option',
    'ownership_nature_option',
    'country_option',
    'country_code_option',
    'organization_role_option',
    'authority_type_option',
    'civil_society_type_option',
    'donor_type_option',
    'currency_option',
    'language_option',
    'procurement_method_threshold',
    'theme_status_option',
    'workspace_type_option',
    'execution_period_option',
    'procurement_method_option',
    'procurement_progress_option',
    'scheme_option',
    'source_of_fund_option',
    'unit_of_measure_option',
    'procurement_requisition_status_option',
    'workflow_stage_status_option',
    'reason_option',
)

# Columns beyond the shared ones
EXTRA_COLUMNS = {
    'country_option': (
        ('code', 255),
        ('dial_code', 255),
    ),
}

# Options whose id is assigned by the database
NUMERIC_ID_TABLES = (
    'gender_option',
    'plan_status_option',
    'prerequisites_activity_type_option',
    'procurement_type_option',
)


def _create_option_table(table_name: str, id_column: sa.Column) -> None:
    extra_columns = [
        sa.Column(name, sa.String(length=length), nullable=False)
        for name, length in EXTRA_COLUMNS.get(table_name, ())
    ]
    op.create_table(
        table_name,
        id_column,
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        *extra_columns,
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            'deleted_at',
            sa.DateTime(timezone=True),
            nullable=True,
            comment='Set when soft-deleted; NULL means active'
        ),
    )
    # Not unique: names only have to be unique among active rows
    op.create_index(f'ix_{table_name}_name', table_name, ['name'])


def upgrade() -> None:
    """Create one table per option entity."""
    for table_name in STRING_ID_TABLES:
        _create_option_table(
            table_name,
            sa.Column('id', sa.String(length=100), primary_key=True, nullable=False),
        )

    for table_name in NUMERIC_ID_TABLES:
        _create_option_table(
            table_name,
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        )


def downgrade() -> None:
    """Drop every option table."""
    for table_name in STRING_ID_TABLES + NUMERIC_ID_TABLES:
        op.drop_index(f'ix_{table_name}_name', table_name=table_name)
        op.drop_table(table_name)
