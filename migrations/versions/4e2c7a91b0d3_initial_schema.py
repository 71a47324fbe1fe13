"""Initial schema creation

Revision ID: 4e2c7a91b0d3
Revises: 
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4e2c7a91b0d3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    ]


def _deleted_at_index(table: str) -> None:
    op.create_index(f'ix_{table}_deleted_at', table, ['deleted_at'])


def upgrade() -> None:
    """Create all tables."""
    # users
    op.create_table(
        'users',
        *_audit_columns(),
        sa.Column('name', sa.String(length=80), nullable=True),
        sa.Column('username', sa.String(length=25), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='user'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    _deleted_at_index('users')

    # properties
    op.create_table(
        'properties',
        *_audit_columns(),
        sa.Column('postcode', sa.Integer(), nullable=True),
        sa.Column('property_name', sa.String(length=25), nullable=False, unique=True),
        sa.Column('suburb', sa.String(length=25), nullable=True),
        sa.Column('city', sa.String(length=25), nullable=True),
        sa.Column('street_address_1', sa.String(length=32), nullable=True),
        sa.Column('street_address_2', sa.String(length=32), nullable=True),
        sa.Column('bedrooms', sa.Float(), nullable=True),
        sa.Column('bathrooms', sa.Float(), nullable=True),
        sa.Column('land_area', sa.Float(), nullable=True),
        sa.Column('land_metric', sa.String(length=10), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )
    _deleted_at_index('properties')

    # features
    op.create_table(
        'features',
        *_audit_columns(),
        sa.Column('feature_name', sa.String(length=25), nullable=False, unique=True),
    )
    _deleted_at_index('features')

    op.create_table(
        'prop_features',
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), primary_key=True),
        sa.Column('feature_id', sa.Integer(), sa.ForeignKey('features.id'), primary_key=True),
    )

    # property_logs
    op.create_table(
        'property_logs',
        *_audit_columns(),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=False),
        sa.Column('log_message', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=10), nullable=False, server_default='user'),
    )
    op.create_index('idx_property_logs_property_id', 'property_logs', ['property_id'])
    _deleted_at_index('property_logs')

    # property_attachments
    op.create_table(
        'property_attachments',
        *_audit_columns(),
        sa.Column('label', sa.String(length=255), nullable=True),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('file_size', sa.BigInteger(), nullable=True),
        sa.Column('file_type', sa.String(length=32), nullable=True),
        sa.Column('etag', sa.String(length=255), nullable=True),
        sa.Column('object_key', sa.String(length=1024), nullable=False),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=False),
    )
    op.create_index('idx_property_attachments_property_id', 'property_attachments', ['property_id'])
    _deleted_at_index('property_attachments')

    # contacts
    op.create_table(
        'contacts',
        *_audit_columns(),
        sa.Column('first_name', sa.String(length=36), nullable=False),
        sa.Column('last_name', sa.String(length=36), nullable=True),
        sa.Column('contact_type', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=16), nullable=True),
        sa.Column('mobile', sa.String(length=16), nullable=True),
        sa.Column('contact_notes', sa.Text(), nullable=True),
    )
    _deleted_at_index('contacts')

    op.create_table(
        'contact_properties',
        sa.Column('contact_id', sa.Integer(), sa.ForeignKey('contacts.id'), primary_key=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), primary_key=True),
    )

    # tasks
    op.create_table(
        'tasks',
        *_audit_columns(),
        sa.Column('task_name', sa.String(length=36), nullable=True),
        sa.Column('type', sa.String(length=20), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('snoozed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('snoozed_till', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    _deleted_at_index('tasks')

    op.create_table(
        'task_assignments',
        sa.Column('task_id', sa.Integer(), sa.ForeignKey('tasks.id'), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), primary_key=True),
    )

    op.create_table(
        'task_logs',
        *_audit_columns(),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('task_id', sa.Integer(), sa.ForeignKey('tasks.id'), nullable=False),
        sa.Column('log_message', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=10), nullable=True),
    )
    op.create_index('idx_task_logs_task_id', 'task_logs', ['task_id'])
    _deleted_at_index('task_logs')

    # transactions
    op.create_table(
        'transactions',
        *_audit_columns(),
        sa.Column('type', sa.String(length=10), nullable=True),
        sa.Column('agency', sa.String(length=10), nullable=True),
        sa.Column('agency_name', sa.String(length=80), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=True),
        sa.Column('is_lease', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('tenancy_type', sa.String(length=36), nullable=True),
        sa.Column('transaction_notes', sa.Text(), nullable=True),
        sa.Column('transaction_value', sa.Float(), nullable=True),
        sa.Column('fee', sa.Float(), nullable=True),
        sa.Column('transaction_completion', sa.DateTime(timezone=True), nullable=True),
        sa.Column('snoozed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('snoozed_till', sa.DateTime(timezone=True), nullable=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=True),
        sa.Column('task_id', sa.Integer(), sa.ForeignKey('tasks.id'), nullable=True),
    )
    _deleted_at_index('transactions')

    op.create_table(
        'transaction_contacts',
        sa.Column('transaction_id', sa.Integer(), sa.ForeignKey('transactions.id'), primary_key=True),
        sa.Column('contact_id', sa.Integer(), sa.ForeignKey('contacts.id'), primary_key=True),
    )

    # maintenance_requests
    op.create_table(
        'maintenance_requests',
        *_audit_columns(),
        sa.Column('work_definition', sa.String(length=20), nullable=True),
        sa.Column('type', sa.String(length=20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('scale', sa.String(length=10), nullable=True),
        sa.Column('total_cost', sa.Float(), nullable=True),
        sa.Column('tax', sa.Float(), nullable=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=True),
        sa.Column('task_id', sa.Integer(), sa.ForeignKey('tasks.id'), nullable=True),
    )
    _deleted_at_index('maintenance_requests')

    # vendors / work types
    op.create_table(
        'vendors',
        *_audit_columns(),
        sa.Column('company_name', sa.String(length=255), nullable=False),
        sa.Column('npwp', sa.String(length=20), nullable=False),
        sa.Column('nib', sa.String(length=20), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('street_address_1', sa.String(length=255), nullable=True),
        sa.Column('street_address_2', sa.String(length=255), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('postal_code', sa.String(length=10), nullable=True),
        sa.Column('suburb', sa.String(length=100), nullable=True),
        sa.Column('province', sa.String(length=100), nullable=True),
    )
    _deleted_at_index('vendors')

    op.create_table(
        'work_types',
        *_audit_columns(),
        sa.Column('name', sa.String(length=255), nullable=False, unique=True),
    )
    _deleted_at_index('work_types')

    op.create_table(
        'vendor_work_types',
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('vendors.id'), primary_key=True),
        sa.Column('work_type_id', sa.Integer(), sa.ForeignKey('work_types.id'), primary_key=True),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('vendor_work_types')
    op.drop_table('work_types')
    op.drop_table('vendors')
    op.drop_table('maintenance_requests')
    op.drop_table('transaction_contacts')
    op.drop_table('transactions')
    op.drop_table('task_logs')
    op.drop_table('task_assignments')
    op.drop_table('tasks')
    op.drop_table('contact_properties')
    op.drop_table('contacts')
    op.drop_table('property_attachments')
    op.drop_table('property_logs')
    op.drop_table('prop_features')
    op.drop_table('features')
    op.drop_table('properties')
    op.drop_table('users')
