from alembic import op
import sqlalchemy as sa

revision = "0001_init_tables"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'Employee',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String, nullable=False),
        sa.Column('position', sa.String, nullable=False),
        sa.Column('wage', sa.Float, nullable=False),
        sa.Column('is_current_employee', sa.Boolean, nullable=False, server_default=sa.true()),
    )

    op.create_table(
        'Timesheet',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('hours', sa.Float, nullable=False),
        sa.Column('rate', sa.Float, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('employee_id', sa.Integer, sa.ForeignKey('Employee.id'), nullable=False),
    )

    op.create_table(
        'Menu',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('title', sa.String, nullable=False),
    )

    op.create_table(
        'MenuItem',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String, nullable=False),
        sa.Column('description', sa.String, nullable=True),
        sa.Column('inventory', sa.Integer, nullable=False),
        sa.Column('price', sa.Float, nullable=False),
        sa.Column('menu_id', sa.Integer, sa.ForeignKey('Menu.id'), nullable=False),
    )


def downgrade():
    op.drop_table('MenuItem')
    op.drop_table('Menu')
    op.drop_table('Timesheet')
    op.drop_table('Employee')
