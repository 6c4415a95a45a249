import os

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

import bistro_api.db
from bistro_api.config import SETTINGS

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _alembic_config():
    # No ini file, so the test's logging setup is left alone
    cfg = Config()
    cfg.set_main_option("script_location", os.path.join(ROOT, "alembic"))
    return cfg

def test_upgrade_creates_tables(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.sqlite'}"
    engine = create_engine(url)
    monkeypatch.setitem(SETTINGS["database"], "url", url)
    monkeypatch.setattr(bistro_api.db, "engine", engine)

    command.upgrade(_alembic_config(), "head")

    inspector = inspect(engine)
    assert {"Employee", "Timesheet", "Menu", "MenuItem"} <= set(inspector.get_table_names())
    columns = {c["name"] for c in inspector.get_columns("MenuItem")}
    assert columns == {"id", "name", "description", "inventory", "price", "menu_id"}

    command.downgrade(_alembic_config(), "base")
    assert "Employee" not in inspect(engine).get_table_names()
    engine.dispose()
