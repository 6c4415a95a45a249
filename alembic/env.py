from logging.config import fileConfig

from alembic import context

from bistro_api import models  # registers the four tables on Base.metadata
from bistro_api.config import SETTINGS
from bistro_api.db import Base, engine

config = context.config

if config.config_file_name is not None and config.get_section("loggers"):
    fileConfig(config.config_file_name)

# settings.yaml, DATABASE_URL or TEST_DATABASE, same as the running service
DB_URL = SETTINGS["database"]["url"]
config.set_main_option("sqlalchemy.url", DB_URL)

target_metadata = Base.metadata

# SQLite cannot ALTER most constraints in place
RENDER_AS_BATCH = DB_URL.startswith("sqlite")


def run_migrations_offline():
    context.configure(
        url=DB_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        render_as_batch=RENDER_AS_BATCH,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=RENDER_AS_BATCH,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
