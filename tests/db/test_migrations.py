"""Run the Alembic migrations against a scratch SQLite file."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "equinox" / "alembic"

FLEET_TABLES = {"users", "import_staging", "drilling_entries", "financial_params"}


def make_config(url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", url)
    return config


def test_upgrade_and_downgrade(tmp_path: Path):
    url = f"sqlite:///{tmp_path / 'fleet.db'}"
    config = make_config(url)

    command.upgrade(config, "head")

    engine = create_engine(url)
    inspector = inspect(engine)
    assert FLEET_TABLES <= set(inspector.get_table_names())
    user_indexes = {i["name"]: i for i in inspector.get_indexes("users")}
    assert user_indexes["ix_users_email"]["unique"]
    assert "ix_drilling_entries_rig_id" in {
        i["name"] for i in inspector.get_indexes("drilling_entries")
    }

    command.downgrade(config, "base")

    assert not FLEET_TABLES & set(inspect(engine).get_table_names())
    engine.dispose()
