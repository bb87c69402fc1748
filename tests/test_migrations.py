import unittest
from pathlib import Path

from alembic import command
from alembic.autogenerate import compare_metadata
from alembic.config import Config as AlembicConfig
from alembic.migration import MigrationContext
from sqlalchemy import create_engine, inspect

from db.engine import Base
from db.models import SessionToken


ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


class TestMigrations(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite://")
        self.addCleanup(self.engine.dispose)
        self.config = AlembicConfig()
        self.config.set_main_option("script_location", str(ALEMBIC_DIR))

    def _run(self, fn, revision):
        with self.engine.begin() as connection:
            self.config.attributes["connection"] = connection
            fn(self.config, revision)

    def test_upgrade_creates_session_tokens(self):
        self._run(command.upgrade, "head")

        inspector = inspect(self.engine)
        self.assertIn("session_tokens", inspector.get_table_names())
        columns = {column["name"] for column in inspector.get_columns("session_tokens")}
        self.assertEqual(
            columns,
            {"identifier", "verifier_hash", "expiration_datetime", "user_id", "details"},
        )
        indexes = {index["name"] for index in inspector.get_indexes("session_tokens")}
        self.assertIn("ix_session_tokens_user_id", indexes)

    def test_migration_matches_model(self):
        self._run(command.upgrade, "head")

        with self.engine.connect() as connection:
            context = MigrationContext.configure(connection, opts={"compare_type": False})
            self.assertEqual(compare_metadata(context, Base.metadata), [])

        details = {column["name"]: column for column in inspect(self.engine).get_columns("session_tokens")}["details"]
        self.assertIn(details["default"], ("''", ""))
        self.assertEqual(SessionToken.__table__.c.details.server_default.arg, "")

    def test_downgrade_drops_table(self):
        self._run(command.upgrade, "head")
        self._run(command.downgrade, "base")

        self.assertNotIn("session_tokens", inspect(self.engine).get_table_names())


if __name__ == "__main__":
    unittest.main()
