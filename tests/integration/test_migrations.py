"""
Tests d'integration pour MigrationRunner.
"""

import pytest
from sqlalchemy import inspect, text

from realm_auth.infrastructure.persistence import (
    MIGRATIONS,
    DatabaseManager,
    Migration,
    MigrationRunner,
)


ALL_IDS = [m.id for m in MIGRATIONS]


def _table_names(db: DatabaseManager) -> set:
    return set(inspect(db.engine).get_table_names())


# ============================================================
# Tests migrations connues
# ============================================================


class TestKnownMigrations:
    """Tests pour la liste MIGRATIONS."""

    def test_ids_are_unique_and_sorted(self):
        """Les identifiants sont uniques et dans l'ordre chronologique."""
        assert len(ALL_IDS) == len(set(ALL_IDS))
        assert ALL_IDS == sorted(ALL_IDS)

    def test_fresh_database_has_everything_pending(self, db_manager):
        """Sur une base vide, toutes les migrations sont en attente."""
        runner = MigrationRunner(db_manager)

        assert runner.get_applied_migrations() == []
        assert runner.get_pending_migrations() == ALL_IDS

    def test_migrate_creates_schema(self, db_manager):
        """migrate cree toutes les tables et l'historique."""
        runner = MigrationRunner(db_manager)

        applied = runner.migrate()

        assert applied == ALL_IDS
        assert {
            "account",
            "account_costume_unlock",
            "account_currency",
            "account_generic_unlock",
            "account_keybinding",
            "account_entitlement",
            "server",
            "server_message",
            "schema_migrations",
        } <= _table_names(db_manager)

    def test_migrate_is_idempotent(self, db_manager):
        """Un second migrate n'applique rien."""
        runner = MigrationRunner(db_manager)
        runner.migrate()

        assert runner.migrate() == []
        assert runner.get_pending_migrations() == []
        assert runner.get_applied_migrations() == ALL_IDS

    def test_migrate_accepts_existing_tables(self, db_manager):
        """Une base creee sans historique est adoptee sans erreur."""
        db_manager.create_tables()
        runner = MigrationRunner(db_manager)

        assert runner.migrate() == ALL_IDS

    def test_only_new_migrations_are_applied(self, db_manager):
        """Seules les etapes absentes de l'historique sont appliquees."""
        MigrationRunner(db_manager, MIGRATIONS[:1]).migrate()
        runner = MigrationRunner(db_manager)

        assert runner.get_pending_migrations() == ALL_IDS[1:]
        assert runner.migrate() == ALL_IDS[1:]


# ============================================================
# Tests migrations personnalisees
# ============================================================


class TestCustomMigrations:
    """Tests avec des etapes de migration ad hoc."""

    def test_duplicate_ids_rejected(self, db_manager):
        """Des identifiants dupliques sont refuses."""
        step = Migration("001_dup", lambda connection: None)

        with pytest.raises(ValueError):
            MigrationRunner(db_manager, [step, step])

    def test_failure_propagates_and_keeps_remaining_pending(self, db_manager):
        """Une erreur remonte; l'etape en echec reste en attente."""
        def fail(connection):
            connection.execute(text("CREATE TABLE half_done (id INTEGER)"))
            raise RuntimeError("migration cassee")

        runner = MigrationRunner(db_manager, [
            Migration("001_ok", lambda c: c.execute(text("CREATE TABLE ok_table (id INTEGER)"))),
            Migration("002_fail", fail),
            Migration("003_never", lambda c: None),
        ])

        with pytest.raises(RuntimeError, match="migration cassee"):
            runner.migrate()

        assert runner.get_applied_migrations() == ["001_ok"]
        assert runner.get_pending_migrations() == ["002_fail", "003_never"]
        assert "ok_table" in _table_names(db_manager)

    def test_applied_in_declaration_order(self, db_manager):
        """Les etapes sont appliquees dans l'ordre declare."""
        calls = []
        runner = MigrationRunner(db_manager, [
            Migration("001_a", lambda c: calls.append("a")),
            Migration("002_b", lambda c: calls.append("b")),
        ])

        runner.migrate()

        assert calls == ["a", "b"]
