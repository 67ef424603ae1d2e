"""
Configuration et fixtures pytest.
"""

import sys
from pathlib import Path

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from realm_auth.infrastructure.config import AuthDatabaseSettings
from realm_auth.infrastructure.persistence import (
    AuthDatabase,
    DatabaseManager,
    ServerModel,
    ServerMessageModel,
)


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """URL d'une base SQLite temporaire, propre a chaque test."""
    return f"sqlite:///{tmp_path / 'auth.db'}"


@pytest.fixture
def settings(database_url: str) -> AuthDatabaseSettings:
    """Configuration de test."""
    return AuthDatabaseSettings(database_url=database_url, echo_sql=False)


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - PERSISTANCE
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def db_manager(settings: AuthDatabaseSettings) -> DatabaseManager:
    """DatabaseManager sur une base vide (aucune table)."""
    db = DatabaseManager.from_settings(settings)
    yield db
    db.dispose()


@pytest.fixture
def auth_database(db_manager: DatabaseManager) -> AuthDatabase:
    """AuthDatabase sur une base migree."""
    database = AuthDatabase(db_manager)
    database.migrate()
    return database


@pytest.fixture
def sample_account(auth_database: AuthDatabase):
    """Compte persiste pour les tests."""
    return auth_database.create_account("player@example.com", "A1B2C3D4", "F00DBABE")


@pytest.fixture
def server_rows(auth_database: AuthDatabase) -> None:
    """Insere deux serveurs et trois messages."""
    def seed(session):
        session.add_all([
            ServerModel(id=2, name="Nexus PvP", host="10.0.0.2", port=24001, type=1),
            ServerModel(id=1, name="Nexus", host="10.0.0.1", port=24000, type=0),
            ServerMessageModel(index=0, language=1, message="Willkommen"),
            ServerMessageModel(index=0, language=0, message="Welcome"),
            ServerMessageModel(index=1, language=0, message="Maintenance tonight"),
        ])

    auth_database.save(seed)
