"""
Gestion de la connexion a la base d'authentification.

Ce module fournit DatabaseManager, la fabrique de sessions utilisee par
AuthDatabase et par le MigrationRunner. Chaque operation ouvre sa propre
session courte via get_session() et la ferme en sortie.

Connection Pooling:
-------------------
Pour PostgreSQL/MySQL, DatabaseManager utilise un pool SQLAlchemy:
- pool_size=5: Connexions maintenues en permanence
- max_overflow=10: Connexions temporaires supplementaires
- pool_recycle=1800: Recyclage toutes les 30 min (evite timeout)
- pool_pre_ping=True: Verification avant utilisation

Pour SQLite, le pool par defaut de SQLAlchemy est conserve et les
connexions peuvent passer d'un thread a l'autre.
"""
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from realm_auth.infrastructure.config import AuthDatabaseSettings, get_settings, is_sqlite_url
from realm_auth.infrastructure.persistence.models import Base


class DatabaseManager:
    """
    Gestionnaire central de connexion a la base d'authentification.

    Cette classe encapsule la configuration SQLAlchemy et fournit un
    context manager pour les sessions avec gestion automatique des
    transactions (commit/rollback).

    Les sessions sont creees avec expire_on_commit=False: les lignes
    retournees restent lisibles une fois la session fermee.

    Attributes:
        engine: Moteur SQLAlchemy avec pool de connexions
        SessionLocal: Factory de sessions configuree

    Example:
        >>> db = DatabaseManager("sqlite:///auth.db")
        >>> with db.get_session() as session:
        ...     accounts = session.query(AccountModel).all()
        # Commit automatique si pas d'exception
        # Rollback automatique en cas d'erreur
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        settings: Optional[AuthDatabaseSettings] = None,
    ):
        settings = settings or get_settings()
        if database_url is None:
            database_url = settings.database_url

        engine_options = {"echo": settings.echo_sql}
        if is_sqlite_url(database_url):
            # Les variantes *_async utilisent le pool depuis des threads
            engine_options["connect_args"] = {"check_same_thread": False}
        else:
            engine_options.update(
                pool_pre_ping=True,
                pool_size=settings.pool_size,
                max_overflow=settings.max_overflow,
                pool_timeout=settings.pool_timeout,
                pool_recycle=settings.pool_recycle,
            )

        self.database_url = database_url
        self.engine = create_engine(database_url, **engine_options)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Optional[AuthDatabaseSettings] = None) -> "DatabaseManager":
        """Construit un DatabaseManager depuis la configuration."""
        settings = settings or get_settings()
        return cls(settings.database_url, settings=settings)

    def create_tables(self):
        """Cree toutes les tables si elles n'existent pas (sans historique de migration)."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Context manager pour les sessions avec gestion automatique des transactions."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_pool_status(self) -> Dict:
        """Retourne les statistiques du pool de connexions."""
        pool = self.engine.pool
        if not hasattr(pool, "checkedout"):
            return {"pool_class": type(pool).__name__}
        return {
            "pool_class": type(pool).__name__,
            "pool_size": pool.size(),
            "checked_in": pool.checkedin(),
            "checked_out": pool.checkedout(),
            "overflow": pool.overflow(),
        }

    def dispose(self):
        """Ferme toutes les connexions du pool."""
        self.engine.dispose()
