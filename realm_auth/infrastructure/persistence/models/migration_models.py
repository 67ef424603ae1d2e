"""
Modele SQLAlchemy de l'historique des migrations.

Chaque ligne correspond a une migration deja appliquee sur la base.
"""
from datetime import datetime

from sqlalchemy import Column, String, DateTime

from realm_auth.infrastructure.persistence.models.base import Base


class SchemaMigrationModel(Base):
    """Table schema_migrations - Migrations appliquees."""
    __tablename__ = "schema_migrations"

    migration_id = Column(String(150), primary_key=True)
    applied_at = Column(DateTime, default=datetime.utcnow, nullable=False)
