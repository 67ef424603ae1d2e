"""Base declarative commune a tous les modeles de la base d'authentification."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()
