"""
realm_auth - Couche d'acces a la base d'authentification.

Points d'entree:
----------------
    from realm_auth.infrastructure.persistence import AuthDatabase, DatabaseManager
"""

__version__ = "1.0.0"
