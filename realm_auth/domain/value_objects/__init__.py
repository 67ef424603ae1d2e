"""
Value Objects du domaine.

Caracteristiques:
    - Immuables (frozen dataclasses)
    - Valides par construction
    - Comparaison par valeur
"""

from realm_auth.domain.value_objects.session_key import SessionKey

__all__ = [
    "SessionKey",
]
