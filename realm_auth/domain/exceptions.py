"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure. Les erreurs de la base
de donnees (SQLAlchemy) ne sont jamais traduites ici.
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidSessionKeyError(DomainException):
    """Leve quand une cle de session est vide ou n'est pas de l'hexadecimal."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Cle de session invalide: '{value}'. "
            "La cle doit etre une suite non vide d'octets ou de chiffres hexadecimaux.",
            code="INVALID_SESSION_KEY"
        )
        self.invalid_value = value


class UnsavedAccountError(DomainException):
    """Leve quand on met a jour un compte qui n'a jamais ete persiste."""

    def __init__(self, email: str | None) -> None:
        super().__init__(
            f"Compte '{email}' sans identifiant: "
            "il doit etre cree avant de pouvoir etre mis a jour.",
            code="UNSAVED_ACCOUNT"
        )
        self.email = email
