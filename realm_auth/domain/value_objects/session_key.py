"""
Value Object SessionKey - Cle de session SRP6 d'un compte.

Le serveur d'authentification calcule une cle de session binaire
a la fin de la poignee de main SRP6. La base la stocke sous forme
de texte hexadecimal en majuscules, sans separateur.

Usage:
------
    >>> from realm_auth.domain.value_objects import SessionKey
    >>>
    >>> key = SessionKey.from_bytes(b"\\x0a\\xff")
    >>> str(key)
    '0AFF'
    >>> SessionKey.from_hex("0aff") == key
    True
"""

import binascii
from dataclasses import dataclass

from realm_auth.domain.exceptions import InvalidSessionKeyError


@dataclass(frozen=True)
class SessionKey:
    """
    Cle de session immutable.

    Attributes:
        value: Representation hexadecimale en majuscules.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidSessionKeyError(self.value)
        try:
            binascii.unhexlify(self.value)
        except (binascii.Error, ValueError) as e:
            raise InvalidSessionKeyError(self.value) from e
        if self.value != self.value.upper():
            # dataclass gelee: passage par object.__setattr__
            object.__setattr__(self, "value", self.value.upper())

    @classmethod
    def from_bytes(cls, data: bytes) -> "SessionKey":
        """
        Cree une SessionKey depuis les octets bruts.

        Args:
            data: Octets de la cle de session.

        Returns:
            Instance SessionKey.

        Raises:
            InvalidSessionKeyError: Si data est vide ou n'est pas binaire.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)) or len(data) == 0:
            raise InvalidSessionKeyError(data)
        return cls(bytes(data).hex().upper())

    @classmethod
    def from_hex(cls, hex_str: str) -> "SessionKey":
        """Cree une SessionKey depuis une chaine hexadecimale (casse libre)."""
        if not isinstance(hex_str, str):
            raise InvalidSessionKeyError(hex_str)
        return cls(hex_str.strip())

    def to_bytes(self) -> bytes:
        """Retourne les octets de la cle."""
        return bytes.fromhex(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        # Ne jamais exposer la cle complete dans les logs
        return f"SessionKey({self.value[:4]}...)"
