"""
Tests unitaires pour le Value Object SessionKey.

Verifie la representation stockee en base:
- Hexadecimal majuscule sans separateur
- Conversion octets <-> hexadecimal
- Rejet des cles vides ou non hexadecimales
"""

import pytest

from realm_auth.domain.exceptions import InvalidSessionKeyError
from realm_auth.domain.value_objects import SessionKey


class TestSessionKey:
    """Tests pour le Value Object SessionKey."""

    def test_from_bytes_is_uppercase_hex(self):
        """Les octets sont convertis en hexadecimal majuscule."""
        key = SessionKey.from_bytes(bytes([0x0A, 0xFF, 0x00, 0x7B]))

        assert key.value == "0AFF007B"
        assert str(key) == "0AFF007B"

    def test_from_bytes_accepts_bytearray(self):
        """Un bytearray est accepte."""
        key = SessionKey.from_bytes(bytearray(b"\x01\x02"))

        assert key.value == "0102"

    def test_from_bytes_empty_raises(self):
        """Une cle vide est refusee."""
        with pytest.raises(InvalidSessionKeyError):
            SessionKey.from_bytes(b"")

    def test_from_bytes_wrong_type_raises(self):
        """Une chaine n'est pas acceptee comme octets."""
        with pytest.raises(InvalidSessionKeyError):
            SessionKey.from_bytes("0AFF")

    def test_from_hex_normalises_case(self):
        """from_hex normalise en majuscules."""
        assert SessionKey.from_hex("0aff").value == "0AFF"

    def test_from_hex_invalid_raises(self):
        """Un texte non hexadecimal est refuse."""
        with pytest.raises(InvalidSessionKeyError):
            SessionKey.from_hex("not-hex")

    def test_from_hex_odd_length_raises(self):
        """Un nombre impair de chiffres est refuse."""
        with pytest.raises(InvalidSessionKeyError):
            SessionKey.from_hex("ABC")

    def test_to_bytes_round_trip(self):
        """to_bytes restitue les octets d'origine."""
        data = bytes(range(40))

        assert SessionKey.from_bytes(data).to_bytes() == data

    def test_equality_by_value(self):
        """Deux cles de meme valeur sont egales, quelle que soit la casse d'origine."""
        assert SessionKey.from_hex("abcd") == SessionKey.from_bytes(b"\xab\xcd")

    def test_repr_hides_key(self):
        """repr ne revele que le debut de la cle."""
        key = SessionKey.from_bytes(bytes(range(16)))

        assert key.value not in repr(key)
        assert repr(key).startswith("SessionKey(0001")

    def test_immutable(self):
        """La cle est immuable."""
        key = SessionKey.from_hex("AB")

        with pytest.raises(AttributeError):
            key.value = "CD"
