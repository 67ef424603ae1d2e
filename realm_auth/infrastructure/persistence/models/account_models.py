"""
Modeles SQLAlchemy pour les comptes et leurs collections.

Tables:
-------
- account: Compte joueur (email + parametres SRP6)
- account_costume_unlock: Costumes debloques au niveau du compte
- account_currency: Monnaies de compte
- account_generic_unlock: Deblocages generiques (montures, titres, ...)
- account_keybinding: Raccourcis clavier sauvegardes cote serveur
- account_entitlement: Droits de compte (abonnement, emplacements, ...)

Securite:
---------
- Le mot de passe n'est jamais stocke: seuls le sel (s) et le
  verifier (v) SRP6 le sont.
- La cle de session est stockee en hexadecimal majuscule.

Les collections sont chargees a la demande et supprimees avec le compte.
"""
from datetime import datetime

from sqlalchemy import (
    Column, String, Integer, BigInteger, SmallInteger, DateTime,
    ForeignKey, Index,
)
from sqlalchemy.orm import relationship

from realm_auth.infrastructure.persistence.models.base import Base


class AccountModel(Base):
    """
    Table account - Compte joueur.

    L'email identifie le compte de maniere unique.

    Colonnes:
        id: Identifiant auto-incremente
        email: Adresse email (unique)
        salt: Sel SRP6 (colonne s)
        verifier: Verifier SRP6 (colonne v)
        game_token: Jeton remis au client pour rejoindre le serveur de monde
        session_key: Cle de session SRP6 en hexadecimal
        create_time: Date de creation
    """
    __tablename__ = "account"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(128), unique=True, nullable=False)
    salt = Column("s", String(32), nullable=False, default="")
    verifier = Column("v", String(512), nullable=False, default="")
    game_token = Column(String(32), nullable=False, default="")
    session_key = Column(String(128), nullable=False, default="")
    create_time = Column(DateTime, default=datetime.utcnow)

    costume_unlocks = relationship(
        "AccountCostumeUnlockModel",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    currencies = relationship(
        "AccountCurrencyModel",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    generic_unlocks = relationship(
        "AccountGenericUnlockModel",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    keybindings = relationship(
        "AccountKeybindingModel",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    entitlements = relationship(
        "AccountEntitlementModel",
        back_populates="account",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index('idx_account_email_game_token', 'email', 'game_token'),
        Index('idx_account_email_session_key', 'email', 'session_key'),
    )

    def __repr__(self) -> str:
        return f"<AccountModel id={self.id} email={self.email!r}>"


class AccountCostumeUnlockModel(Base):
    """Table account_costume_unlock - Objet de costume debloque."""
    __tablename__ = "account_costume_unlock"

    id = Column(Integer, ForeignKey("account.id", ondelete="CASCADE"), primary_key=True)
    item_id = Column(Integer, primary_key=True)
    timestamp = Column(DateTime, default=datetime.utcnow)

    account = relationship("AccountModel", back_populates="costume_unlocks")


class AccountCurrencyModel(Base):
    """Table account_currency - Solde d'une monnaie de compte."""
    __tablename__ = "account_currency"

    id = Column(Integer, ForeignKey("account.id", ondelete="CASCADE"), primary_key=True)
    currency_id = Column(SmallInteger, primary_key=True)
    amount = Column(BigInteger, nullable=False, default=0)

    account = relationship("AccountModel", back_populates="currencies")


class AccountGenericUnlockModel(Base):
    """Table account_generic_unlock - Deblocage generique."""
    __tablename__ = "account_generic_unlock"

    id = Column(Integer, ForeignKey("account.id", ondelete="CASCADE"), primary_key=True)
    entry = Column(Integer, primary_key=True)
    timestamp = Column(DateTime, default=datetime.utcnow)

    account = relationship("AccountModel", back_populates="generic_unlocks")


class AccountKeybindingModel(Base):
    """
    Table account_keybinding - Raccourci clavier.

    Une action peut etre liee a trois combinaisons (slots 00, 01, 02).
    """
    __tablename__ = "account_keybinding"

    id = Column(Integer, ForeignKey("account.id", ondelete="CASCADE"), primary_key=True)
    input_action_id = Column(SmallInteger, primary_key=True)
    device_enum_00 = Column(Integer, nullable=False, default=0)
    device_enum_01 = Column(Integer, nullable=False, default=0)
    device_enum_02 = Column(Integer, nullable=False, default=0)
    code_00 = Column(Integer, nullable=False, default=0)
    code_01 = Column(Integer, nullable=False, default=0)
    code_02 = Column(Integer, nullable=False, default=0)
    meta_keys_00 = Column(Integer, nullable=False, default=0)
    meta_keys_01 = Column(Integer, nullable=False, default=0)
    meta_keys_02 = Column(Integer, nullable=False, default=0)
    event_type_00 = Column(Integer, nullable=False, default=0)
    event_type_01 = Column(Integer, nullable=False, default=0)
    event_type_02 = Column(Integer, nullable=False, default=0)

    account = relationship("AccountModel", back_populates="keybindings")


class AccountEntitlementModel(Base):
    """Table account_entitlement - Droit de compte et sa valeur."""
    __tablename__ = "account_entitlement"

    id = Column(Integer, ForeignKey("account.id", ondelete="CASCADE"), primary_key=True)
    entitlement_id = Column(SmallInteger, primary_key=True)
    amount = Column(Integer, nullable=False, default=0)

    account = relationship("AccountModel", back_populates="entitlements")
