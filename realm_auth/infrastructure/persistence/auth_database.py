"""
AuthDatabase - Facade d'acces a la base d'authentification.

Responsabilite unique:
----------------------
CRUD des comptes, mise a jour de la cle de session et du jeton de jeu,
lecture de la liste des serveurs et declenchement des migrations.

Chaque methode ouvre sa propre session courte (DatabaseManager.get_session)
et la ferme avant de retourner. Les lignes retournees sont detachees de
toute session: elles restent lisibles mais leurs collections non chargees
ne le sont plus.

Erreurs:
--------
Aucune erreur de base de donnees n'est interceptee: connectivite,
contraintes violees et MultipleResultsFound remontent a l'appelant.

Variantes asynchrones:
----------------------
Les methodes *_async executent l'appel bloquant dans un thread
(asyncio.to_thread) et ne suspendent que pendant cet appel.
"""
import asyncio
from typing import Callable, Optional, Tuple

from sqlalchemy import update
from sqlalchemy.orm import Session, selectinload

from realm_auth.domain.exceptions import UnsavedAccountError
from realm_auth.domain.value_objects import SessionKey
from realm_auth.infrastructure.logging import get_logger
from realm_auth.infrastructure.persistence.database import DatabaseManager
from realm_auth.infrastructure.persistence.migrations import MigrationRunner
from realm_auth.infrastructure.persistence.models import (
    AccountModel,
    ServerModel,
    ServerMessageModel,
)

logger = get_logger(__name__)


def _session_key_hex(session_key_bytes: bytes) -> str:
    """Representation stockee d'une cle de session ("" pour une cle vide)."""
    if isinstance(session_key_bytes, (bytes, bytearray, memoryview)) and len(session_key_bytes) == 0:
        return ""
    return str(SessionKey.from_bytes(session_key_bytes))


class AuthDatabase:
    """
    Facade de la base d'authentification.

    Attributes:
        db: DatabaseManager pour les sessions.
    """

    def __init__(self, db: DatabaseManager, migration_runner: Optional[MigrationRunner] = None):
        """
        Initialise la facade.

        Args:
            db: Instance DatabaseManager.
            migration_runner: Runner de migrations (defaut: toutes les migrations connues).
        """
        self._db = db
        self._migrations = migration_runner or MigrationRunner(db)

    # ─────────────────────────────────────────────────────────────────────
    # Migrations
    # ─────────────────────────────────────────────────────────────────────

    def migrate(self) -> None:
        """Applique les migrations en attente, s'il y en a."""
        pending = self._migrations.get_pending_migrations()
        if not pending:
            return

        logger.info("auth_migrations_pending", count=len(pending))
        for migration_id in pending:
            logger.info("auth_migration_pending", migration=migration_id)

        self._migrations.migrate()

    # ─────────────────────────────────────────────────────────────────────
    # Ecriture generique
    # ─────────────────────────────────────────────────────────────────────

    def save(self, action: Callable[[Session], None]) -> None:
        """
        Applique une modification libre puis persiste la session.

        Args:
            action: Fonction recevant la session ouverte.
        """
        with self._db.get_session() as session:
            action(session)
            session.commit()

    async def save_async(self, action: Callable[[Session], None]) -> None:
        """Version asynchrone de save()."""
        await asyncio.to_thread(self.save, action)

    # ─────────────────────────────────────────────────────────────────────
    # Comptes - lecture
    # ─────────────────────────────────────────────────────────────────────

    def get_account(self, email: str) -> Optional[AccountModel]:
        """Recupere le compte correspondant a l'email."""
        with self._db.get_session() as session:
            return session.query(AccountModel).filter(
                AccountModel.email == email
            ).one_or_none()

    def get_account_by_game_token(self, email: str, game_token: str) -> Optional[AccountModel]:
        """Recupere le compte correspondant a l'email et au jeton de jeu."""
        with self._db.get_session() as session:
            return session.query(AccountModel).filter(
                AccountModel.email == email,
                AccountModel.game_token == game_token,
            ).one_or_none()

    def get_account_by_session_key(self, email: str, session_key_bytes: bytes) -> Optional[AccountModel]:
        """
        Recupere le compte correspondant a l'email et a la cle de session.

        Les collections du compte (costumes, monnaies, deblocages,
        raccourcis, droits) sont chargees dans la meme operation.

        Args:
            email: Email du compte.
            session_key_bytes: Cle de session brute.

        Returns:
            AccountModel avec ses collections, ou None. Une cle vide
            ne correspond a aucun compte, meme sans session ouverte.
        """
        session_key = _session_key_hex(session_key_bytes)
        if not session_key:
            return None

        with self._db.get_session() as session:
            return session.query(AccountModel).options(
                selectinload(AccountModel.costume_unlocks),
                selectinload(AccountModel.currencies),
                selectinload(AccountModel.generic_unlocks),
                selectinload(AccountModel.keybindings),
                selectinload(AccountModel.entitlements),
            ).filter(
                AccountModel.email == email,
                AccountModel.session_key == session_key,
            ).one_or_none()

    async def get_account_async(self, email: str) -> Optional[AccountModel]:
        """Version asynchrone de get_account()."""
        return await asyncio.to_thread(self.get_account, email)

    async def get_account_by_game_token_async(self, email: str, game_token: str) -> Optional[AccountModel]:
        """Version asynchrone de get_account_by_game_token()."""
        return await asyncio.to_thread(self.get_account_by_game_token, email, game_token)

    async def get_account_by_session_key_async(
        self, email: str, session_key_bytes: bytes
    ) -> Optional[AccountModel]:
        """Version asynchrone de get_account_by_session_key()."""
        return await asyncio.to_thread(self.get_account_by_session_key, email, session_key_bytes)

    # ─────────────────────────────────────────────────────────────────────
    # Comptes - ecriture
    # ─────────────────────────────────────────────────────────────────────

    def create_account(self, email: str, salt: str, verifier: str) -> AccountModel:
        """
        Cree un compte avec l'email, le sel et le verifier SRP6 fournis.

        Returns:
            Le compte cree (detache, id renseigne).
        """
        with self._db.get_session() as session:
            account = AccountModel(
                email=email,
                salt=salt,
                verifier=verifier,
            )
            session.add(account)
            session.commit()

        logger.info("account_created", account_id=account.id)
        return account

    def delete_account(self, email: str) -> bool:
        """
        Supprime le compte correspondant a l'email.

        Returns:
            True si une ligne a ete supprimee, False si aucun compte ne correspond.
        """
        with self._db.get_session() as session:
            account = session.query(AccountModel).filter(
                AccountModel.email == email
            ).one_or_none()
            if account is None:
                return False

            account_id = account.id
            session.delete(account)
            session.commit()

        logger.info("account_deleted", account_id=account_id)
        return True

    def update_account_game_token(self, account: AccountModel, game_token: str) -> None:
        """
        Met a jour le jeton de jeu du compte.

        Seule la colonne game_token est ecrite: les autres colonnes,
        eventuellement modifiees ailleurs entre-temps, sont preservees.
        """
        self._update_account_column(account, game_token=game_token)

    def update_account_session_key(self, account: AccountModel, session_key_bytes: bytes) -> None:
        """
        Met a jour la cle de session du compte.

        Seule la colonne session_key est ecrite. Une cle vide efface
        la session du compte.
        """
        self._update_account_column(account, session_key=_session_key_hex(session_key_bytes))

    async def update_account_game_token_async(self, account: AccountModel, game_token: str) -> None:
        """Version asynchrone de update_account_game_token()."""
        await asyncio.to_thread(self.update_account_game_token, account, game_token)

    async def update_account_session_key_async(self, account: AccountModel, session_key_bytes: bytes) -> None:
        """Version asynchrone de update_account_session_key()."""
        await asyncio.to_thread(self.update_account_session_key, account, session_key_bytes)

    def _update_account_column(self, account: AccountModel, **values) -> None:
        # L'objet detache n'est modifie qu'une fois le compte verifie
        if account.id is None:
            raise UnsavedAccountError(account.email)

        for column, value in values.items():
            setattr(account, column, value)

        with self._db.get_session() as session:
            session.execute(
                update(AccountModel)
                .where(AccountModel.id == account.id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            session.commit()

    # ─────────────────────────────────────────────────────────────────────
    # Serveurs
    # ─────────────────────────────────────────────────────────────────────

    def get_servers(self) -> Tuple[ServerModel, ...]:
        """Retourne un instantane immuable de la table server."""
        with self._db.get_session() as session:
            servers = session.query(ServerModel).order_by(ServerModel.id).all()
            session.expunge_all()
            return tuple(servers)

    def get_server_messages(self) -> Tuple[ServerMessageModel, ...]:
        """Retourne un instantane immuable de la table server_message."""
        with self._db.get_session() as session:
            messages = session.query(ServerMessageModel).order_by(
                ServerMessageModel.index, ServerMessageModel.language
            ).all()
            session.expunge_all()
            return tuple(messages)
