"""
Ligne de commande d'administration de la base d'authentification.

Usage:
    realm-auth migrate
    realm-auth pending
    realm-auth account create EMAIL SALT VERIFIER
    realm-auth account delete EMAIL
    realm-auth servers

Options:
    --database-url URL   Remplace DATABASE_URL
    --json-logs          Logs au format JSON

Le sel et le verifier SRP6 sont calcules par le serveur de jeu:
cette commande se contente de les enregistrer.
"""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from realm_auth.infrastructure.config import get_settings
from realm_auth.infrastructure.logging import configure_logging
from realm_auth.infrastructure.persistence import (
    AuthDatabase,
    DatabaseManager,
    MigrationRunner,
)


def build_parser() -> argparse.ArgumentParser:
    """Construit le parseur d'arguments."""
    parser = argparse.ArgumentParser(
        prog="realm-auth",
        description="Administration de la base d'authentification",
    )
    parser.add_argument("--database-url", default=None, help="URL SQLAlchemy de la base")
    parser.add_argument("--json-logs", action="store_true", help="Logs au format JSON")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("migrate", help="Applique les migrations en attente")
    commands.add_parser("pending", help="Liste les migrations en attente")
    commands.add_parser("servers", help="Liste les serveurs et leurs messages")

    account = commands.add_parser("account", help="Gestion des comptes")
    account_commands = account.add_subparsers(dest="account_command", required=True)

    create = account_commands.add_parser("create", help="Cree un compte")
    create.add_argument("email")
    create.add_argument("salt")
    create.add_argument("verifier")

    delete = account_commands.add_parser("delete", help="Supprime un compte")
    delete.add_argument("email")

    return parser


def run(args: argparse.Namespace, database: AuthDatabase, runner: MigrationRunner) -> int:
    """Execute la commande demandee et retourne le code de sortie."""
    if args.command == "migrate":
        database.migrate()
        print("Base d'authentification a jour")
        return 0

    if args.command == "pending":
        pending = runner.get_pending_migrations()
        for migration_id in pending:
            print(migration_id)
        if not pending:
            print("Aucune migration en attente")
        return 0

    if args.command == "servers":
        for server in database.get_servers():
            print(f"{server.id}\t{server.name}\t{server.host}:{server.port}\ttype={server.type}")
        for message in database.get_server_messages():
            print(f"[{message.index}/{message.language}] {message.message}")
        return 0

    if args.account_command == "create":
        account = database.create_account(args.email, args.salt, args.verifier)
        print(f"Compte {account.email} cree (id={account.id})")
        return 0

    if database.delete_account(args.email):
        print(f"Compte {args.email} supprime")
        return 0
    print(f"Aucun compte pour {args.email}")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entree de la commande realm-auth."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(
        json_logs=args.json_logs or settings.json_logs,
        log_level=settings.log_level,
    )

    db = DatabaseManager(args.database_url, settings=settings)
    runner = MigrationRunner(db)
    try:
        return run(args, AuthDatabase(db, runner), runner)
    finally:
        db.dispose()


if __name__ == "__main__":
    sys.exit(main())
