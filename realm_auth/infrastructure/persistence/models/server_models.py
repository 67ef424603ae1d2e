"""
Modeles SQLAlchemy pour la liste des serveurs.

Tables:
-------
- server: Serveurs de monde auxquels un client peut se connecter
- server_message: Messages affiches sur l'ecran de selection de serveur

Ces tables sont des donnees de reference: elles sont lues en bloc,
jamais modifiees par le serveur d'authentification.
"""
from sqlalchemy import Column, String, Integer, SmallInteger

from realm_auth.infrastructure.persistence.models.base import Base


class ServerModel(Base):
    """
    Table server - Serveur de monde.

    Colonnes:
        id: Identifiant du serveur
        name: Nom affiche
        host: Adresse (IP ou nom DNS)
        port: Port TCP du serveur de monde
        type: Type de serveur (0 = normal, 1 = PvP, ...)
    """
    __tablename__ = "server"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, default="Realm")
    host = Column(String(64), nullable=False, default="127.0.0.1")
    port = Column(Integer, nullable=False, default=24000)
    type = Column(SmallInteger, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<ServerModel id={self.id} name={self.name!r} {self.host}:{self.port}>"


class ServerMessageModel(Base):
    """
    Table server_message - Message de l'ecran serveur.

    Un meme message (index) existe dans plusieurs langues.

    Colonnes:
        index: Ordre d'affichage
        language: Code langue du client (0 = anglais, 1 = allemand, ...)
        message: Texte du message
    """
    __tablename__ = "server_message"

    index = Column(SmallInteger, primary_key=True)
    language = Column(SmallInteger, primary_key=True)
    message = Column(String(256), nullable=False, default="")
