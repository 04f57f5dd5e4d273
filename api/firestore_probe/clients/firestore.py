"""
Firestore client bootstrap.

This module builds the single Firestore context used across the application. The credential file is read
once, and the parsed credential is handed explicitly to Firebase Admin, google-auth and the Firestore
AsyncClient; nothing is exported to the process environment.
"""
from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path

import firebase_admin
from firebase_admin import credentials as firebase_credentials
from google.cloud import firestore
from google.oauth2 import service_account

from firestore_probe.clients.credentials import ServiceAccountCredentials, load_credentials
from firestore_probe.config import FirestoreConfig

logger = getLogger(__name__)


class FirestoreBootstrapError(Exception):
    """Exception raised when the Firestore client cannot be initialized."""


class AuthenticationError(FirestoreBootstrapError):
    """Exception raised when the credential is rejected while building the client."""


@dataclass(frozen=True)
class FirestoreContext:
    """Holds everything created at startup to talk to Firestore."""

    credentials: ServiceAccountCredentials
    firebase_app: firebase_admin.App
    client: firestore.AsyncClient

    @property
    def project_id(self) -> str:
        return self.credentials.project_id

    def get_collection(self, name: str) -> firestore.AsyncCollectionReference:
        """
        Returns a reference to a collection. No request is sent until the reference is queried.

        :param name: The collection name, passed through unchanged.
        """
        return self.client.collection(name)


def get_collection(context: FirestoreContext, name: str) -> firestore.AsyncCollectionReference:
    """Returns a reference to the named collection of the given context."""
    return context.get_collection(name)


def resolve_credentials_path() -> Path:
    """Returns the absolute path of the configured credential file."""
    return (FirestoreConfig.base_dir / FirestoreConfig.credentials_relative_path).resolve()


def _get_or_create_firebase_app(creds: ServiceAccountCredentials) -> tuple[firebase_admin.App, bool]:
    """Returns the default Firebase app and whether this call created it."""
    try:
        app = firebase_admin.get_app()
        logger.info("Reusing existing Firebase app %s", app.name)
        return app, False
    except ValueError:
        # no default app yet
        pass

    try:
        certificate = firebase_credentials.Certificate(creds.info)
    except ValueError as e:
        raise AuthenticationError(f"Firebase rejected the credential: {e}") from e
    return firebase_admin.initialize_app(certificate, options={"projectId": creds.project_id}), True


def _build_scoped_credentials(creds: ServiceAccountCredentials) -> service_account.Credentials:
    try:
        return service_account.Credentials.from_service_account_info(creds.info, scopes=FirestoreConfig.scopes)
    except ValueError as e:
        raise AuthenticationError(f"Could not build service account credentials: {e}") from e


def initialize_firestore(credentials_path: str | Path | None = None) -> FirestoreContext:
    """
    Loads the credential file and builds the Firestore context.

    Meant to run once, before the server accepts traffic. Any failure is logged and re-raised; no partially
    built context is ever returned.

    :param credentials_path: Path to the credential file. Defaults to the configured location.
    :raises CredentialError: If the credential file is missing or malformed.
    :raises AuthenticationError: If the credential is rejected.
    """
    path = Path(credentials_path) if credentials_path is not None else resolve_credentials_path()

    try:
        creds = load_credentials(path)
        scoped = _build_scoped_credentials(creds)
        firebase_app, created = _get_or_create_firebase_app(creds)
        try:
            client = firestore.AsyncClient(project=creds.project_id, credentials=scoped)
        except Exception:
            if created:
                firebase_admin.delete_app(firebase_app)
            raise
        context = FirestoreContext(credentials=creds, firebase_app=firebase_app, client=client)
    except Exception as e:
        logger.exception("Error initializing Firestore: %s", e)
        raise

    logger.info("Firestore connection initialized for project %s", context.project_id)
    return context


__all__ = [
    "AuthenticationError",
    "FirestoreBootstrapError",
    "FirestoreContext",
    "get_collection",
    "initialize_firestore",
]
