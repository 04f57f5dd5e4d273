"""Exports config variables that are used throughout the code."""
import os
from pathlib import Path


class FirestoreConfig:
    """Contains the config variables for connecting to Firestore."""

    base_dir = Path(os.environ.get("FIRESTORE_PROBE_BASE_DIR", Path(__file__).resolve().parent.parent))
    credentials_relative_path = os.environ.get("FIREBASE_CREDENTIALS_PATH", "Config/firebase-credentials.json")
    scopes = ["https://www.googleapis.com/auth/cloud-platform"]


class FirestoreCollections:
    """Contains the names of the collections in the Firestore database."""

    test = os.environ.get("FIRESTORE_TEST_COLLECTION", "test")


class ServerConfig:
    """Contains the config variables for the Sanic server."""

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", 8080))
    log_level = os.environ.get("LOGLEVEL", "INFO")
