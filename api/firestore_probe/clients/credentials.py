"""
Loads the service-account credential file used to authenticate against Firestore.

Only ``project_id`` is validated; every other field is kept as-is and handed to
google-auth when the client is built.
"""
from __future__ import annotations

import json
from logging import getLogger
from pathlib import Path
from typing import Any

from pydantic.v1 import BaseModel, Extra, Field, ValidationError, constr

logger = getLogger(__name__)

ProjectId = constr(strict=True, min_length=1)


class CredentialError(Exception):
    """Exception raised when the credential file cannot be loaded."""


class CredentialNotFoundError(CredentialError):
    """Exception raised when the credential file does not exist."""


class CredentialMalformedError(CredentialError):
    """Exception raised when the credential file is not valid JSON or lacks a project id."""


class ServiceAccountCredentials(BaseModel):
    """Represents a service-account credential file."""

    project_id: ProjectId = Field(..., description="The Google Cloud project the credential belongs to")

    class Config:
        extra = Extra.allow

    @property
    def info(self) -> dict[str, Any]:
        """Returns the full credential mapping, unknown fields included."""
        return self.dict()


def load_credentials(path: str | Path) -> ServiceAccountCredentials:
    """
    Reads and validates a service-account credential file.

    :param path: Path to the JSON credential file.
    :raises CredentialNotFoundError: If the file does not exist.
    :raises CredentialMalformedError: If the file is not a JSON object with a non-empty string ``project_id``.
    """
    path = Path(path)
    if not path.is_file():
        raise CredentialNotFoundError(f"Credential file not found at: {path}")

    try:
        raw = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise CredentialMalformedError(f"Credential file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise CredentialError(f"Could not read credential file {path}: {e}") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CredentialMalformedError(f"Credential file {path} is not valid JSON: {e}") from e

    try:
        credentials = ServiceAccountCredentials.parse_obj(payload)
    except ValidationError as e:
        raise CredentialMalformedError(f"Credential file {path} has no valid project_id: {e}") from e

    logger.info("Loaded credentials for project %s from %s", credentials.project_id, path)
    return credentials
