"""
Handles GET requests to the /api/test/firebase endpoint.
"""
from __future__ import annotations

from logging import getLogger

from sanic import Request, json
from sanic_ext import openapi

from firestore_probe.config import FirestoreCollections
from firestore_probe.models.responses import ProbeError, ProbeResult

logger = getLogger(__name__)


@openapi.definition(response=ProbeResult.schema_json())
async def on_get_firebase_probe(request: Request) -> json:
    """
    Reads at most one document from the test collection and reports how many came back.

    :param request: The Sanic request object.
    """
    try:
        logger.info("Starting Firestore connectivity probe")
        collection = request.app.ctx.firestore.get_collection(FirestoreCollections.test)

        documents = await collection.limit(1).get()

        result = ProbeResult(message="Connection successful", document_count=len(documents))
        return json(result.to_dict(), status=200)
    except Exception as e:
        logger.error("Error during Firestore connectivity probe: %s", e)
        error = ProbeError(message="Could not connect to Firestore", error=str(e) or type(e).__name__)
        return json(error.dict(), status=500)
