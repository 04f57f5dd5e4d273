from datetime import datetime

import pytest


@pytest.mark.asyncio
async def test_health_status(app):
    """
    Test the /api/test/health endpoint answers without any Firestore context on the app
    """
    _, response = await app.asgi_client.get("/api/test/health")

    assert response.status == 200
    assert response.json["status"] == "API running"
    assert datetime.fromisoformat(response.json["timestamp"]).tzinfo is not None
