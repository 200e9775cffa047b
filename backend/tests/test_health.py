"""
Content API — Health Route Tests
"""

import pytest


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_when_storage_root_exists(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["storage"] == "available"
        assert body["uptime_seconds"] >= 0
