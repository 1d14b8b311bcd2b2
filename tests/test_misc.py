import asyncio
import pytest

from app.api.deps import run_until_disconnect
from app.content.loader import load_myth_facts
from app.core.errors import ClientDisconnected

def test_health_and_version(client):
    assert client.get("/health").json() == {"ok": True}
    assert "version" in client.get("/version").json()

def test_learning_catalog(client):
    r = client.get("/learning/myth-facts")
    assert r.status_code == 200
    items = r.json()
    assert [i["number"] for i in items] == [1, 2, 3, 4, 5, 6]
    assert items[0]["myth"] == load_myth_facts()[0].myth

class _GoneRequest:
    class url:
        path = "/chat-companion"

    async def is_disconnected(self):
        return True

def test_disconnect_cancels_inflight_work():
    state = {}

    async def slow():
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            state["cancelled"] = True
            raise

    async def scenario():
        task = asyncio.ensure_future(slow())
        with pytest.raises(ClientDisconnected):
            await run_until_disconnect(_GoneRequest(), task)
        await asyncio.sleep(0)

    asyncio.run(scenario())
    assert state.get("cancelled") is True

def test_app_config_lists_tones(client):
    body = client.get("/config/app").json()
    assert body["tones"] == ["gentle", "cheerful", "formal"]
    assert body["defaultTone"] == "gentle"
