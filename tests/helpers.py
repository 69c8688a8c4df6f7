"""Test helpers: polling and a local trade channel server."""

import asyncio
import json
from typing import Any, Dict, List

import websockets
from websockets.exceptions import ConnectionClosed

async def wait_until(predicate, timeout: float = 3.0, interval: float = 0.01):
    """Poll ``predicate`` until it is truthy or fail after ``timeout`` seconds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(interval)


class FakeTradeServer:
    """Local websocket endpoint speaking the trade channel protocol."""

    def __init__(self):
        self.connections = 0
        self.frames: List[Dict[str, Any]] = []
        self.push_on_auth: List[str] = []
        self.active = set()
        self.server = None
        self.url = None

    async def handler(self, websocket, *args):
        self.connections += 1
        self.active.add(websocket)
        try:
            async for message in websocket:
                frame = json.loads(message)
                self.frames.append(frame)

                if frame.get('name') == 'auth':
                    for raw in self.push_on_auth:
                        await websocket.send(raw)
                elif frame.get('name') == 'ping':
                    await websocket.send(json.dumps({"name": "pong"}))
        except ConnectionClosed:
            pass
        finally:
            self.active.discard(websocket)

    def frames_named(self, name: str) -> List[Dict[str, Any]]:
        return [f for f in self.frames if f.get('name') == name]

    async def start(self):
        self.server = await websockets.serve(self.handler, "127.0.0.1", 0)
        port = list(self.server.sockets)[0].getsockname()[1]
        self.url = f"ws://127.0.0.1:{port}"

    async def drop_all(self):
        """Close every client connection from the server side."""
        for websocket in list(self.active):
            await websocket.close()

    async def stop(self):
        self.server.close()
        await self.server.wait_closed()


