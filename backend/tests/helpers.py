import time
from typing import Any, Callable, Dict, List

from fastapi.testclient import TestClient


class FakeWebSocket:
    """Stands in for a FastAPI WebSocket; records everything sent to it."""

    def __init__(self, fail: bool = False):
        self.sent: List[Dict[str, Any]] = []
        self.fail = fail

    async def send_json(self, data: Dict[str, Any]) -> None:
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(data)

    def types(self) -> List[str]:
        return [event["type"] for event in self.sent]


def send_message(client: TestClient, sender: str, to: str, text: str = 'hi'):
    return client.post('/messages', json={'from': sender, 'to': to, 'text': text})


def login(ws, phone: str) -> Dict[str, Any]:
    ws.send_json({'type': 'login', 'phone': phone})
    return ws.receive_json()


def wait_until(condition: Callable[[], bool], timeout: float = 2.0, interval: float = 0.02) -> bool:
    """Poll `condition` until it holds or `timeout` seconds pass."""
    deadline = time.monotonic() + timeout
    while True:
        if condition():
            return True
        if time.monotonic() >= deadline:
            return False
        time.sleep(interval)
