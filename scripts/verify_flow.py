import asyncio
import httpx
import websockets
import json
import logging
import sys

import os

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

BASE_URL = os.getenv("BASE_URL", "http://localhost:5000")
WS_URL = os.getenv("WS_URL", "ws://localhost:5000")

PHONE_A = os.getenv("PHONE_A", "0501111111")
PHONE_B = os.getenv("PHONE_B", "0502222222")


async def login(ws, phone):
    await ws.send(json.dumps({"type": "login", "phone": phone}))
    reply = json.loads(await ws.recv())
    if reply["type"] != "loginSuccess":
        raise RuntimeError(f"Login failed for {phone}: {reply}")
    logger.info(f"Logged in {phone}, contacts: {reply['contacts']}")
    return reply


async def wait_for(ws, event_type, timeout=5.0):
    """Read frames until one of `event_type` arrives."""
    while True:
        data = json.loads(await asyncio.wait_for(ws.recv(), timeout=timeout))
        logger.info(f"WS Message: {data['type']}")
        if data["type"] == event_type:
            return data


async def run_scenario():
    async with httpx.AsyncClient(base_url=BASE_URL) as client, \
            websockets.connect(f"{WS_URL}/ws") as ws_a, \
            websockets.connect(f"{WS_URL}/ws") as ws_b:

        # 1. Both users log in over the live channel
        await login(ws_a, PHONE_A)
        await login(ws_b, PHONE_B)

        # 2. A sends over the live channel, B receives the push
        await ws_a.send(json.dumps({"type": "sendMessage", "from": PHONE_A, "to": PHONE_B, "text": "hello from A"}))
        ack = await wait_for(ws_a, "messageSent")
        pushed = await wait_for(ws_b, "receiveMessage")
        if pushed["message"]["id"] != ack["message"]["id"]:
            logger.error("FAILED: B received a different message than A sent")
            return False
        logger.info("SUCCESS: live message delivered")

        # 3. B marks it seen over REST, A gets the receipt
        resp = await client.post(f"/messages/{ack['message']['id']}/seen", json={"phone": PHONE_B})
        if resp.status_code != 200:
            logger.error(f"Mark seen failed: {resp.status_code} {resp.text}")
            return False
        await wait_for(ws_a, "messageSeen")
        logger.info("SUCCESS: seen receipt delivered")

        # 4. B replies over REST, A gets the push
        resp = await client.post("/messages", json={"from": PHONE_B, "to": PHONE_A, "text": "hi A"})
        if resp.status_code != 201:
            logger.error(f"Send failed: {resp.status_code} {resp.text}")
            return False
        await wait_for(ws_a, "receiveMessage")

        # 5. History and contacts agree from both sides
        history_a = (await client.get(f"/chats/{PHONE_B}", params={"phone": PHONE_A})).json()["chat"]
        history_b = (await client.get(f"/chats/{PHONE_A}", params={"phone": PHONE_B})).json()["chat"]
        contacts_b = (await client.get("/contacts", params={"phone": PHONE_B})).json()["contacts"]
        if history_a != history_b or PHONE_A not in contacts_b:
            logger.error("FAILED: history or contacts are not symmetric")
            return False

        logger.info(f"SUCCESS: {len(history_a)} messages in history, contacts symmetric")
        return True


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(run_scenario()) else 1)
