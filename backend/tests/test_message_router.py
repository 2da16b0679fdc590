import pytest

from app.services.connection import LiveConnection
from app.services.exceptions import InvalidRequestError, NotFoundError, ForbiddenError
from tests.helpers import FakeWebSocket


def connect(connections, phone, fail=False):
    ws = FakeWebSocket(fail=fail)
    connections.register(LiveConnection(ws), phone)
    return ws


@pytest.mark.asyncio
async def test_send_stores_message_and_links_contacts(message_router, store):
    message = await message_router.send("111", "222", "hi")

    assert message.sender == "111"
    assert message.to == "222"
    assert message.text == "hi"
    assert message.seen is False
    assert isinstance(message.timestamp, int)
    assert message_router.get_message(message.id) is message
    assert store.get_contacts("111") == ["222"]
    assert store.get_contacts("222") == ["111"]


@pytest.mark.asyncio
async def test_send_assigns_unique_ids(message_router):
    ids = {(await message_router.send("111", "222", f"m{i}")).id for i in range(20)}
    assert len(ids) == 20


@pytest.mark.asyncio
@pytest.mark.parametrize("sender,to,text", [
    (None, "222", "hi"),
    ("111", None, "hi"),
    ("111", "222", None),
    ("111", "222", ""),
])
async def test_send_requires_all_fields(message_router, store, sender, to, text):
    with pytest.raises(InvalidRequestError):
        await message_router.send(sender, to, text)
    assert message_router.get_message_count() == 0
    assert store.list_users() == []


@pytest.mark.asyncio
async def test_send_without_validation_accepts_empty_text(message_router):
    message = await message_router.send("111", "222", None, validate=False)
    assert message.text == ""
    assert message_router.get_message_count() == 1


@pytest.mark.asyncio
async def test_send_pushes_to_every_recipient_connection(message_router, connections):
    phone_ws = connect(connections, "222")
    laptop_ws = connect(connections, "222")
    sender_ws = connect(connections, "111")

    message = await message_router.send("111", "222", "hi")

    for ws in (phone_ws, laptop_ws):
        assert ws.sent == [{"type": "receiveMessage", "message": message.to_wire()}]
    assert sender_ws.sent == []


@pytest.mark.asyncio
async def test_send_to_offline_recipient_is_stored_only(message_router, connections):
    bystander = connect(connections, "333")

    message = await message_router.send("111", "222", "hi")

    assert bystander.sent == []
    assert message_router.get_history("111", "222") == [message]


@pytest.mark.asyncio
async def test_send_survives_broken_recipient_socket(message_router, connections):
    connect(connections, "222", fail=True)
    healthy = connect(connections, "222")

    message = await message_router.send("111", "222", "hi")

    assert healthy.types() == ["receiveMessage"]
    assert message_router.get_message(message.id) is message


@pytest.mark.asyncio
async def test_history_is_the_same_from_both_sides(message_router):
    await message_router.send("111", "222", "one")
    await message_router.send("222", "111", "two")
    await message_router.send("111", "333", "elsewhere")
    await message_router.send("111", "222", "three")

    forward = message_router.get_history("111", "222")
    backward = message_router.get_history("222", "111")

    assert [m.text for m in forward] == ["one", "two", "three"]
    assert forward == backward


@pytest.mark.asyncio
async def test_history_sorted_by_timestamp_with_insertion_tiebreak(message_router):
    first = await message_router.send("111", "222", "first")
    second = await message_router.send("222", "111", "second")
    third = await message_router.send("111", "222", "third")

    first.timestamp = 2000
    second.timestamp = 1000
    third.timestamp = 2000

    assert [m.text for m in message_router.get_history("111", "222")] == ["second", "first", "third"]


def test_history_unknown_phone(message_router):
    with pytest.raises(NotFoundError):
        message_router.get_history("999", "111")


def test_history_known_phone_no_messages(message_router, store):
    store.ensure_user("111")
    assert message_router.get_history("111", "222") == []


@pytest.mark.asyncio
async def test_mark_seen_by_recipient_notifies_sender(message_router, connections):
    sender_ws = connect(connections, "111")
    message = await message_router.send("111", "222", "hi")

    result = await message_router.mark_seen(message.id, "222")

    assert result.seen is True
    assert sender_ws.sent == [{"type": "messageSeen", "id": message.id, "by": "222"}]


@pytest.mark.asyncio
async def test_mark_seen_twice_is_harmless(message_router):
    message = await message_router.send("111", "222", "hi")

    await message_router.mark_seen(message.id, "222")
    again = await message_router.mark_seen(message.id, "222")

    assert again.seen is True


@pytest.mark.asyncio
@pytest.mark.parametrize("by", ["111", "333", None])
async def test_mark_seen_by_anyone_else_is_forbidden(message_router, by):
    message = await message_router.send("111", "222", "hi")

    with pytest.raises(ForbiddenError):
        await message_router.mark_seen(message.id, by)
    assert message.seen is False


@pytest.mark.asyncio
async def test_mark_seen_unknown_message(message_router):
    with pytest.raises(NotFoundError):
        await message_router.mark_seen("no-such-id", "222")


@pytest.mark.asyncio
async def test_start_chat_links_and_returns_history(message_router, store):
    await message_router.send("222", "111", "earlier")
    store.ensure_user("333")

    result = message_router.start_chat("111", "333")

    assert result["contacts"] == ["222", "333"]
    assert result["chat"] == []
    assert store.get_contacts("333") == ["111"]

    existing = message_router.start_chat("111", "222")
    assert [m.text for m in existing["chat"]] == ["earlier"]


def test_start_chat_unknown_contact_does_not_mutate(message_router, store):
    store.ensure_user("111")

    with pytest.raises(NotFoundError, match="Contact 999 not found"):
        message_router.start_chat("111", "999")

    assert store.get_contacts("111") == []
    assert store.list_users() == ["111"]


def test_start_chat_unknown_phone(message_router, store):
    store.ensure_user("222")
    with pytest.raises(NotFoundError, match="User 999 not found"):
        message_router.start_chat("999", "222")


def test_start_chat_missing_fields(message_router):
    with pytest.raises(InvalidRequestError):
        message_router.start_chat("111", None)
