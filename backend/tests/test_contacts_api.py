from tests.helpers import send_message


def test_list_users_empty(client):
    r = client.get("/users")
    assert r.status_code == 200
    assert r.json() == {"users": []}


def test_contact_flow(client):
    r = send_message(client, "111", "222")
    assert r.status_code == 201

    rusers = client.get("/users")
    assert sorted(rusers.json()["users"]) == ["111", "222"]

    r1 = client.get("/contacts", params={"phone": "111"})
    assert r1.status_code == 200
    assert r1.json() == {"contacts": ["222"]}

    r2 = client.get("/contacts", params={"phone": "222"})
    assert r2.json() == {"contacts": ["111"]}

    # Messaging again does not duplicate contacts
    send_message(client, "222", "111", "back")
    assert client.get("/contacts", params={"phone": "111"}).json() == {"contacts": ["222"]}


def test_contacts_unknown_phone(client):
    r = client.get("/contacts", params={"phone": "999"})
    assert r.status_code == 404
    assert r.json() == {"error": "User not found"}


def test_contacts_missing_phone(client):
    r = client.get("/contacts")
    assert r.status_code == 404
    assert r.json() == {"error": "User not found"}


def test_start_chat(client):
    send_message(client, "111", "222")
    send_message(client, "333", "444")

    r = client.post("/chats", json={"phone": "111", "contact": "333"})
    assert r.status_code == 201
    assert r.json() == {"contacts": ["222", "333"], "chat": []}
    assert client.get("/contacts", params={"phone": "333"}).json() == {"contacts": ["444", "111"]}


def test_start_chat_returns_existing_history(client):
    sent = send_message(client, "111", "222", "hello").json()

    r = client.post("/chats", json={"phone": "222", "contact": "111"})
    assert r.status_code == 201
    assert r.json()["chat"] == [sent]


def test_start_chat_unknown_contact(client):
    send_message(client, "111", "222")

    r = client.post("/chats", json={"phone": "111", "contact": "999"})
    assert r.status_code == 404
    assert r.json() == {"error": "Contact 999 not found"}
    assert client.get("/contacts", params={"phone": "111"}).json() == {"contacts": ["222"]}
    assert "999" not in client.get("/users").json()["users"]


def test_start_chat_unknown_phone(client):
    send_message(client, "111", "222")

    r = client.post("/chats", json={"phone": "999", "contact": "111"})
    assert r.status_code == 404
    assert r.json() == {"error": "User 999 not found"}


def test_start_chat_missing_fields(client):
    r = client.post("/chats", json={"phone": "111"})
    assert r.status_code == 400
    assert r.json() == {"error": "Missing phone or contact in body"}


def test_start_chat_without_body(client):
    r = client.post("/chats")
    assert r.status_code == 400
    assert r.json() == {"error": "Missing phone or contact in body"}

    r2 = client.post("/chats", json={"phone": 111, "contact": "222"})
    assert r2.status_code == 400
    assert r2.json() == {"error": "Missing phone or contact in body"}
