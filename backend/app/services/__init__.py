"""Business Logic Services.

This package contains the service modules that implement the core
business logic of the chat backend.

Service Categories:
- user_store: Phone -> user mapping with symmetric contacts, flat-file persisted
- message_router: Send, history, seen receipts, chat start
- Connection: Live WebSocket registry and push notifications
- Session: Per-connection live event handling
- metrics: Prometheus counters for routing
"""
