"""
Application-wide constants for the chat backend.

Event names and error messages are shared between the REST surface and the
live WebSocket channel so both transports speak the same vocabulary.

Note: Environment-dependent settings (paths, ports, CORS) belong in settings.py.
"""

# ==============================================================================
# APPLICATION
# ==============================================================================

APP_NAME: str = "Phone Chat Backend"
APP_VERSION: str = "1.0.0"

# ==============================================================================
# PERSISTENCE
# ==============================================================================

# Indentation used when rewriting the users file
USERS_FILE_INDENT: int = 2

# ==============================================================================
# LIVE CHANNEL - INBOUND EVENTS
# ==============================================================================

EVENT_LOGIN: str = "login"
EVENT_SEND_MESSAGE: str = "sendMessage"
EVENT_PING: str = "ping"

# ==============================================================================
# LIVE CHANNEL - OUTBOUND EVENTS
# ==============================================================================

EVENT_LOGIN_SUCCESS: str = "loginSuccess"
EVENT_LOGIN_ERROR: str = "loginError"
EVENT_MESSAGE_SENT: str = "messageSent"
EVENT_RECEIVE_MESSAGE: str = "receiveMessage"
EVENT_MESSAGE_SEEN: str = "messageSeen"
EVENT_ERROR: str = "error"
EVENT_PONG: str = "pong"

# ==============================================================================
# ERROR MESSAGES
# ==============================================================================

ERR_USER_NOT_FOUND: str = "User not found"
ERR_MISSING_FIELDS: str = "Missing fields"
ERR_MISSING_PHONE: str = "Missing phone"
ERR_MISSING_CHAT_FIELDS: str = "Missing phone or contact in body"
ERR_MESSAGE_NOT_FOUND: str = "Message not found"
ERR_NOT_RECIPIENT: str = "Only the recipient can mark seen"
ERR_INVALID_BODY: str = "Invalid request body"
