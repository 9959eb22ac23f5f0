"""
handlers/ - Presentation Layer
================================
Telegram command handlers. Each handler receives an update from the
Application, delegates fetching and formatting to the services, and
sends the reply back to the chat.
"""
