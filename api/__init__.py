"""
api/ - HTTP Layer
=================
FastAPI routes that receive Telegram webhooks and scheduler triggers.
Each route delegates to the bot or the broadcast service; no formatting
or fetching happens here.
"""
