"""
services/ - Service Layer
=========================
News API access, headline formatting and the channel broadcast.
Nothing here knows about HTTP routes.
"""
