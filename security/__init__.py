"""
security/ - Request Authentication
==================================
Optional shared-secret checks for the HTTP endpoints.
"""
