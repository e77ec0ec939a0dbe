"""
Pydantic schema definitions for API payloads.

``user`` holds the stored record and the request payload, ``envelope``
the uniform response wrapper and the payloads it can carry.
"""
