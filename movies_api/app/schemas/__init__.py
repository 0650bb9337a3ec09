"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON exchanged with clients and are also the
values held by the in‑memory store.
"""
