"""
Service layer abstraction.

Services encapsulate the operations behind each route so that handlers
only deal with HTTP concerns (request bodies, status codes).
"""
