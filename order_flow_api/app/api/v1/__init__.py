"""
Version 1 of the Order Flow API.

Exports ``router`` which aggregates the customer and order endpoints.
"""

from .router import router  # noqa: F401
