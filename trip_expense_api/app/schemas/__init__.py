"""
Pydantic schema definitions for API payloads.

Schemas use snake_case attribute names and camelCase aliases, which is
the form used both on the wire and in the stored JSON document.
"""
