"""
Pydantic schema definitions for stored records and API payloads.

Each domain (developers, groups, messages) defines its own models.
The record models double as the stored representation: the storage
layer persists them as JSON keyed by id.
"""
