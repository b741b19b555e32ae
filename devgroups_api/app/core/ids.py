"""
Bounds of entity ids.

Ids are stored as SQLite ``INTEGER``, a signed 64-bit value, so the
largest id that can be stored or looked up is ``2**63 - 1``.
"""

MAX_ID = 2**63 - 1


def is_valid_id(value: int) -> bool:
    return 0 <= value <= MAX_ID
