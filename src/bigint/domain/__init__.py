"""
Domain models and value objects.

Contains the BigInt value type.
"""

from src.bigint.domain.big_int import BigInt

__all__ = [
    "BigInt",
]
