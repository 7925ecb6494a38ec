from ._count_store import CountStore


__all__ = [
    "CountStore",
]
