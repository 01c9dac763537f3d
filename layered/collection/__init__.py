from .traverse import filtering, sequence, traverse

__all__ = (
    "filtering",
    "sequence",
    "traverse",
)
