"""Classic algorithm exercises: number theory, bits, in-memory block storage and sorting puzzles."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "blocks",
    "cli",
    "counting",
    "matching",
    "numbers",
    "scheduling",
]