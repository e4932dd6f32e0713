"""
Design pattern implementations.

Each module is self-contained and illustrates one pattern:

- singleton: process-wide shared instance reused across references
- factory: construction dispatch keyed by a type tag
- observer: one-to-many notification list with subscribe/unsubscribe
- decorator: dynamic wrapping to extend behavior
- middleware: ordered chain-of-responsibility over a request/response pair
- dependency_injection: passing collaborators into consumers
- mvc: separation of data storage, presentation and input handling
"""

__all__ = [
    "singleton",
    "factory",
    "observer",
    "decorator",
    "middleware",
    "dependency_injection",
    "mvc",
]
