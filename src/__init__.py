"""Design Patterns Handbook - Root Package.

This package illustrates seven classic object-oriented design patterns, each
in its own small module with an in-memory demonstration:

Key Components:
    - patterns: Singleton, Factory, Observer, Decorator, Middleware,
      Dependency Injection and MVC implementations
    - application: demonstration registry running one demo per pattern
    - domain: shared exception hierarchy
    - infrastructure: structured logging and error handling
    - config: pydantic configuration schema and manager
    - cli: the ``patterns`` command line entry point

The patterns never import each other; each module can be read on its own.
"""

from ._package import PACKAGE_NAME
from ._version import __version__

__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> patterns list
    >>> patterns run singleton
    >>> patterns run all --format json
"""
