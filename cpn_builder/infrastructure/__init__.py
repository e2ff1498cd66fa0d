"""Infrastructure layer for the CPN builder.

Adapters for the ports the application layer declares: XML output, console
logging and the dependency container that wires them together.
"""

from .container import DependencyContainer, create_default_container

__all__ = [
    "DependencyContainer",
    "create_default_container",
]
