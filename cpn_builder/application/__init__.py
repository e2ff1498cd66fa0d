"""Application layer for the CPN builder.

This layer contains use cases and the page-oriented facades that drive the
domain builders. It defines ports (interfaces) for external dependencies.
"""

from .models import (
    BuildExampleRequest,
    BuildExampleResponse,
    DocumentSummary,
)

# Import the use case and facades from their modules:
#   from cpn_builder.application.net_factory import CpnNetFactory

__all__ = [
    "BuildExampleRequest",
    "BuildExampleResponse",
    "DocumentSummary",
]
