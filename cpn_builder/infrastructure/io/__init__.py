"""I/O adapters.

Keep this package's public surface minimal; import implementation details from
their defining modules.
"""

from .cpn_writer import CpnFileWriter

__all__ = [
    "CpnFileWriter",
]
