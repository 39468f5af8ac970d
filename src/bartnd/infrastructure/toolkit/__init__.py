"""
Boundary to the BART toolkit: executable discovery, the subprocess driver
and the in-memory array registry.
"""

from ._driver import execute, read, run
from ._executable import find_bart_executable
from ._memory import MEMORY_EXTENSION, MemoryRegistry, validate_memory_name

__all__ = [
    execute.__name__,
    read.__name__,
    run.__name__,
    find_bart_executable.__name__,
    MemoryRegistry.__name__,
    validate_memory_name.__name__,
    "MEMORY_EXTENSION",
]
