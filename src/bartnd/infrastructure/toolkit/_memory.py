"""
Registry of named in-memory arrays.

BART can exchange arrays through named in-memory buffers instead of files.
Such names must end with ``.mem``. Inputs are stored marshalled; outputs are
only reserved and count as registered once a payload has been stored under
their name.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from ...domain._errors import InvalidMemoryNameError
from ...domain._ndarray import INDArray
from ..io._marshal import MarshalledArray, marshal_in, marshal_out

logger = logging.getLogger(__name__)

MEMORY_EXTENSION = ".mem"


def validate_memory_name(name: str) -> str:
    """
    Return `name` if it is a valid in-memory buffer name.

    Raises
    ------
    InvalidMemoryNameError
        If `name` does not end with ``.mem``.
    """
    if not isinstance(name, str) or not name.endswith(MEMORY_EXTENSION):
        raise InvalidMemoryNameError(name)
    return name


class MemoryRegistry:
    """
    Named in-memory arrays in BART's exchange representation.

    Examples
    --------
    >>> registry = MemoryRegistry()
    >>> registry.register_input("input.mem", ComplexFloatNDArray(4, 4))
    >>> registry.is_registered("input.mem")
    True
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Optional[MarshalledArray]] = {}

    def register_input(self, name: str, array: INDArray) -> None:
        """Marshal `array` and store it under `name` (replacing any entry)."""
        validate_memory_name(name)
        self._entries[name] = marshal_out(array)
        logger.debug("registered input %s", name)

    def register_output(self, name: str) -> None:
        """Reserve `name` for an output that will be stored later."""
        validate_memory_name(name)
        self._entries.setdefault(name, None)
        logger.debug("reserved output %s", name)

    def store(self, name: str, dims: Sequence[int], payload: bytes) -> None:
        """Store a marshalled payload under `name`."""
        validate_memory_name(name)
        self._entries[name] = MarshalledArray(dims=tuple(int(d) for d in dims), payload=bytes(payload))
        logger.debug("stored %s with dims %s", name, tuple(dims))

    def is_registered(self, name: str) -> bool:
        """Return True if a payload is stored under `name`."""
        validate_memory_name(name)
        return self._entries.get(name) is not None

    def load(self, name: str, bart_dims: Optional[Sequence[Any]] = None) -> Any:
        """
        Rebuild the array stored under `name`.

        Raises
        ------
        KeyError
            If nothing is stored under `name`.
        """
        validate_memory_name(name)
        entry = self._entries.get(name)
        if entry is None:
            raise KeyError(f"no array is stored under {name!r}")
        return marshal_in(entry, bart_dims=bart_dims)

    def unregister(self, name: str) -> None:
        """Remove `name` (registered or reserved); unknown names are ignored."""
        validate_memory_name(name)
        if self._entries.pop(name, None) is not None:
            logger.debug("unregistered %s", name)

    def names(self) -> list[str]:
        """Names with a stored payload."""
        return [k for k, v in self._entries.items() if v is not None]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._entries.get(name) is not None
