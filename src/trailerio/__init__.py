import trailerio.version
from _trailerio.block import find_trailer_block
from _trailerio.config import DEFAULT_CONFIG, TrailerConfig
from _trailerio.errors import (
    TrailerBlockAllocationError,
    TrailerError,
    TrailerIteratorClosedError,
)
from _trailerio.iterator import TrailerIterator
from _trailerio.reading import enumerate_trailers, lazy_read, read
from _trailerio.trailer import Trailer

__version__ = trailerio.version.version

__all__ = [
    "DEFAULT_CONFIG",
    "Trailer",
    "TrailerBlockAllocationError",
    "TrailerConfig",
    "TrailerError",
    "TrailerIterator",
    "TrailerIteratorClosedError",
    "enumerate_trailers",
    "find_trailer_block",
    "lazy_read",
    "read",
]
