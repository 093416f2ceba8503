class TrailerError(Exception):
    """
    Base class for errors raised by trailerio.
    """

    pass


class TrailerBlockAllocationError(TrailerError, MemoryError):
    """
    Thrown when the trailer block of a message could not be copied into
    the buffer owned by an iterator. No iterator is created in that case.
    """

    pass


class TrailerIteratorClosedError(TrailerError, ValueError):
    """
    Thrown when stepping an iterator that has already been closed.
    """

    pass
