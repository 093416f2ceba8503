from contextlib import contextmanager

from _trailerio.config import DEFAULT_CONFIG
from _trailerio.iterator import TrailerIterator


def read(message, config=DEFAULT_CONFIG):
    """
    Reads the trailers of a message and returns a list of (key, value)
    pairs in the order they appear in the message, ie.

    >>> read("Fix bug\\n\\nThis fixes it.\\n\\nSigned-off-by: A <a@x>\\n")
    [('Signed-off-by', 'A <a@x>')]

    Keys and values are str if the message is a str, bytes otherwise.
    """
    with lazy_read(message, config) as trailers:
        if isinstance(message, str):
            return [trailer.decode() for trailer in trailers]
        return [trailer.tobytes() for trailer in trailers]


@contextmanager
def lazy_read(message, config=DEFAULT_CONFIG):
    """
    Context manager giving a TrailerIterator for the message, closed on
    exit.
    """
    with TrailerIterator(message, config) as trailers:
        yield trailers


def enumerate_trailers(message, visit, config=DEFAULT_CONFIG):
    """
    Call visit(key, value) for each trailer of the message in order.

    key and value are memoryviews only valid for the duration of the call.

    :param visit: Callback returning a status. A status other than 0 (or
        None) stops the enumeration.
    :returns: The status that stopped the enumeration, or 0 if all
        trailers were visited.
    """
    with TrailerIterator(message, config) as trailers:
        for key, value in trailers:
            status = visit(key, value)
            if status:
                return status
    return 0
