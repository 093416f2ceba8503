from _trailerio.block import extract_trailer_block, find_trailer_block
from _trailerio.config import DEFAULT_CONFIG
from _trailerio.errors import TrailerIteratorClosedError
from _trailerio.message import as_message
from _trailerio.tokenizer import TrailerTokenizer
from _trailerio.trailer import Trailer


class TrailerIterator:
    """
    Iterator over the trailers of a message.

    The trailer block is located and copied when the iterator is
    created. Each step returns a Trailer borrowed from that copy, which
    is only valid until the next step or until the iterator is closed.

    >>> with TrailerIterator(b"Title\\n\\nSigned-off-by: A <a@x>\\n") as trailers:
    ...     [t.tobytes() for t in trailers]
    [(b'Signed-off-by', b'A <a@x>')]

    The message itself is never modified, and iterators over the same
    message do not share any state. An iterator must not be stepped from
    several threads at once.
    """

    def __init__(self, message, config=DEFAULT_CONFIG):
        """
        :param message: The message, as str or bytes.
        :param config: TrailerConfig to use for locating and tokenizing.
        :raises TrailerBlockAllocationError: If the trailer block could not
            be copied.
        """
        buffer = as_message(message)
        self.start, self.end = find_trailer_block(buffer, config)
        self._block = extract_trailer_block(buffer, self.start, self.end)
        self._tokenizer = TrailerTokenizer(self._block, config.separators)
        self._view = None
        self._borrowed = None
        self.closed = False

    def _release_borrowed(self):
        if self._borrowed is not None:
            self._borrowed.release()
            self._borrowed = None
        if self._view is not None:
            self._view.release()
            self._view = None

    def __iter__(self):
        return self

    def __next__(self):
        if self.closed:
            raise TrailerIteratorClosedError("Trailer iterator has been closed")
        self._release_borrowed()

        span = self._tokenizer.next_span()
        if span is None:
            raise StopIteration

        self._view = memoryview(self._block)
        self._borrowed = Trailer(
            self._view[span.key_start : span.key_end],
            self._view[span.value_start : span.value_end],
        )
        return self._borrowed

    def close(self):
        """
        Release the trailer block and any borrowed trailer. Closing an
        already closed iterator does nothing.
        """
        if self.closed:
            return
        self._release_borrowed()
        self._tokenizer = None
        self._block = None
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
