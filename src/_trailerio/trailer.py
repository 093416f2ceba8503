class Trailer:
    """
    A trailer as a pair of key and value, borrowed from the trailer block
    of the TrailerIterator that produced it.

    The key and value are memoryviews which are released when the
    iterator is stepped again or closed, after that, accessing them raises
    ValueError. Use tobytes or decode to keep a copy.

    >>> key, value = trailer
    >>> bytes(key)
    b'Signed-off-by'

    """

    def __init__(self, key, value):
        """
        :param key: memoryview of the key.
        :param value: memoryview of the value.
        """
        self.key = key
        self.value = value

    def __len__(self):
        return 2

    def __getitem__(self, index):
        if index == 0:
            return self.key

        if index == 1:
            return self.value
        raise IndexError(f"Trailer accepts index=0,1 only, got: {index}")

    def __iter__(self):
        yield self[0]
        yield self[1]

    def tobytes(self):
        """
        :returns: Tuple of copies of key and value as bytes.
        """
        return self.key.tobytes(), self.value.tobytes()

    def decode(self, encoding="utf-8", errors="strict"):
        """
        :returns: Tuple of copies of key and value decoded as str.
        """
        key, value = self.tobytes()
        return key.decode(encoding, errors), value.decode(encoding, errors)

    def release(self):
        self.key.release()
        self.value.release()

    def __repr__(self):
        try:
            return f"Trailer({self.key.tobytes()!r}, {self.value.tobytes()!r})"
        except ValueError:
            return "Trailer(<released>)"
