from dataclasses import dataclass


@dataclass
class TrailerSpan:
    """
    The location of one trailer in a tokenized trailer block, the key is
    block[key_start:key_end] and the value block[value_start:value_end].
    """

    key_start: int
    key_end: int
    value_start: int
    value_end: int

    def get_key(self, block):
        """
        :returns: Copy of the bytes of the key.
        """
        return bytes(block[self.key_start : self.key_end])

    def get_value(self, block):
        """
        :returns: Copy of the bytes of the value.
        """
        return bytes(block[self.value_start : self.value_end])
