from enum import IntEnum, unique
from functools import lru_cache

import numpy as np

import _trailerio.lines as trailerlines


@unique
class CharClass(IntEnum):
    TERMINATOR = 0
    KEY = 1
    SPACE = 2
    TAB = 3
    SEPARATOR = 4
    NEWLINE = 5
    OTHER = 6

    @classmethod
    def blanks(cls):
        return (cls.SPACE, cls.TAB)


@lru_cache(maxsize=None)
def char_class_table(separators):
    """
    :param separators: bytes of the trailer separator characters.
    :returns: Read-only array mapping each byte value to its CharClass.
    """
    table = np.full(256, CharClass.OTHER, dtype=np.uint8)
    table[sorted(trailerlines.KEY_CHARS)] = CharClass.KEY
    table[trailerlines.SPACE] = CharClass.SPACE
    table[trailerlines.TAB] = CharClass.TAB
    table[trailerlines.NEWLINE] = CharClass.NEWLINE
    table[list(separators)] = CharClass.SEPARATOR
    table[0] = CharClass.TERMINATOR
    table.flags.writeable = False
    return table


def classify(block, separators):
    """
    :param block: uint8 array of the trailer block.
    :returns: List with the CharClass of each byte in block.
    """
    return [CharClass(c) for c in char_class_table(separators)[block].tolist()]
