"""
Line primitives over a message buffer. A position is an offset into the
buffer, and the end of the buffer plays the role of the terminator: a
scan that reaches it has run out of lines.
"""

import string

import numpy as np

NEWLINE = ord("\n")
SPACE = ord(" ")
TAB = ord("\t")

# Same set as C isspace in the default locale
WHITESPACE = frozenset(b" \t\n\v\f\r")

KEY_CHARS = frozenset((string.ascii_letters + string.digits + "-").encode("ascii"))


def is_key_char(char):
    return char in KEY_CHARS


def is_whitespace(char):
    return char in WHITESPACE


def end_of_line(buffer, pos):
    """
    :returns: The offset of the newline ending the line at pos, or the
        length of the buffer if the line is not newline terminated.
    """
    nl = buffer.find(b"\n", pos)
    if nl == -1:
        return len(buffer)
    return nl


def is_blank_line(buffer, pos=0):
    """
    :returns: True if the line starting at pos contains only whitespace
        before its newline or the end of the buffer.
    """
    return not buffer[pos : end_of_line(buffer, pos)].strip()


def next_line(buffer, pos=0):
    """
    :returns: The offset just past the next newline at or after pos. If
        there is none, the length of the buffer. Calling next_line at the
        end of the buffer returns the end of the buffer again.
    """
    nl = buffer.find(b"\n", pos)
    if nl == -1:
        return len(buffer)
    return nl + 1


def last_line(buffer, length):
    """
    Find the start of the last line in buffer[:length].

    The character at length - 1 is never considered a line ending, as a
    trailing newline belongs to the last line.

    :returns: The offset of the start of the last line, or None if length
        is 0.
    """
    if length == 0:
        return None
    if length == 1:
        return 0
    return buffer.rfind(b"\n", 0, length - 1) + 1


def line_starts(buffer, length):
    """
    :returns: List of the offsets of all lines starting before length.
    """
    if length == 0:
        return []
    data = np.frombuffer(buffer, dtype=np.uint8, count=length)
    starts = np.flatnonzero(data == NEWLINE) + 1
    starts = starts[starts < length]
    return [0] + starts.tolist()


def find_separator(buffer, pos, separators):
    """
    If the line at pos is of the form
    "<key><optional whitespace><separator>..." or "<separator>...", return
    the location of the separator relative to pos. Otherwise, return -1.

    The key consists of alphanumeric characters and '-'. The optional
    whitespace allows for things like "Bug #43" where the key is "Bug" and
    the separator is "#".

    A separator at the start of the line gives 0, which callers
    distinguish from the malformed case.

    :param buffer: The message.
    :param pos: Offset of the start of the line.
    :param separators: bytes of separator characters.
    """
    whitespace_found = False
    line = buffer[pos : next_line(buffer, pos)]
    for offset, char in enumerate(line):
        if char in separators:
            return offset
        if not whitespace_found and is_key_char(char):
            continue
        if offset != 0 and char in (SPACE, TAB):
            whitespace_found = True
            continue
        break
    return -1
