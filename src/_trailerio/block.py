"""
Locating the trailer block of a message.

The block is found in three steps, each narrowing the region of the
message under consideration:

1. find_patch_start cuts off everything from the first line starting
   with the patch marker ("---").
2. find_trailer_end cuts off trailing comment lines, empty lines and an
   old style "Conflicts:" block.
3. find_trailer_start walks the remaining lines backward from the end
   until it finds the blank line separating the last paragraph from the
   rest of the message, and decides whether that paragraph consists
   of trailers.

The title paragraph is never part of the trailer block.
"""

from dataclasses import dataclass
from enum import Enum, auto, unique

import numpy as np

from _trailerio.config import DEFAULT_CONFIG
from _trailerio.errors import TrailerBlockAllocationError
from _trailerio.lines import (
    NEWLINE,
    find_separator,
    is_blank_line,
    is_whitespace,
    last_line,
    line_starts,
    next_line,
)
from _trailerio.message import as_message


@unique
class LineKind(Enum):
    COMMENT = auto()
    BLANK = auto()
    GENERATED = auto()
    TRAILER = auto()
    CONTINUATION = auto()
    OTHER = auto()


def classify_line(buffer, bol, config=DEFAULT_CONFIG):
    """
    Classify the line starting at bol, with the first matching kind of

    * LineKind.COMMENT: starts with the comment character,
    * LineKind.BLANK: only whitespace,
    * LineKind.GENERATED: starts with one of the generated prefixes,
    * LineKind.TRAILER: "<key><optional whitespace><separator>...",
    * LineKind.CONTINUATION: starts with whitespace, ie. possibly the
      continuation of a trailer value on the preceding line,
    * LineKind.OTHER: anything else.
    """
    if buffer.startswith(config.comment_char, bol):
        return LineKind.COMMENT
    if is_blank_line(buffer, bol):
        return LineKind.BLANK
    if any(buffer.startswith(p, bol) for p in config.generated_prefixes):
        return LineKind.GENERATED

    starts_with_space = is_whitespace(buffer[bol])
    if find_separator(buffer, bol, config.separators) >= 1 and not starts_with_space:
        return LineKind.TRAILER
    if starts_with_space:
        return LineKind.CONTINUATION
    return LineKind.OTHER


@dataclass
class BlockScan:
    """
    Tally of the lines seen while scanning the last paragraph of a
    message backward, see find_trailer_start.

    Lines starting with whitespace may be continuations of the trailer
    above them, so they are held in possible_continuation_lines until a
    trailer (they were continuations) or a non-trailer (they were not)
    is seen.
    """

    trailer_lines: int = 0
    non_trailer_lines: int = 0
    possible_continuation_lines: int = 0
    recognized_prefix: bool = False
    only_spaces: bool = True

    def fold_continuations(self):
        self.non_trailer_lines += self.possible_continuation_lines
        self.possible_continuation_lines = 0

    def add_line(self, kind):
        """
        Count a line which is neither blank nor a comment.
        """
        self.only_spaces = False
        if kind in (LineKind.GENERATED, LineKind.TRAILER):
            self.trailer_lines += 1
            self.possible_continuation_lines = 0
            if kind == LineKind.GENERATED:
                self.recognized_prefix = True
        elif kind == LineKind.CONTINUATION:
            self.possible_continuation_lines += 1
        else:
            self.non_trailer_lines += 1
            self.fold_continuations()

    def is_trailer_block(self):
        """
        The paragraph is a trailer block if it contains a generated
        trailer and at least 25% trailers, or if it only contains
        trailers.
        """
        if self.recognized_prefix and self.trailer_lines * 3 >= self.non_trailer_lines:
            return True
        return self.trailer_lines > 0 and self.non_trailer_lines == 0


def find_patch_start(buffer, config=DEFAULT_CONFIG):
    """
    :returns: The offset of the first line starting with the patch marker,
        or the length of buffer if there is no patch in the message.
    """
    for bol in line_starts(buffer, len(buffer)):
        if buffer.startswith(config.patch_marker, bol):
            return bol
    return len(buffer)


def find_trailer_end(buffer, length, config=DEFAULT_CONFIG):
    """
    Find the true end of the message in buffer[:length], ignoring the
    trailing run of comment lines, empty lines and "Conflicts:" blocks
    (the header followed by tab indented pathnames).

    :returns: The offset of the start of the trailing run, or length if
        the message does not end with such a run.
    """
    run_start = None
    in_conflicts_block = False
    comment_char = config.comment_char[0]

    for bol in line_starts(buffer, length):
        first = buffer[bol]
        if first in (comment_char, NEWLINE):
            if run_start is None:
                run_start = bol
        elif buffer.startswith(config.conflicts_header, bol):
            in_conflicts_block = True
            if run_start is None:
                run_start = bol
        elif in_conflicts_block and buffer.startswith(b"\t", bol):
            # a pathname in the conflicts block
            pass
        elif run_start is not None:
            run_start = None
            in_conflicts_block = False

    if run_start is None:
        return length
    return run_start


def find_end_of_title(buffer, length, config=DEFAULT_CONFIG):
    """
    :returns: The offset of the first blank line of buffer[:length],
        skipping comment lines, or length if there is none.
    """
    for bol in line_starts(buffer, length):
        if buffer.startswith(config.comment_char, bol):
            continue
        if is_blank_line(buffer, bol):
            return bol
    return length


def find_trailer_start(buffer, length, config=DEFAULT_CONFIG):
    """
    Find the start of the trailers by looking, starting from length, for
    a blank line before a set of non-blank lines that (i) are all
    trailers, or (ii) contains at least one generated trailer and
    consists of at least 25% trailers.

    :returns: The offset of the first trailer line, or length if there
        are no trailers.
    """
    end_of_title = find_end_of_title(buffer, length, config)
    scan = BlockScan()

    bol = last_line(buffer, length)
    while bol is not None and bol >= end_of_title:
        kind = classify_line(buffer, bol, config)
        if kind == LineKind.COMMENT:
            scan.fold_continuations()
        elif kind == LineKind.BLANK:
            if not scan.only_spaces:
                scan.fold_continuations()
                if scan.is_trailer_block():
                    return next_line(buffer, bol)
                return length
        else:
            scan.add_line(kind)
        bol = last_line(buffer, bol)

    return length


def find_trailer_block(message, config=DEFAULT_CONFIG):
    """
    Locate the trailer block of a message.

    >>> find_trailer_block(b"Title\\n\\nSigned-off-by: A <a@x>\\n")
    (7, 30)

    :param message: The message as str or bytes.
    :returns: Tuple (start, end) of byte offsets such that
        message[start:end] is the trailer block. For a str message the
        offsets index message.encode("utf-8"), not the str itself.
        start == end if the message has no trailers.
    """
    buffer = as_message(message)
    patch_start = find_patch_start(buffer, config)
    trailer_end = find_trailer_end(buffer, patch_start, config)
    trailer_start = find_trailer_start(buffer, trailer_end, config)
    return trailer_start, trailer_end


def extract_trailer_block(buffer, start, end):
    """
    Copy buffer[start:end] into a new, writable array with a trailing
    zero terminator.

    :raises TrailerBlockAllocationError: if the copy could not be allocated.
    """
    try:
        block = np.zeros(end - start + 1, dtype=np.uint8)
    except MemoryError as err:
        raise TrailerBlockAllocationError(
            f"Could not allocate trailer block of {end - start} bytes"
        ) from err
    if end > start:
        block[:-1] = np.frombuffer(
            buffer, dtype=np.uint8, count=end - start, offset=start
        )
    return block
