from _trailerio.config import DEFAULT_CONFIG
from _trailerio.tokenizer.char_class import classify
from _trailerio.tokenizer.span import TrailerSpan
from _trailerio.tokenizer.state import Action, TrailerState
from _trailerio.tokenizer.transitions import transition


class TrailerTokenizer:
    """
    Tokenizer for a trailer block, yields one TrailerSpan per trailer.

    >>> block = extract_trailer_block(b"A: b\\n c\\nD: e\\n", 0, 13)
    >>> tokenizer = TrailerTokenizer(block)
    >>> span = tokenizer.next_span()
    >>> span.get_key(block), span.get_value(block)
    (b'A', b'b\\nc')

    """

    def __init__(self, block, separators=DEFAULT_CONFIG.separators):
        """
        :param block: Writable uint8 array containing the trailer block
            followed by a zero terminator, see extract_trailer_block. The
            tokenizer takes ownership of the block and modifies it.
        :param separators: bytes of the trailer separator characters.
        """
        self.block = block
        self.char_classes = classify(block, separators)
        self.cursor = 0

    def __iter__(self):
        span = self.next_span()
        while span is not None:
            yield span
            span = self.next_span()

    def next_span(self):
        """
        Advance the cursor past the next trailer.

        :returns: The TrailerSpan of that trailer, or None when there
            are no more trailers. Once None has been returned, None is
            returned for all subsequent calls.
        """
        block = self.block
        state = TrailerState.START
        key_start = key_end = value_start = value_end = 0

        while True:
            state, action = transition(state, self.char_classes[self.cursor])

            if action == Action.NONE:
                continue
            if action == Action.ADVANCE:
                self.cursor += 1
            elif action == Action.MARK_KEY:
                key_start = self.cursor
            elif action == Action.END_KEY:
                block[self.cursor] = 0
                key_end = self.cursor
                self.cursor += 1
            elif action == Action.MARK_VALUE:
                value_start = value_end = self.cursor
            elif action == Action.COPY:
                if value_end != self.cursor:
                    block[value_end] = block[self.cursor]
                value_end += 1
                self.cursor += 1
            elif action == Action.DROP_NEWLINE:
                value_end -= 1
            elif action == Action.EMIT:
                block[value_end] = 0
                return TrailerSpan(key_start, key_end, value_start, value_end)
            elif action == Action.STOP:
                return None
