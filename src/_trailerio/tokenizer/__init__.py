"""
In this module, the tokenizer walks the trailer block of a message one
character at a time and produces the span of one trailer per step.

The trailer block is owned by the tokenizer and tokenizing mutates it:
the character ending a key and the newline ending a value are overwritten
with the terminator (zero), and the bytes of multi line values are moved
back over the space starting each continuation line. The returned spans
can therefore be read from the block as they are, without copying.
Nothing before the cursor is ever read again.

Each character is first classified (see CharClass), and the state machine
is given by the pure function transition, which maps the current state and
character class to the next state and the action to take on the block
(see Action).

A line which does not have the form "key [ws] : [ws] value" is skipped
without producing a trailer.
"""

from .trailer_tokenizer import TrailerTokenizer

__all__ = ["TrailerTokenizer"]
