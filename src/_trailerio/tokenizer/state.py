from enum import Enum, auto, unique


@unique
class TrailerState(Enum):
    START = auto()
    KEY = auto()
    KEY_WS = auto()
    SEP_WS = auto()
    VALUE = auto()
    VALUE_NL = auto()
    VALUE_END = auto()
    IGNORE = auto()


@unique
class Action(Enum):
    """
    What the tokenizer does with the block before moving to the next state.
    Only ADVANCE, END_KEY and COPY move the cursor forward.
    """

    # Dispatch the same character again in the next state
    NONE = auto()
    ADVANCE = auto()
    MARK_KEY = auto()
    # Terminate the key at the cursor and advance
    END_KEY = auto()
    MARK_VALUE = auto()
    # Move the character at the cursor to the end of the value and advance
    COPY = auto()
    # Remove the newline last copied into the value
    DROP_NEWLINE = auto()
    EMIT = auto()
    STOP = auto()
