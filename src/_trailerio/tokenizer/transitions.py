from _trailerio.tokenizer.char_class import CharClass
from _trailerio.tokenizer.state import Action, TrailerState


def transition(state, char_class):
    """
    The trailer state machine.

    >>> transition(TrailerState.KEY, CharClass.SEPARATOR)
    (<TrailerState.SEP_WS: 4>, <Action.END_KEY: 4>)

    :param state: The current TrailerState.
    :param char_class: The CharClass of the character at the cursor.
    :returns: Tuple of the next TrailerState and the Action to take.
    """
    if state == TrailerState.VALUE_END:
        return TrailerState.START, Action.EMIT

    if state == TrailerState.VALUE_NL:
        if char_class == CharClass.SPACE:
            # continuation line
            return TrailerState.VALUE, Action.ADVANCE
        return TrailerState.VALUE_END, Action.DROP_NEWLINE

    if state == TrailerState.VALUE:
        if char_class == CharClass.TERMINATOR:
            return TrailerState.VALUE_END, Action.NONE
        if char_class == CharClass.NEWLINE:
            return TrailerState.VALUE_NL, Action.COPY
        return TrailerState.VALUE, Action.COPY

    if char_class == CharClass.TERMINATOR:
        return state, Action.STOP

    if state == TrailerState.START:
        if char_class == CharClass.KEY:
            return TrailerState.KEY, Action.MARK_KEY
        if char_class == CharClass.NEWLINE:
            return TrailerState.START, Action.ADVANCE
        return TrailerState.IGNORE, Action.NONE

    if state == TrailerState.KEY:
        if char_class == CharClass.KEY:
            return TrailerState.KEY, Action.ADVANCE
        if char_class in CharClass.blanks():
            return TrailerState.KEY_WS, Action.END_KEY
        if char_class == CharClass.SEPARATOR:
            return TrailerState.SEP_WS, Action.END_KEY
        return TrailerState.IGNORE, Action.NONE

    if state == TrailerState.KEY_WS:
        if char_class in CharClass.blanks():
            return TrailerState.KEY_WS, Action.ADVANCE
        if char_class == CharClass.SEPARATOR:
            return TrailerState.SEP_WS, Action.ADVANCE
        return TrailerState.IGNORE, Action.NONE

    if state == TrailerState.SEP_WS:
        if char_class in CharClass.blanks():
            return TrailerState.SEP_WS, Action.ADVANCE
        return TrailerState.VALUE, Action.MARK_VALUE

    if state == TrailerState.IGNORE:
        if char_class == CharClass.NEWLINE:
            return TrailerState.START, Action.ADVANCE
        return TrailerState.IGNORE, Action.ADVANCE

    raise ValueError(f"Unexpected trailer state {state}")
