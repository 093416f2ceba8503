import warnings


def as_message(message):
    """
    Convert a message into the bytes that trailer parsing works on.

    str messages are encoded as utf-8. A NUL byte terminates the message,
    anything following it is dropped with a warning.

    :param message: The message as str or any bytes-like object.
    :returns: The message as bytes, without NUL bytes.
    """
    if isinstance(message, str):
        message = message.encode("utf-8")
    elif isinstance(message, (bytes, bytearray, memoryview)):
        message = bytes(message)
    else:
        raise TypeError(
            f"Expected message to be str or bytes-like, got {type(message).__name__}"
        )

    terminator = message.find(b"\0")
    if terminator != -1:
        warnings.warn(
            f"Message contains a NUL byte at offset {terminator}, "
            "the remainder of the message is ignored."
        )
        message = message[:terminator]
    return message
