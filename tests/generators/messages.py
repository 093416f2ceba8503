import string

import hypothesis.strategies as st

key_alphabet = string.ascii_letters + string.digits + "-"

# The first character is alphanumeric so that a key never starts with the
# patch marker "---".
keys = st.builds(
    lambda first, rest: first + rest,
    st.sampled_from(string.ascii_letters + string.digits),
    st.text(alphabet=key_alphabet, max_size=20),
)

value_starts = st.characters(blacklist_categories=("C", "Z"))
value_chars = st.one_of(value_starts, st.just(" "))


@st.composite
def values(draw, max_size=30):
    return draw(value_starts) + draw(st.text(alphabet=value_chars, max_size=max_size))


@st.composite
def trailers(draw):
    return draw(keys), draw(values())


@st.composite
def continued_trailers(draw):
    """
    A key, the value on the first line and the continuation lines of the
    value without their leading space.
    """
    key = draw(keys)
    first = draw(values())
    continuations = draw(st.lists(values(), min_size=1, max_size=4))
    return key, first, continuations


prose_lines = st.builds(
    "This is line {} of prose.".format,
    st.integers(min_value=0, max_value=1000),
)


def trailer_line(key, value):
    return f"{key}: {value}\n"


def message_with_block(block, title="Title", body="Some body text."):
    return f"{title}\n\n{body}\n\n{block}"
