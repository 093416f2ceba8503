"""
Configuration of the characters and literal prefixes that the trailer
block locator and the tokenizer look for.

The defaults follow git: '#' starts a comment line, ':' separates a
trailer key from its value, lines starting with '---' start the patch
and "Signed-off-by: " and "(cherry picked from commit " are generated by
git itself.
"""

from dataclasses import dataclass, fields


def as_bytes(value):
    """
    If a str, encode as utf-8, otherwise return the bytes of the value.
    """
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


@dataclass(frozen=True)
class TrailerConfig:
    comment_char: bytes = b"#"
    separators: bytes = b":"
    generated_prefixes: tuple = (b"Signed-off-by: ", b"(cherry picked from commit ")
    patch_marker: bytes = b"---"
    conflicts_header: bytes = b"Conflicts:\n"

    def __post_init__(self):
        # frozen, so normalization has to bypass __setattr__
        object.__setattr__(self, "comment_char", as_bytes(self.comment_char))
        object.__setattr__(self, "separators", as_bytes(self.separators))
        prefixes = self.generated_prefixes
        if isinstance(prefixes, (str, bytes, bytearray)):
            prefixes = (prefixes,)
        object.__setattr__(
            self, "generated_prefixes", tuple(as_bytes(p) for p in prefixes)
        )
        object.__setattr__(self, "patch_marker", as_bytes(self.patch_marker))
        object.__setattr__(self, "conflicts_header", as_bytes(self.conflicts_header))
        self.validate()

    def validate(self):
        if len(self.comment_char) != 1:
            raise ValueError(
                f"comment_char must be a single byte, got {self.comment_char!r}"
            )
        if not self.separators:
            raise ValueError("At least one trailer separator is required")
        for sep in self.separators:
            sep = bytes([sep])
            if sep.isalnum() or sep.isspace() or sep in b"-\0":
                raise ValueError(f"Invalid trailer separator {sep!r}")
        if not self.patch_marker:
            raise ValueError("patch_marker must not be empty")
        if not self.conflicts_header:
            raise ValueError("conflicts_header must not be empty")
        if not all(self.generated_prefixes):
            raise ValueError("Generated trailer prefixes must not be empty")

    @classmethod
    def from_dict(cls, values):
        """
        Create a TrailerConfig from a mapping of field names to values,
        ie. TrailerConfig.from_dict({"separators": ":="}).

        :param values: Mapping with a subset of the fields of TrailerConfig.
        :raises ValueError: If values contains a key which is not a field.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown trailer config options: {sorted(unknown)}")
        return cls(**values)


DEFAULT_CONFIG = TrailerConfig()
