"""Encoder configuration model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EncoderConfig:
    """
    Options for the flatten-for-serialization encoder.

    Attributes:
        treat_strings_as_primitive: Pass strings through unchanged. When off,
            strings go through record reflection and are rejected.
        ensure_ascii: Escape non-ASCII characters in the output.
        indent: Spaces per level for indented output.
    """

    treat_strings_as_primitive: bool = True
    ensure_ascii: bool = False
    indent: int = 2

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError("indent must be an integer")

        if self.indent <= 0:
            raise ValueError("indent must be positive")
