"""Decoder configuration model."""

from dataclasses import dataclass
from typing import Tuple

SUPPORTED_INT_BITS = (32, 64)


@dataclass(frozen=True)
class DecoderConfig:
    """
    Options for the parse-to-native decoder.

    Attributes:
        coerce_scalars: Convert boolean, integer and float tokens to native
            values. When off every scalar comes back as its JSON text
            (deprecated raw mode).
        null_as_text: Return ``null`` tokens as the text ``"null"`` rather
            than ``None``.
        int_bits: Width of the signed integer range accepted for integer
            tokens.
    """

    coerce_scalars: bool = True
    null_as_text: bool = True
    int_bits: int = 32

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        if self.int_bits not in SUPPORTED_INT_BITS:
            raise ValueError(
                f"int_bits must be one of {SUPPORTED_INT_BITS}, got {self.int_bits}"
            )

    def int_range(self) -> Tuple[int, int]:
        """Inclusive bounds of the accepted integer range."""
        bound = 1 << (self.int_bits - 1)
        return -bound, bound - 1
