"""Configuration models for JSON Nodes."""

from .encoder_config import EncoderConfig
from .decoder_config import DecoderConfig

__all__ = ["EncoderConfig", "DecoderConfig"]
