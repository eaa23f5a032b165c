"""Single-bit-flip variant generation for bitsquatting research."""

from bitflip.services.generator import (
    BitflipSequence,
    InvalidInputEncoding,
    bitflip_ascii_raw,
    bitflip_ascii_text,
    bitflip_raw,
    bitflip_text,
    generate,
)

__version__ = '0.1.0'

__all__ = [
    "BitflipSequence",
    "InvalidInputEncoding",
    "bitflip_ascii_raw",
    "bitflip_ascii_text",
    "bitflip_raw",
    "bitflip_text",
    "generate",
]
