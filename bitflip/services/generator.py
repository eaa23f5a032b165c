from typing import Callable, Dict, FrozenSet, Generator, Iterable, Iterator, Optional, Tuple, Union

# --- Bitflip Generator ---
# Enumerates every single-bit flip of a byte sequence. Positions are visited
# byte by byte from offset 0, and within each byte from the least significant
# bit upwards, so the order of the output is fixed for a given input.

BytesLike = Union[bytes, bytearray, memoryview]

BITS_PER_BYTE = 8
ASCII_BITS = 7  # high bit is left alone in the ASCII modes


class InvalidInputEncoding(ValueError):
    """
    Raised when a text mode is asked to flip an input that is not valid UTF-8.

    The check happens when the sequence is created, so the caller gets the
    error before any variant is produced.
    """

    def __init__(self, value: Union[str, BytesLike], reason: str = 'invalid UTF-8'):
        self.value = value
        super().__init__(f"Input {value!r} is not valid UTF-8: {reason}")


class BitflipSequence:
    """
    Lazy, restartable sequence of single-bit-flip variants of `data`.

    Every call to `iter()` starts a new traversal over the same immutable
    input, so the sequence can be consumed any number of times and always
    yields the same variants in the same order. Nothing is computed until the
    consumer asks for the next variant.
    """

    __slots__ = ('_data', '_bits', '_text', '_allowed', '_original_text')

    def __init__(self,
                 data: bytes,
                 bits: int = BITS_PER_BYTE,
                 text: bool = False,
                 allowed_chars: Optional[Iterable[str]] = None) -> None:
        """
        Args:
            data (bytes): The input bytes. Stored as an immutable copy.
            bits (int): How many bits of each byte to flip, counted from the
                        least significant one. 8 for full bytes, 7 for ASCII.
            text (bool): If True, candidates are decoded as UTF-8 and those that
                         fail are skipped; variants are yielded as `str`.
            allowed_chars (Optional[Iterable[str]]): Text mode only. When set, a
                         variant is kept only if every character changed by
                         the flip is in this set.
        """
        if not 1 <= bits <= BITS_PER_BYTE:
            raise ValueError(f"bits must be between 1 and {BITS_PER_BYTE}, got {bits}")
        if allowed_chars is not None and not text:
            raise ValueError("allowed_chars only applies to text modes")

        self._data: bytes = bytes(data)
        self._bits: int = bits
        self._text: bool = text
        self._allowed: Optional[FrozenSet[str]] = frozenset(allowed_chars) if allowed_chars is not None else None
        # Text input is validated before construction
        self._original_text: str = self._data.decode('utf-8') if text else ''

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def positions(self) -> int:
        """Number of candidate flip positions (an upper bound on the output length)."""
        return len(self._data) * self._bits

    def __iter__(self) -> Iterator[Union[bytes, str]]:
        for _offset, _bit, value in self.with_positions():
            yield value

    def with_positions(self) -> Generator[Tuple[int, int, Union[bytes, str]], None, None]:
        """
        Walks the flip positions in order.

        Yields:
            Tuple[int, int, Union[bytes, str]]: (byte offset, bit offset, variant)
                for each position that survives filtering.
        """
        data = self._data
        for offset, byte_val in enumerate(data):
            for bit in range(self._bits):
                # Copy of the input with a single byte replaced
                candidate = data[:offset] + bytes((byte_val ^ (1 << bit),)) + data[offset + 1:]
                if not self._text:
                    yield offset, bit, candidate
                    continue

                try:
                    variant = candidate.decode('utf-8')
                except UnicodeDecodeError:
                    continue  # flip broke the encoding, not an error
                if self._allowed is not None and not self._is_allowed(variant):
                    continue
                yield offset, bit, variant

    def _changed_chars(self, variant: str) -> str:
        """Returns the run of characters in `variant` that differs from the input."""
        original = self._original_text
        limit = min(len(original), len(variant))
        start = 0
        while start < limit and original[start] == variant[start]:
            start += 1
        end = 0
        while end < limit - start and original[-1 - end] == variant[-1 - end]:
            end += 1
        return variant[start:len(variant) - end]

    def _is_allowed(self, variant: str) -> bool:
        return all(char in self._allowed for char in self._changed_chars(variant))

    def __repr__(self) -> str:
        mode = 'text' if self._text else 'raw'
        return f"{type(self).__name__}(data={self._data!r}, bits={self._bits}, mode='{mode}')"


# --- Input Handling ---

def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        raise TypeError('raw modes expect bytes, not str; encode the string first')
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return bytes(data)


def _as_utf8(text: Union[str, BytesLike]) -> bytes:
    """Returns the UTF-8 bytes of `text`, raising InvalidInputEncoding if it has none."""
    if isinstance(text, str):
        try:
            return text.encode('utf-8')
        except UnicodeEncodeError as e:
            # Lone surrogates cannot be encoded
            raise InvalidInputEncoding(text, e.reason) from e

    data = _as_bytes(text)
    try:
        data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidInputEncoding(data, e.reason) from e
    return data


# --- Public Operations ---

def bitflip_raw(data: BytesLike) -> BitflipSequence:
    """
    Flips each bit of `data` in turn.

    The returned sequence yields exactly `8 * len(data)` byte strings.

    Raises:
        TypeError: If `data` is not bytes-like.
    """
    return BitflipSequence(_as_bytes(data))


def bitflip_text(text: Union[str, BytesLike],
                 allowed_chars: Optional[Iterable[str]] = None) -> BitflipSequence:
    """
    Flips each bit of the UTF-8 encoding of `text`, keeping only the results
    that are valid UTF-8 in their own right.

    Args:
        text (Union[str, BytesLike]): The text, or its UTF-8 bytes.
        allowed_chars (Optional[Iterable[str]]): Characters a flip is allowed to produce.

    Returns:
        BitflipSequence: Yields `str` variants.

    Raises:
        InvalidInputEncoding: If `text` is not valid UTF-8. Raised before any output.
    """
    return BitflipSequence(_as_utf8(text), text=True, allowed_chars=allowed_chars)


def bitflip_ascii_raw(data: BytesLike) -> BitflipSequence:
    """
    Flips the low seven bits of each byte of `data`: `7 * len(data)` variants.

    No check is made that `data` is ASCII. High bits are never flipped.
    """
    return BitflipSequence(_as_bytes(data), bits=ASCII_BITS)


def bitflip_ascii_text(text: Union[str, BytesLike],
                       allowed_chars: Optional[Iterable[str]] = None) -> BitflipSequence:
    """Text mode restricted to the low seven bits of each byte."""
    return BitflipSequence(_as_utf8(text), bits=ASCII_BITS, text=True, allowed_chars=allowed_chars)


# Map mode names to their generation functions
MODES: Dict[str, Callable[..., BitflipSequence]] = {
    'raw': bitflip_raw,
    'text': bitflip_text,
    'ascii-raw': bitflip_ascii_raw,
    'ascii-text': bitflip_ascii_text,
}
TEXT_MODES = frozenset({'text', 'ascii-text'})


def generate(value: Union[str, BytesLike],
             mode: str = 'text',
             allowed_chars: Optional[Iterable[str]] = None) -> BitflipSequence:
    """
    Dispatches to the generation function registered for `mode`.

    Raises:
        ValueError: If `mode` is unknown, or `allowed_chars` is given for a raw mode.
    """
    try:
        func = MODES[mode]
    except KeyError:
        raise ValueError(f"Unknown mode '{mode}', expected one of: {', '.join(MODES)}") from None

    if mode in TEXT_MODES:
        return func(value, allowed_chars=allowed_chars)
    if allowed_chars is not None:
        raise ValueError(f"allowed_chars only applies to text modes, not '{mode}'")
    return func(value)
