import itertools
import logging
from typing import Iterable, List, Optional

from bitflip.config.bconfig import DEFAULT_MODE, MAX_INPUT_LENGTH
from bitflip.services.generator import TEXT_MODES, generate
from bitflip.services.squatter import Bitsquatter
from bitflip.services.variant import Variant

INPUT_ENCODINGS = ('utf-8', 'hex')


def decode_input(value: str, mode: str, encoding: str = 'utf-8'):
    """
    Turns request input into what the generator for `mode` expects.

    Text modes take the string as is. Raw modes take bytes: either the UTF-8
    encoding of the string or, with encoding='hex', the bytes it spells out.
    """
    if encoding not in INPUT_ENCODINGS:
        raise ValueError(f"Unknown input encoding '{encoding}', expected one of: {', '.join(INPUT_ENCODINGS)}")
    if encoding == 'hex':
        try:
            data = bytes.fromhex(value)
        except ValueError:
            raise ValueError(f"Input '{value}' is not a valid hex string") from None
        return data

    if mode in TEXT_MODES:
        return value
    # surrogatepass keeps lone surrogates intact for raw modes
    return value.encode('utf-8', 'surrogatepass')


def perform_bitflip(value: str,
                    mode: str = DEFAULT_MODE,
                    encoding: str = 'utf-8',
                    allowed_chars: Optional[Iterable[str]] = None,
                    limit: Optional[int] = None) -> List[Variant]:
    """
    Generates the single-bit-flip variants of `value` as Variant records,
    in enumeration order. Raw variants are rendered as lowercase hex.

    Raises:
        InvalidInputEncoding: Text mode on input that is not valid UTF-8.
        ValueError: Unknown mode or encoding, bad hex, bad limit, oversize input.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    data = decode_input(value, mode, encoding)
    size = len(data.encode('utf-8', 'surrogatepass')) if isinstance(data, str) else len(data)
    if size > MAX_INPUT_LENGTH:
        raise ValueError(f"Input is {size} bytes long, the maximum is {MAX_INPUT_LENGTH}")

    sequence = generate(data, mode=mode, allowed_chars=allowed_chars)
    logging.debug("Generating up to %d variants in mode '%s'", sequence.positions, mode)

    variants = []
    # islice stops the lazy traversal once the limit is reached
    for offset, bit, flipped in itertools.islice(sequence.with_positions(), limit):
        flipped = flipped if isinstance(flipped, str) else flipped.hex()
        variants.append(Variant(mode=mode, value=flipped, offset=offset, bit=bit))
    return variants


def perform_bitsquatting(domain: str,
                         allowed_chars: Optional[Iterable[str]] = None,
                         subdomains: bool = True,
                         unicode: bool = False,
                         limit: Optional[int] = None) -> List[Variant]:
    if limit is not None and limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    squatter = Bitsquatter(domain, allowed_chars=allowed_chars, subdomains=subdomains)
    squatter.generate()
    return squatter.variants(unicode=unicode)[:limit]
