import idna
from typing import FrozenSet, Generator, Iterable, List, Optional, Set, Tuple
from bitflip.config.bconfig import HOSTNAME_ALLOWED_CHARS, VALID_FQDN_REGEX
from bitflip.services.generator import bitflip_text
from bitflip.services.variant import Variant
from bitflip.utils.domain_util import _debug, domain_tld

# --- Bitsquatter Class ---

class Bitsquatter:
    """
    Generates bitsquatting permutations of a domain name: every name that
    differs from the original by a single flipped bit in one of its labels
    and is still a usable hostname.

    The main domain label is always fuzzed. Subdomain labels are fuzzed too
    when `subdomains` is set. The TLD is left untouched.
    """

    def __init__(self,
                 domain: str,
                 allowed_chars: Optional[Iterable[str]] = None,
                 subdomains: bool = True) -> None:
        """
        Initializes the Bitsquatter with a target domain.

        Args:
            domain (str): The target domain string (e.g., "www.example.com").
            allowed_chars (Optional[Iterable[str]]): Characters a flipped label may
                                                     introduce. Defaults to `HOSTNAME_ALLOWED_CHARS`.
            subdomains (bool): Also flip bits in the subdomain labels.

        Raises:
            ValueError: If the input domain is empty or a valid domain part cannot be extracted.
        """
        if not domain:
            raise ValueError("Input domain cannot be empty")

        # Split the input domain into subdomain, main domain part, and TLD
        self.subdomain, domain_part, self.tld = domain_tld(domain.lower())

        try:
            # Decode the main domain part from Punycode to Unicode (if applicable)
            self.domain: str = idna.decode(domain_part) if domain_part else ''
        except idna.IDNAError as e:
            raise ValueError(f"Invalid domain part '{domain_part}': {e}") from e

        if not self.domain or not self.tld:
            raise ValueError(f"No valid domain found in input '{domain}'")

        # ASCII form of the input; flips that map back onto it (e.g. case flips) are dropped
        original_unicode = '.'.join(p for p in (self.subdomain, self.domain, self.tld) if p)
        try:
            self.original_ascii: str = idna.encode(original_unicode, uts46=True).decode('ascii')
        except (idna.IDNAError, UnicodeError) as e:
            raise ValueError(f"Invalid domain '{domain}': {e}") from e

        self.allowed_chars: FrozenSet[str] = frozenset(allowed_chars) if allowed_chars is not None else HOSTNAME_ALLOWED_CHARS
        self.subdomains = subdomains

        # Stores the generated unique domain variants
        self.domains: Set[Variant] = set()

    def _bitsquatting(self, text_to_fuzz: str) -> Generator[Tuple[int, int, str], None, None]:
        """
        Flips single bits in the UTF-8 encoding of `text_to_fuzz`.

        Yields:
            Tuple[int, int, str]: (byte offset, bit, variation) for each flip that is
                valid UTF-8 and only introduces allowed characters.
        """
        if not text_to_fuzz: return
        yield from bitflip_text(text_to_fuzz, allowed_chars=self.allowed_chars).with_positions()

    def generate(self) -> None:
        """
        Generates bitsquatting variants of the domain label and, if enabled,
        of each subdomain label. Results are collected in `self.domains`.
        """
        self.domains.clear()

        for offset, bit, label in self._bitsquatting(self.domain):
            self._add_variant('bitsquatting-domain', self.subdomain, label, offset, bit)

        if self.subdomains and self.subdomain:
            labels = self.subdomain.split('.')
            for index, sub_label in enumerate(labels):
                for offset, bit, flipped in self._bitsquatting(sub_label):
                    sub_part = '.'.join(labels[:index] + [flipped] + labels[index + 1:])
                    self._add_variant('bitsquatting-subdomain', sub_part, self.domain, offset, bit)

    def _add_variant(self, mode: str, sub_part: str, dom_part: str, offset: int, bit: int) -> None:
        """
        Builds the full domain, encodes it to Punycode, validates it and,
        if valid, adds it to `self.domains`.
        """
        domain_components = []
        if sub_part: domain_components.append(sub_part)
        domain_components.append(dom_part)
        domain_components.append(self.tld)
        full_domain_unicode = '.'.join(domain_components)

        try:
            # uts46=True applies the IDNA 2008 mapping (lowercasing and friends)
            full_domain_ascii = idna.encode(full_domain_unicode, uts46=True).decode('ascii')
        except (idna.IDNAError, UnicodeError) as e:
            _debug(f"Skipping '{full_domain_unicode}': {e}")
            return

        if len(full_domain_ascii) > 253:
            _debug(f"Skipping domain exceeding 253 characters: {full_domain_ascii}")
            return

        if not VALID_FQDN_REGEX.match(full_domain_ascii):
            _debug(f"Skipping domain failing FQDN regex: {full_domain_ascii}")
            return

        if full_domain_ascii == self.original_ascii:
            _debug(f"Skipping domain equal to the input: {full_domain_ascii}")
            return

        self.domains.add(Variant(mode=mode, value=full_domain_ascii, offset=offset, bit=bit))

    def variants(self, unicode: bool = False) -> List[Variant]:
        """
        Returns the generated domain variants, sorted.

        Args:
            unicode (bool): If True, decodes domain names from Punycode back to Unicode.

        Returns:
            List[Variant]: A sorted list of Variant objects.
        """
        processed = [v.copy() for v in self.domains]

        if unicode:
            def _decode_domain_to_unicode(v: Variant) -> Variant:
                try:
                    v.value = idna.decode(v.value)
                except idna.IDNAError as e:
                    _debug(e)
                return v
            processed = list(map(_decode_domain_to_unicode, processed))

        return sorted(processed)
