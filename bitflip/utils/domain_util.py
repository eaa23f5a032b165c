import os
import sys

from tld import parse_tld


def domain_tld(domain):
    """Splits a domain name into (subdomain, domain, TLD)."""

    d = parse_tld(domain, fix_protocol=True)[::-1]
    if d[1:] == d[:-1] and None in d:
        # Unknown suffix: fall back to the last two dots
        d = tuple(domain.rsplit('.', 2))
        d = ('',) * (3 - len(d)) + d
    return tuple(part or '' for part in d)


def _debug(msg):
    if 'DEBUG' in os.environ:
        if isinstance(msg, Exception):
            print('{}:{} {}'.format(__file__, msg.__traceback__.tb_lineno, str(msg)), file=sys.stderr, flush=True)
        else:
            print(str(msg), file=sys.stderr, flush=True)
