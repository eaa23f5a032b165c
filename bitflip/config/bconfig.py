# bconfig.py

import os
import re

# Default values for environment-based configurations
DEFAULT_MODE = os.environ.get('BITFLIP_DEFAULT_MODE', 'text')
MAX_INPUT_LENGTH = int(os.environ.get('BITFLIP_MAX_INPUT_LENGTH', 253))
LOG_LEVEL = os.environ.get('BITFLIP_LOG_LEVEL', 'INFO').upper()

# Other constants
VALID_FQDN_REGEX = re.compile(r'(?=^.{4,253}$)(^((?!-)[a-z0-9-]{1,63}(?<!-)\.)+[a-z0-9-]{2,63}$)')
# Characters a bitsquatted hostname label may contain
HOSTNAME_ALLOWED_CHARS = frozenset('abcdefghijklmnopqrstuvwxyz0123456789-')
OUTPUT_FORMATS = ('json', 'csv', 'list')
