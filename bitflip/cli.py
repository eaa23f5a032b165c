import argparse
import logging
import sys

from bitflip import __version__
from bitflip.config.bconfig import DEFAULT_MODE, LOG_LEVEL, OUTPUT_FORMATS
from bitflip.services.bitflip_service import INPUT_ENCODINGS, perform_bitflip, perform_bitsquatting
from bitflip.services.format import Format
from bitflip.services.generator import MODES


def build_parser():
	parser = argparse.ArgumentParser(
		prog='bitflip',
		usage='%(prog)s [OPTION]... STRING',
		description=
		'''Generates every variant of STRING that differs from it by exactly one flipped bit, '''
		'''for bitsquatting research.''',
		formatter_class=lambda prog: argparse.HelpFormatter(prog, max_help_position=30)
		)

	parser.add_argument('string', help='String (or domain name with --squat) to flip')
	parser.add_argument('-m', '--mode', type=str, default=DEFAULT_MODE, choices=list(MODES),
		help='Generation mode: %s (default: %s)' % (', '.join(MODES), DEFAULT_MODE))
	parser.add_argument('-e', '--encoding', type=str, default='utf-8', choices=INPUT_ENCODINGS,
		help='How STRING is turned into bytes: utf-8, hex (default: utf-8)')
	parser.add_argument('-f', '--format', type=str, default='list', choices=OUTPUT_FORMATS,
		help='Output format: list, json, csv (default: list)')
	parser.add_argument('-n', '--limit', type=int, metavar='NUM', help='Stop after NUM variants')
	parser.add_argument('--allowed-chars', type=str, metavar='CHARS',
		help='Only keep variants whose new characters are in CHARS (text modes)')
	parser.add_argument('--squat', action='store_true', help='Treat STRING as a domain and print its bitsquatting variants')
	parser.add_argument('--version', action='version', version='bitflip {}'.format(__version__))
	return parser


def main(argv=None):
	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(level=LOG_LEVEL)

	def p_err(text):
		print(str(text), file=sys.stderr, flush=True)

	try:
		if args.squat:
			variants = perform_bitsquatting(args.string, allowed_chars=args.allowed_chars, limit=args.limit)
		else:
			variants = perform_bitflip(args.string,
				mode=args.mode,
				encoding=args.encoding,
				allowed_chars=args.allowed_chars,
				limit=args.limit)
	except (TypeError, ValueError) as e:
		p_err(e)
		return 1

	logging.debug('Generated %d variants', len(variants))

	if args.format == 'json':
		print(Format(variants).json())
	elif args.format == 'csv':
		print(Format(variants).csv())
	else:
		print(Format(variants).list())
	return 0


if __name__ == '__main__':
	sys.exit(main())
