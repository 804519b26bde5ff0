import argparse
import re
import sys
from pathlib import Path
from typing import Callable, List, NoReturn, Optional, Sequence, TextIO

from . import config as defaults
from .config import FormattingConfig
from .errors import PayloadError, UnwritableOutputError, UsageError
from .orchestrator import SourceReport, build_payload


class PayloadArgumentParser(argparse.ArgumentParser):
	# argparse would print usage and exit with status 2; report it like any
	# other failure instead.
	def error(self, message: str) -> NoReturn:
		raise UsageError(message)


def _leading_count(text: str) -> int:
	match = re.match(r'\s*\+?(\d+)', text)
	return int(match.group(1)) if match else 0


def _positive(label: str) -> Callable[[str], int]:
	def parse(text: str) -> int:
		value = _leading_count(text)
		if value <= 0:
			raise argparse.ArgumentTypeError(f'Invalid {label} value {text}')
		return value
	return parse


def create_parser() -> PayloadArgumentParser:
	parser = PayloadArgumentParser(
		prog='build_payload',
		description=(
			'Convert files, in raw binary form, to a C99 or C++ array suitable for inclusion '
			'within a program, optionally compressed with the zlib container Qt reads back.'
		),
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  %(prog)s -o font.h font.ttf                  # 'declarations' and 'declarationsSize'
  %(prog)s -n assets -v Data -V Size a.png b.png  # a_pngData, a_pngSize, b_pngData, ...
  cat blob.bin | %(prog)s -Z -C                 # uncompressed, no header block
        """
	)

	parser.add_argument(
		'inputs',
		nargs='*',
		metavar='file',
		help='Input files to embed, in order (default: standard input)'
	)

	parser.add_argument(
		'-o', '--output',
		metavar='filename',
		help='Output file (default: standard output)'
	)

	parser.add_argument(
		'-c', '--copyright',
		metavar='message',
		default=defaults.DEFAULT_COPYRIGHT,
		help=(
			'Copyright message placed in the header block (default: the Inesonic notice); '
			'use --copyright=-text for a message starting with "-"'
		)
	)

	parser.add_argument(
		'-C', '--no-copyright',
		action='store_true',
		help='Remove the copyright message; -c/--copyright is ignored'
	)

	parser.add_argument(
		'-d', '--description',
		metavar='text',
		default='',
		help=(
			'Description placed in a \\file section of the header block; '
			'use --description=-text for text starting with "-"'
		)
	)

	parser.add_argument(
		'-i', '--indentation',
		metavar='indentation',
		type=_positive('indentation'),
		default=defaults.DEFAULT_INDENTATION,
		help=f'Indentation in spaces (default: {defaults.DEFAULT_INDENTATION})'
	)

	parser.add_argument(
		'-w', '--width',
		metavar='width',
		type=_positive('width'),
		default=defaults.DEFAULT_WIDTH,
		help=f'Maximum line length, ignored for header text (default: {defaults.DEFAULT_WIDTH})'
	)

	parser.add_argument(
		'-n', '--namespace',
		metavar='namespace',
		default='',
		help='Namespace to place the generated content under'
	)

	parser.add_argument(
		'-v', '--variable',
		metavar='variable|suffix',
		dest='variable_name',
		default=defaults.DEFAULT_VARIABLE_NAME,
		help=(
			'Payload variable name, or the suffix appended to filename-based names when '
			f'several files are given (default: "{defaults.DEFAULT_VARIABLE_NAME}")'
		)
	)

	parser.add_argument(
		'-t', '--type',
		metavar='variable type',
		dest='variable_type',
		default=defaults.DEFAULT_VARIABLE_TYPE,
		help=f'Type of the payload array (default: "{defaults.DEFAULT_VARIABLE_TYPE}")'
	)

	parser.add_argument(
		'-V', '--size-variable',
		metavar='variable|suffix',
		dest='size_variable_name',
		default=defaults.DEFAULT_SIZE_VARIABLE_NAME,
		help=(
			'Payload size variable name, or suffix when several files are given '
			f'(default: "{defaults.DEFAULT_SIZE_VARIABLE_NAME}")'
		)
	)

	parser.add_argument(
		'-T', '--size-type',
		metavar='variable type',
		dest='size_variable_type',
		default=defaults.DEFAULT_SIZE_VARIABLE_TYPE,
		help=f'Type of the payload size (default: "{defaults.DEFAULT_SIZE_VARIABLE_TYPE}")'
	)

	parser.add_argument(
		'-z', '--zlib',
		dest='compress',
		action='store_true',
		default=True,
		help='Compress the payload into a length-prefixed zlib container (default)'
	)

	parser.add_argument(
		'-Z', '--no-zlib',
		dest='compress',
		action='store_false',
		help='Embed the payload uncompressed'
	)

	parser.add_argument(
		'--verbose',
		action='store_true',
		help='Report every embedded file on standard error'
	)

	return parser


def config_from_args(args: argparse.Namespace) -> FormattingConfig:
	return FormattingConfig(
		indentation=args.indentation,
		width=args.width,
		namespace=args.namespace,
		description=args.description,
		copyright=args.copyright,
		no_copyright=args.no_copyright,
		compress=args.compress,
		variable_name=args.variable_name,
		variable_type=args.variable_type,
		size_variable_name=args.size_variable_name,
		size_variable_type=args.size_variable_type,
	).validate()


def _report(reports: List[SourceReport], destination: str) -> None:
	for report in reports:
		print(
			f'Embedded {report.name}: {report.original_size:,} bytes -> '
			f'{report.encoded_size:,} bytes as {report.variable_name}',
			file=sys.stderr
		)
	print(f'Wrote {len(reports)} payload(s) to {destination}', file=sys.stderr)


def run(config: FormattingConfig, inputs: Sequence[str], output: Optional[str], stdout: TextIO) -> List[SourceReport]:
	if not output:
		return build_payload(config, inputs, stdout)

	output_path = Path(output)
	try:
		output_file = output_path.open('w', encoding='utf-8', errors='surrogateescape')
	except OSError as e:
		raise UnwritableOutputError(output) from e

	with output_file:
		return build_payload(config, inputs, output_file)


def main(argv: Optional[Sequence[str]] = None) -> int:
	parser = create_parser()

	# Undecodable file names are written back as the bytes they came from.
	if hasattr(sys.stdout, 'reconfigure'):
		sys.stdout.reconfigure(errors='surrogateescape')

	try:
		args = parser.parse_intermixed_args(argv)
		config = config_from_args(args)

		if args.verbose:
			print(f'Inputs: {", ".join(args.inputs) or "<stdin>"}', file=sys.stderr)
			print(f'Output: {args.output or "<stdout>"}', file=sys.stderr)

		reports = run(config, args.inputs, args.output, sys.stdout)

		if args.verbose:
			_report(reports, args.output or '<stdout>')

		return 0

	except PayloadError as e:
		print(f'*** {e}', file=sys.stderr)
		return 1

	except OSError as e:
		print(f'*** {e}', file=sys.stderr)
		return 1

	except KeyboardInterrupt:
		print('\n*** Operation cancelled by user.', file=sys.stderr)
		return 1


if __name__ == '__main__':
	sys.exit(main())
