from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import BinaryIO, List, Optional, Sequence, TextIO, Tuple

from .compression import encode_payload
from .config import FormattingConfig
from .emitter import emit_array
from .loader import InputSource, read_source


HEADER_OPENING = '/*-*-c++-*-*'


@dataclass(frozen=True)
class NamingContext:
	prefix: str
	base_variable_name: str
	base_size_variable_name: str

	@property
	def variable_name(self) -> str:
		return f'{self.prefix}{self.base_variable_name}'

	@property
	def size_variable_name(self) -> str:
		return f'{self.prefix}{self.base_size_variable_name}'


@dataclass(frozen=True)
class SourceReport:
	name: str
	original_size: int
	encoded_size: int
	variable_name: str
	size_variable_name: str


def derive_prefix(filename: str) -> str:
	# PureWindowsPath splits on both '/' and '\'.
	return PureWindowsPath(filename).name.replace('.', '_')


def naming_for(config: FormattingConfig, prefix: str = '') -> NamingContext:
	return NamingContext(prefix, config.variable_name, config.size_variable_name)


def _text_lines(text: str) -> List[str]:
	# Only "\n" ends a line; a trailing newline does not start an empty one.
	lines = text.split('\n')
	if lines[-1] == '':
		lines.pop()
	return lines


def render_header(config: FormattingConfig) -> str:
	"""Build the leading block comment, or an empty string when there is none.

	The border lines are sized to the configured width; the copyright and
	description lines themselves are never wrapped.
	"""
	if not config.has_header:
		return ''

	width = config.width
	copyright_text = config.copyright_text
	lines = [HEADER_OPENING + '*' * (width - len(HEADER_OPENING))]

	if copyright_text:
		lines.extend(f'* {line}' for line in _text_lines(copyright_text))

	if copyright_text and config.description:
		lines.append('*' * (width - 4) + '//**')

	if config.description:
		lines.append('* \\file')
		lines.append('*')
		lines.extend(f'* {line}' for line in _text_lines(config.description))

	lines.append('*' * (width - 1) + '/')
	lines.append('')

	return '\n'.join(lines) + '\n'


def encode_source(
	source: InputSource,
	naming: NamingContext,
	config: FormattingConfig,
	left_indentation: int = 0,
	stdin: Optional[BinaryIO] = None,
) -> Tuple[str, SourceReport]:
	data = read_source(source, stdin)
	payload = encode_payload(data, config.compress)

	text = emit_array(
		payload,
		left_indentation=left_indentation,
		indentation=config.indentation,
		width=config.width,
		variable_name=naming.variable_name,
		variable_type=config.variable_type,
		size_variable_name=naming.size_variable_name,
		size_variable_type=config.size_variable_type,
	)
	report = SourceReport(
		name=source.display_name,
		original_size=len(data),
		encoded_size=len(payload),
		variable_name=naming.variable_name,
		size_variable_name=naming.size_variable_name,
	)
	return text, report


def build_payload(
	config: FormattingConfig,
	inputs: Sequence[str],
	output: TextIO,
	stdin: Optional[BinaryIO] = None,
) -> List[SourceReport]:
	"""Write the header, optional namespace and every declaration to ``output``.

	No inputs means standard input. With several inputs each declaration pair
	is named after its file and preceded by a comment line. The first input
	that cannot be opened raises UnreadableSourceError; whatever was written
	for earlier inputs stays in ``output``.
	"""
	reports = []

	output.write(render_header(config))

	left_indentation = 0
	if config.namespace:
		# Left open; whoever includes the output closes the namespace.
		output.write(f'namespace {config.namespace}{{\n')
		left_indentation = config.indentation

	if len(inputs) <= 1:
		source = InputSource(inputs[0] if inputs else None)
		text, report = encode_source(source, naming_for(config), config, left_indentation, stdin)
		output.write(text)
		reports.append(report)
		return reports

	for filename in inputs:
		source = InputSource(filename)
		naming = naming_for(config, derive_prefix(filename))

		# Load before writing the comment so a failing source leaves no trace.
		text, report = encode_source(source, naming, config, left_indentation, stdin)
		output.write(f'// Contents of {filename}:\n')
		output.write(text)
		reports.append(report)

	return reports
