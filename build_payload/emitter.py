from typing import Iterator


SEPARATOR = ', '


def format_byte(value: int) -> str:
	return f'0x{value:02X}'


# Columns taken by one "0xHH, " entry; the wrap arithmetic below is only as
# good as this number, so it follows the element format.
TOKEN_WIDTH = len(format_byte(0) + SEPARATOR)


def values_per_line(width: int, indentation: int, left_indentation: int = 0) -> int:
	"""Number of entries written on each content line.

	This is a fixed columnar wrap on the configured bound, including the
	historical ``+ 1``, never fewer than one entry per line.
	"""
	capacity = (width - indentation - left_indentation + 1) // TOKEN_WIDTH
	return max(capacity, 1)


def iter_content_lines(payload: bytes, per_line: int, indent: str) -> Iterator[str]:
	if not payload:
		return

	for i in range(0, len(payload), per_line):
		chunk = payload[i:i + per_line]
		entries = SEPARATOR.join(format_byte(byte) for byte in chunk)

		# Every entry but the very last keeps its separator, even at a line end.
		suffix = SEPARATOR if i + per_line < len(payload) else ''
		yield f'{indent}{entries}{suffix}'


def emit_array(
	payload: bytes,
	*,
	left_indentation: int,
	indentation: int,
	width: int,
	variable_name: str,
	variable_type: str,
	size_variable_name: str,
	size_variable_type: str,
) -> str:
	"""Render ``payload`` as an array declaration followed by its size constant."""
	left = ' ' * left_indentation
	content_indent = ' ' * (left_indentation + indentation)
	count = len(payload)
	per_line = values_per_line(width, indentation, left_indentation)

	lines = [f'{left}{variable_type} {variable_name}[{count}] = {{']
	lines.extend(iter_content_lines(payload, per_line, content_indent))
	lines.append(f'{left}}};')
	lines.append('')
	lines.append(f'{left}{size_variable_type} {size_variable_name} = {count};')
	lines.append('')

	return '\n'.join(lines) + '\n'
