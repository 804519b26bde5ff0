import re

from build_payload.emitter import TOKEN_WIDTH, emit_array, format_byte, iter_content_lines, values_per_line


def _emit(payload, **overrides):
	options = dict(
		left_indentation=0,
		indentation=4,
		width=120,
		variable_name='data',
		variable_type='static const unsigned char',
		size_variable_name='dataSize',
		size_variable_type='static const unsigned long',
	)
	options.update(overrides)
	return emit_array(payload, **options)


def _entry_lines(text):
	return [line for line in text.splitlines() if line.strip().startswith('0x')]


def test_format_byte_is_uppercase_and_padded():
	assert format_byte(0) == '0x00'
	assert format_byte(0xab) == '0xAB'
	assert format_byte(7) == '0x07'
	assert TOKEN_WIDTH == 6


def test_values_per_line_matches_column_arithmetic():
	assert values_per_line(120, 4, 0) == 19
	assert values_per_line(120, 4, 4) == 18
	assert values_per_line(80, 2, 0) == 13


def test_values_per_line_never_below_one():
	assert values_per_line(1, 4, 0) == 1
	assert values_per_line(3, 4, 8) == 1


def test_empty_payload():
	text = _emit(b'')
	assert text == (
		'static const unsigned char data[0] = {\n'
		'};\n'
		'\n'
		'static const unsigned long dataSize = 0;\n'
		'\n'
	)


def test_single_byte():
	text = _emit(b'\x0f')
	assert text.startswith('static const unsigned char data[1] = {\n    0x0F\n};\n\n')
	assert text.endswith('static const unsigned long dataSize = 1;\n\n')


def test_wraps_nineteen_entries_per_line_at_default_width():
	text = _emit(bytes(range(50)))
	lines = _entry_lines(text)

	assert len(lines) == 3
	assert lines[0].count(',') == 19
	assert lines[1].count(',') == 19
	assert lines[2].count('0x') == 12
	assert lines[0] == '    ' + ', '.join(f'0x{i:02X}' for i in range(19)) + ', '
	assert not lines[2].endswith(',')


def test_exact_multiple_has_no_trailing_separator():
	lines = _entry_lines(_emit(bytes(38)))
	assert len(lines) == 2
	assert lines[0].endswith('0x00, ')
	assert lines[1].endswith('0x00')


def test_left_indentation_applies_to_every_line():
	text = _emit(bytes(3), left_indentation=4)
	assert text.splitlines() == [
		'    static const unsigned char data[3] = {',
		'        0x00, 0x00, 0x00',
		'    };',
		'',
		'    static const unsigned long dataSize = 3;',
		'',
	]


def test_narrow_width_emits_one_entry_per_line():
	lines = _entry_lines(_emit(b'abc', width=2))
	assert lines == ['    0x61, ', '    0x62, ', '    0x63']


def test_size_constant_matches_element_count():
	for size in (0, 1, 18, 19, 20, 257):
		text = _emit(bytes(size))
		declared = int(re.search(r'data\[(\d+)\]', text).group(1))
		constant = int(re.search(r'dataSize = (\d+);', text).group(1))
		assert declared == constant == size == text.count('0x')


def test_iter_content_lines_empty():
	assert list(iter_content_lines(b'', 4, '  ')) == []
