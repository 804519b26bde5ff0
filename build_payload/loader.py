import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import UnreadableSourceError


@dataclass(frozen=True)
class InputSource:
	"""A named file, or standard input when ``path`` is None."""

	path: Optional[str] = None

	@property
	def is_stdin(self) -> bool:
		return self.path is None

	@property
	def display_name(self) -> str:
		return '<stdin>' if self.path is None else self.path


def read_source(source: InputSource, stdin: Optional[BinaryIO] = None) -> bytes:
	"""Read every byte of ``source`` up to end-of-stream.

	Standard input is taken from ``stdin`` when given, otherwise from the
	binary buffer behind ``sys.stdin``. A named file is opened and closed
	here; failing to open it raises UnreadableSourceError. An empty source
	simply yields ``b''``.
	"""
	if source.is_stdin:
		stream = stdin if stdin is not None else sys.stdin.buffer
		return stream.read()

	try:
		with Path(source.path).open('rb') as input_file:
			return input_file.read()
	except OSError as e:
		raise UnreadableSourceError(source.path) from e
