from dataclasses import dataclass
from typing import Optional

from .errors import UsageError


DEFAULT_COPYRIGHT = 'Copyright 2020 Inesonic, LLC.\nAll rights reserved.'
DEFAULT_INDENTATION = 4
DEFAULT_WIDTH = 120
DEFAULT_VARIABLE_NAME = 'declarations'
DEFAULT_VARIABLE_TYPE = 'static const unsigned char'
DEFAULT_SIZE_VARIABLE_NAME = 'declarationsSize'
DEFAULT_SIZE_VARIABLE_TYPE = 'static const unsigned long'


@dataclass(frozen=True)
class FormattingConfig:
	"""Everything that shapes the generated text, fixed for the whole run.

	``variable_name`` and ``size_variable_name`` are used as-is for a single
	source and as suffixes behind a filename-derived prefix when several
	sources are embedded.
	"""

	indentation: int = DEFAULT_INDENTATION
	width: int = DEFAULT_WIDTH
	namespace: str = ''
	description: str = ''
	copyright: str = DEFAULT_COPYRIGHT
	no_copyright: bool = False
	compress: bool = True
	variable_name: str = DEFAULT_VARIABLE_NAME
	variable_type: str = DEFAULT_VARIABLE_TYPE
	size_variable_name: str = DEFAULT_SIZE_VARIABLE_NAME
	size_variable_type: str = DEFAULT_SIZE_VARIABLE_TYPE

	@property
	def copyright_text(self) -> Optional[str]:
		if self.no_copyright:
			return None
		return self.copyright

	@property
	def has_header(self) -> bool:
		return bool(self.copyright_text) or bool(self.description)

	def validate(self) -> 'FormattingConfig':
		if self.indentation <= 0:
			raise UsageError(f'Invalid indentation value {self.indentation}')
		if self.width <= 0:
			raise UsageError(f'Invalid width value {self.width}')
		return self
