class PayloadError(Exception):
	"""Base class for every failure reported by build_payload."""


class UsageError(PayloadError):
	"""The command line could not be turned into a valid configuration."""


class UnreadableSourceError(PayloadError):
	def __init__(self, path: str) -> None:
		super().__init__(f'Could not open input file {path}')
		self.path = path


class UnwritableOutputError(PayloadError):
	def __init__(self, path: str) -> None:
		super().__init__(f'Could not open output file {path}.')
		self.path = path
