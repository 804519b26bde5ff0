from .compression import encode_payload
from .config import FormattingConfig
from .emitter import emit_array, values_per_line
from .errors import PayloadError, UnreadableSourceError, UnwritableOutputError, UsageError
from .loader import InputSource, read_source
from .orchestrator import NamingContext, SourceReport, build_payload, derive_prefix, render_header


__version__ = '1.0.0'
