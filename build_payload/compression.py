import struct
import zlib


COMPRESSION_LEVEL = 9

# Big-endian uncompressed length in front of the zlib stream, the framing
# read back by Qt's qUncompress.
LENGTH_PREFIX = struct.Struct('>I')


def compress_payload(data: bytes) -> bytes:
	if len(data) > 0xFFFFFFFF:
		raise ValueError(f'Payload of {len(data):,} bytes is too large for a 32-bit length prefix')

	# An empty payload is framed as the bare zero length.
	if not data:
		return LENGTH_PREFIX.pack(0)

	return LENGTH_PREFIX.pack(len(data)) + zlib.compress(data, COMPRESSION_LEVEL)


def encode_payload(data: bytes, compress: bool) -> bytes:
	"""Return the bytes that end up in the array literal."""
	if not compress:
		return data
	return compress_payload(data)
