import struct
import zlib


def decode_container(payload: bytes) -> bytes:
	(length,) = struct.unpack('>I', payload[:4])
	if length == 0:
		return b''
	data = zlib.decompress(payload[4:])
	assert len(data) == length
	return data
