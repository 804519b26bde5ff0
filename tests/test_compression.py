import os
import zlib

import pytest

from build_payload.compression import COMPRESSION_LEVEL, compress_payload, encode_payload

from .util import decode_container


def test_disabled_returns_input_unchanged():
	data = b'\x00\x01\x02'
	assert encode_payload(data, False) is data


def test_container_layout():
	data = b'hello world' * 10
	payload = encode_payload(data, True)

	assert payload[:4] == len(data).to_bytes(4, 'big')
	assert payload[4:] == zlib.compress(data, COMPRESSION_LEVEL)


@pytest.mark.parametrize('data', [b'x', bytes(1000), os.urandom(4096), bytes(range(256)) * 3])
def test_round_trip(data):
	assert decode_container(encode_payload(data, True)) == data


def test_empty_input_yields_bare_length():
	assert compress_payload(b'') == b'\x00\x00\x00\x00'
	assert decode_container(encode_payload(b'', True)) == b''


def test_deterministic():
	data = os.urandom(2048)
	assert encode_payload(data, True) == encode_payload(data, True)
