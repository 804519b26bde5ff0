import pytest


@pytest.fixture
def write_file(tmp_path):
	def write(name: str, data: bytes):
		path = tmp_path / name
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_bytes(data)
		return path
	return write
