"""Pytest fixtures for webencoders tests."""
import base64

import pytest
from Crypto.Random import get_random_bytes

from webencoders import Base64UrlCodec, CodecConfig


@pytest.fixture
def codec():
    """Returns a codec with the default configuration."""
    return Base64UrlCodec(CodecConfig.default())


@pytest.fixture
def random_payloads():
    """Generates random payloads covering every length remainder mod 3."""
    return [get_random_bytes(size) for size in range(1, 65)]


@pytest.fixture
def large_payload():
    """Generates a 1 MiB random payload."""
    return get_random_bytes(1024 * 1024)


class RecordingEngine:
    """Standard engine that records the padded text it is asked to decode."""
    
    def __init__(self):
        self.decoded = []
        self.encoded = []
    
    def encode(self, data):
        self.encoded.append(bytes(data))
        return base64.b64encode(data)
    
    def decode(self, data):
        self.decoded.append(bytes(data))
        return base64.b64decode(bytes(data), validate=True)


@pytest.fixture
def recording_engine():
    """Returns an engine that records its inputs."""
    return RecordingEngine()
