"""Shared fixtures for satelink tests."""

import pytest

from satelink import IntegraClient, SessionConfig
from satelink.protocol import Command, FrameCodec
from satelink.transport.mock import MockTransport, ScriptedMockTransport

# Session settings that never sleep
FAST_CONFIG = SessionConfig(
    min_send_interval=0,
    busy_retry_delay=0,
    busy_max_delay=0,
    read_timeout=1.0,
)


@pytest.fixture
def fast_config():
    """SessionConfig without rate limiting or busy delays."""
    return FAST_CONFIG


@pytest.fixture
def codec():
    """Default frame codec."""
    return FrameCodec()


@pytest.fixture
def make_frame(codec):
    """Build a valid reply frame from an opcode and payload."""

    def _make(opcode: int, payload: bytes = b"") -> bytes:
        return codec.encode(Command(opcode, payload))

    return _make


@pytest.fixture
def request_frame(codec):
    """Build the frame a client sends for an opcode and arguments."""

    def _make(opcode: int, arguments: bytes = b"") -> bytes:
        return codec.encode(Command(opcode, arguments))

    return _make


@pytest.fixture
def name_payload():
    """Build a 0xEE payload: type, number, function, padded name, partition."""

    def _make(number: int, name: str, object_type: int = 0x05, partition: int | None = 1) -> bytes:
        data = bytes([object_type, number & 0xFF, 0x01]) + name.ljust(16).encode("latin-1")
        if partition is not None:
            data += bytes([partition])
        return data

    return _make


@pytest.fixture
def mock_transport():
    """Create a MockTransport instance."""
    return MockTransport()


@pytest.fixture
def scripted_transport():
    """Create a ScriptedMockTransport instance."""
    return ScriptedMockTransport()


@pytest.fixture
def client(mock_transport, fast_config):
    """IntegraClient over a MockTransport."""
    return IntegraClient(mock_transport, config=fast_config)


@pytest.fixture
def scripted_client(scripted_transport, fast_config):
    """IntegraClient over a ScriptedMockTransport."""
    return IntegraClient(scripted_transport, config=fast_config)
