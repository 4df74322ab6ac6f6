"""
In-memory transports for exercising sessions and clients without a module.

``MockTransport`` replays canned replies in order; ``ScriptedMockTransport``
additionally checks each request against an expected frame before
releasing the matching reply.

Example:
    >>> mock = MockTransport()
    >>> mock.add_response(FrameCodec().encode(Command(0xEF, b"\\x00")))
    >>> client = IntegraClient(mock, config=SessionConfig(min_send_interval=0))
    >>> (await client.send(Command(0xEF))).success
    True
"""

from __future__ import annotations

from collections import deque

from satelink.exceptions import TimeoutError, TransportError
from satelink.transport.abc import AbstractTransport


class MockTransport(AbstractTransport):
    """
    Transport that serves queued replies and records every request.

    A queued reply is handed out by the next ``read`` (in pieces when it
    is longer than ``max_bytes``). An empty reply reads as end of stream,
    like a module hanging up. Reading with nothing queued raises
    TimeoutError immediately.

    Attributes:
        written_data: Copies of every frame written, oldest first.
        open_count: Successful ``open`` calls.
        close_count: ``close`` calls that actually closed the link.
    """

    def __init__(self, port_name: str = "mock://test", default_timeout: float = 5.0) -> None:
        self._port_name = port_name
        self._default_timeout = default_timeout
        self._connected = False
        self._replies: deque[bytes] = deque()
        self._partial = bytearray()
        self._requests: list[bytes] = []
        self._open_failure: Exception | None = None
        self.open_count = 0
        self.close_count = 0

    @property
    def is_open(self) -> bool:
        return self._connected

    @property
    def port_name(self) -> str:
        return self._port_name

    @property
    def written_data(self) -> list[bytes]:
        return list(self._requests)

    # =========================================================================
    # Test setup
    # =========================================================================

    def add_response(self, response: bytes) -> None:
        """Queue one reply."""
        self._replies.append(bytes(response))

    def add_responses(self, *responses: bytes) -> None:
        """Queue several replies in order."""
        self._replies.extend(bytes(r) for r in responses)

    def fail_next_open(self, error: Exception) -> None:
        """Make the next ``open`` raise ``error`` once."""
        self._open_failure = error

    # =========================================================================
    # AbstractTransport
    # =========================================================================

    async def open(self, timeout: float | None = None) -> None:
        if self._connected:
            raise TransportError(f"{self._port_name} is already open")
        failure, self._open_failure = self._open_failure, None
        if failure is not None:
            raise failure
        self._connected = True
        self.open_count += 1

    async def close(self) -> None:
        """Close; a reply that was only partly read is dropped."""
        if self._connected:
            self.close_count += 1
        self._connected = False
        self._partial.clear()

    async def write(self, data: bytes) -> None:
        self._require_open()
        frame = bytes(data)
        self._requests.append(frame)
        self._after_write(frame)

    async def read(self, max_bytes: int, timeout: float | None = None) -> bytes:
        self._require_open()

        if not self._partial:
            if not self._replies:
                raise TimeoutError(
                    f"No reply queued on {self._port_name}",
                    timeout_seconds=self._default_timeout if timeout is None else timeout,
                )
            reply = self._replies.popleft()
            if not reply:
                return b""
            self._partial.extend(reply)

        chunk = bytes(self._partial[:max_bytes])
        del self._partial[:max_bytes]
        return chunk

    def discard_buffers(self) -> None:
        self._partial.clear()

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_written(self, expected: bytes, index: int = -1) -> None:
        """Fail unless request ``index`` equals ``expected``."""
        if not self._requests:
            raise AssertionError(f"Nothing was written to {self._port_name}")
        actual = self._requests[index]
        if actual != expected:
            raise AssertionError(f"Request {index}: expected {expected.hex().upper()}, got {actual.hex().upper()}")

    def assert_write_count(self, expected: int) -> None:
        """Fail unless exactly ``expected`` requests were written."""
        if len(self._requests) != expected:
            raise AssertionError(f"Expected {expected} request(s), got {len(self._requests)}")

    def _require_open(self) -> None:
        if not self._connected:
            raise TransportError(f"{self._port_name} is not open")

    def _after_write(self, frame: bytes) -> None:
        """Hook run after each recorded write."""


class ScriptedMockTransport(MockTransport):
    """
    Mock transport that walks through request/reply steps.

    Each write consumes one step: the request is compared with the step's
    expected frame (when given) and the step's reply becomes readable.
    Writes past the end of the script are recorded and get no reply.

    Example:
        >>> mock = ScriptedMockTransport()
        >>> mock.expect(response=version_frame, request=codec.encode(Command(0x7E)))
    """

    def __init__(self, port_name: str = "mock://scripted") -> None:
        super().__init__(port_name)
        self._steps: list[tuple[bytes | None, bytes]] = []
        self._position = 0

    @property
    def script_complete(self) -> bool:
        return self._position >= len(self._steps)

    def expect(self, response: bytes, request: bytes | None = None) -> None:
        """
        Append a step.

        Args:
            response: Reply released by the matching write.
            request: Exact frame the write must carry, or None for any.
        """
        self._steps.append((request, bytes(response)))

    def _after_write(self, frame: bytes) -> None:
        if self.script_complete:
            return
        request, reply = self._steps[self._position]
        if request is not None and frame != request:
            raise AssertionError(
                f"Step {self._position}: expected {request.hex().upper()}, got {frame.hex().upper()}"
            )
        self._position += 1
        self._replies.append(reply)
