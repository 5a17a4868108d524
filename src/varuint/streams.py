"""Byte stream ports used by the codecs.

The codecs write to a *sink* and read from a *source*. Any binary file-like
object works: ``io.BytesIO``, an open file, ``socket.makefile("rwb")``. This
module also provides small in-memory implementations of both ports.

Port failures are never retried; they surface immediately as StreamError.
"""

from __future__ import annotations

import io
import logging
from typing import Optional, Protocol, runtime_checkable

from .exceptions import StreamError, TruncatedInputError

logger = logging.getLogger(__name__)


@runtime_checkable
class Sink(Protocol):
    """Destination of encoded bytes.

    ``write`` returns the number of bytes accepted. Returning None is taken
    to mean the whole buffer was accepted, except for raw streams
    (``io.RawIOBase``) where None means the write would block.
    """

    def write(self, data: bytes, /) -> Optional[int]: ...


@runtime_checkable
class Source(Protocol):
    """Origin of encoded bytes.

    ``read(size)`` returns at most ``size`` bytes; ``b""`` signals orderly
    end of data.
    """

    def read(self, size: int, /) -> Optional[bytes]: ...


def write_all(sink: Sink, data: bytes) -> int:
    """Write every byte of ``data`` to ``sink``.

    Short writes are continued until the buffer is drained.

    Args:
        sink: Destination port
        data: Bytes to write

    Returns:
        Number of bytes written (always ``len(data)``)

    Raises:
        StreamError: If the sink raises OSError or stops accepting bytes
    """
    view = memoryview(data)
    total = len(view)
    offset = 0

    while offset < total:
        try:
            written = sink.write(bytes(view[offset:]))
        except OSError as e:
            logger.debug("Sink failed after %d of %d bytes: %s", offset, total, e)
            raise StreamError(f"Sink failed after {offset} of {total} bytes: {e}") from e

        if written is None:
            # Raw streams return None when the write would block
            if isinstance(sink, io.RawIOBase):
                logger.debug("Sink not ready after %d of %d bytes", offset, total)
                raise StreamError(f"Sink not ready after {offset} of {total} bytes")
            break
        if written <= 0:
            logger.debug("Sink accepted no bytes after %d of %d bytes", offset, total)
            raise StreamError(f"Sink accepted no bytes after {offset} of {total} bytes")
        offset += written

    return total


def read_exact(source: Source, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``source``.

    Args:
        source: Origin port
        size: Number of bytes required

    Returns:
        The bytes read

    Raises:
        TruncatedInputError: If the source ends before ``size`` bytes
        StreamError: If the source raises OSError or has no data ready
    """
    result = bytearray()

    while len(result) < size:
        try:
            chunk = source.read(size - len(result))
        except OSError as e:
            logger.debug("Source failed after %d of %d bytes: %s", len(result), size, e)
            raise StreamError(f"Source failed after {len(result)} of {size} bytes: {e}") from e

        if chunk is None:
            logger.debug("Source has no data ready after %d of %d bytes", len(result), size)
            raise StreamError(f"Source has no data ready after {len(result)} of {size} bytes")
        if not chunk:
            raise TruncatedInputError(
                f"Truncated input: need {size} bytes, source ended after {len(result)}"
            )
        result.extend(chunk)

    return bytes(result)


def read_byte(source: Source) -> Optional[int]:
    """Read a single byte, returning None at orderly end of data.

    Raises:
        StreamError: If the source raises OSError or has no data ready
    """
    try:
        chunk = source.read(1)
    except OSError as e:
        logger.debug("Source failed reading one byte: %s", e)
        raise StreamError(f"Source failed: {e}") from e

    if chunk is None:
        logger.debug("Source has no data ready reading one byte")
        raise StreamError("Source has no data ready")
    if not chunk:
        return None
    return chunk[0]


class ByteWriter:
    """In-memory sink accumulating encoded bytes.

    Example:
        >>> from varuint import encode
        >>> writer = ByteWriter()
        >>> encode(300, writer)
        2
        >>> writer.to_bytes()
        b'\\xf1<'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write(self, data: bytes) -> int:
        """Append bytes to the buffer.

        Args:
            data: Bytes to append

        Returns:
            Number of bytes appended
        """
        self._buffer.extend(data)
        return len(data)

    def byte_length(self) -> int:
        """Return the number of bytes written so far."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return a copy of everything written."""
        return bytes(self._buffer)

    def clear(self) -> None:
        """Discard everything written."""
        self._buffer.clear()


class ByteReader:
    """In-memory source reading from a byte buffer.

    Example:
        >>> from varuint import decode
        >>> reader = ByteReader(b"\\xf1<\\x05")
        >>> decode(reader)
        300
        >>> reader.bytes_remaining()
        1
    """

    def __init__(self, data: bytes, offset: int = 0) -> None:
        """Initialize a reader over ``data`` starting at ``offset``.

        Args:
            data: Byte buffer to read
            offset: Starting position in the buffer

        Raises:
            ValueError: If offset is outside the buffer
        """
        if offset < 0 or offset > len(data):
            raise ValueError(f"Offset {offset} outside buffer of {len(data)} bytes")
        self._data = memoryview(bytes(data))
        self._position = offset

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes; a negative size reads everything left.

        Returns:
            The bytes read, ``b""`` once the buffer is exhausted
        """
        if size < 0:
            end = len(self._data)
        else:
            end = min(self._position + size, len(self._data))

        chunk = self._data[self._position : end].tobytes()
        self._position = end
        return chunk

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
