"""
Shared tools for passthru's test suite.
"""

from io import BytesIO
from typing import List, Optional, Tuple

from attr import Factory, attrib, attrs
from zope.interface import implementer

from .._imessage import IReadableHandle, IResponseOutput, RawHeaders


__all__ = ()


@implementer(IResponseOutput)
@attrs(frozen=False)
class RecordingOutput:
    """
    Output which remembers everything written to it.
    """

    heads: List[Tuple[int, RawHeaders]] = attrib(default=Factory(list))
    chunks: List[bytes] = attrib(default=Factory(list))

    def writeHead(self, status: int, rawHeaders: RawHeaders) -> None:
        self.heads.append((status, tuple(rawHeaders)))

    def write(self, data: bytes) -> None:
        self.chunks.append(data)

    @property
    def body(self) -> bytes:
        return b"".join(self.chunks)


@implementer(IReadableHandle)
@attrs(frozen=False)
class MemoryHandle:
    """
    Handle reading from memory, which counts reads and closes and can be
    told to fail.

    @ivar readError: Raised by L{read} once C{readErrorAfter} reads have
        succeeded.
    @ivar closeError: Raised by L{close}; the handle stays open.
    """

    data: bytes = attrib(default=b"")
    readError: Optional[Exception] = attrib(default=None)
    readErrorAfter: int = attrib(default=0)
    closeError: Optional[Exception] = attrib(default=None)

    reads: int = attrib(default=0, init=False)
    closes: int = attrib(default=0, init=False)
    closed: bool = attrib(default=False, init=False)

    def __attrs_post_init__(self) -> None:
        self._buffer = BytesIO(self.data)

    def read(self, size: int) -> bytes:
        self.reads += 1
        if self.readError is not None and self.reads > self.readErrorAfter:
            raise self.readError
        return self._buffer.read(size)

    def close(self) -> None:
        self.closes += 1
        if self.closeError is not None:
            raise self.closeError
        self.closed = True
