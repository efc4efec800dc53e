# -*- test-case-name: passthru.test.test_handle -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Readable handles: the sources a streaming response copies its body from.
"""

import errno
import io
import os
import socket
from typing import IO, Any, Callable

from attr import attrib, attrs
from attr.validators import instance_of
from zope.interface import implementer

from twisted.logger import Logger

from ._imessage import IReadableHandle, InvalidResourceError


__all__ = ()


log = Logger()

DEFAULT_CHUNK_SIZE = 65536


def positive(instance: Any, attribute: Any, value: int) -> None:
    """
    Validator for strictly positive integers.
    """
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ValueError(f"{attribute.name} must be a positive int")


@implementer(IReadableHandle)
@attrs(frozen=True)
class FileHandle:
    """
    Readable handle backed by a binary file-like object: an open file, a
    pipe, an in-memory buffer.
    """

    file: IO[bytes] = attrib()

    @property
    def closed(self) -> bool:
        return bool(self.file.closed)

    def read(self, size: int) -> bytes:
        data = self.file.read(size)
        if data is None:
            # Non-blocking file with nothing to read yet.
            raise BlockingIOError(
                errno.EAGAIN, f"no data ready to read from {self.file!r}"
            )
        return data

    def close(self) -> None:
        self.file.close()


@implementer(IReadableHandle)
@attrs(frozen=True)
class SocketHandle:
    """
    Readable handle backed by a connected socket.
    """

    sock: socket.socket = attrib(validator=instance_of(socket.socket))

    @property
    def closed(self) -> bool:
        return self.sock.fileno() == -1

    def read(self, size: int) -> bytes:
        return self.sock.recv(size)

    def close(self) -> None:
        self.sock.close()


@implementer(IReadableHandle)
@attrs(frozen=False)
class DescriptorHandle:
    """
    Readable handle backed by an open file descriptor, such as the read end
    of C{os.pipe()}.
    """

    fd: int = attrib(validator=instance_of(int))

    closed: bool = attrib(
        validator=instance_of(bool), default=False, init=False
    )

    def read(self, size: int) -> bytes:
        return os.read(self.fd, size)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            os.close(self.fd)


def readableHandle(source: object) -> IReadableHandle:
    """
    Return a readable handle for the given source.

    @param source: An object providing L{IReadableHandle}, a binary
        file-like object open for reading, a socket, or a file descriptor.

    @raise InvalidResourceError: If C{source} is C{None}, closed, not
        readable, or of an unsupported type.
    """
    if source is None:
        raise InvalidResourceError("handle must not be None")

    handle: IReadableHandle
    if IReadableHandle.providedBy(source):
        handle = source  # type: ignore[assignment]
    elif isinstance(source, socket.socket):
        handle = SocketHandle(source)
    elif isinstance(source, int) and not isinstance(source, bool):
        try:
            os.fstat(source)
        except (OSError, OverflowError, ValueError):
            raise InvalidResourceError(
                f"handle {source!r} is not an open file descriptor"
            )
        handle = DescriptorHandle(source)
    elif isinstance(source, io.IOBase):
        if isinstance(source, io.TextIOBase):
            raise InvalidResourceError(
                f"handle {source!r} must be opened in binary mode"
            )
        if not source.closed and not source.readable():
            raise InvalidResourceError(
                f"handle {source!r} must be opened for reading"
            )
        handle = FileHandle(source)  # type: ignore[arg-type]
    else:
        raise InvalidResourceError(
            f"handle {source!r} must be a readable file, socket, file "
            "descriptor or IReadableHandle"
        )

    if handle.closed:
        raise InvalidResourceError(f"handle {source!r} is closed")

    return handle


def copyHandle(
    handle: IReadableHandle,
    write: Callable[[bytes], object],
    chunkSize: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """
    Copy everything left in C{handle} to C{write}, one read at a time.

    Errors raised while reading or writing propagate.

    @return: The number of bytes copied.
    """
    copied = 0
    while True:
        data = handle.read(chunkSize)
        if not data:
            return copied
        write(data)
        copied += len(data)


def releaseHandle(handle: IReadableHandle) -> None:
    """
    Close C{handle} if it is still open.

    A failure to close is logged, not raised.
    """
    if handle.closed:
        return
    try:
        handle.close()
    except Exception:
        log.failure("Unable to release handle {handle!r}", handle=handle)
