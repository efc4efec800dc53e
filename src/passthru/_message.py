# -*- test-case-name: passthru.test.test_message -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
HTTP message body API.

A body is either L{bytes} held in memory or a L{StreamBody} read from a
handle, never both.
"""

from typing import Any, Callable, Optional, Union

from attr import attrib, attrs
from attr.validators import instance_of, optional
from tubes.itube import IFount

from twisted.logger import Logger

from ._attrs_zope import provides
from ._handle import (
    DEFAULT_CHUNK_SIZE,
    copyHandle,
    positive,
    releaseHandle,
)
from ._imessage import (
    FountAlreadyAccessedError,
    IReadableHandle,
    MissingResourceError,
)
from ._tubes import HandleFount, bytesToFount, fountToBytes


__all__ = ()


log = Logger()


@attrs(frozen=True)
class StreamBody:
    """
    Body read from a handle when the message is sent.
    """

    handle: Optional[IReadableHandle] = attrib(
        validator=optional(provides(IReadableHandle)), default=None
    )

    closeOnComplete: bool = attrib(validator=instance_of(bool), default=True)

    chunkSize: int = attrib(validator=positive, default=DEFAULT_CHUNK_SIZE)


InternalBody = Union[bytes, StreamBody]


@attrs(frozen=False)
class MessageState:
    """
    Internal mutable state for HTTP message implementations in L{passthru}.
    """

    cachedBody: Optional[bytes] = attrib(
        validator=optional(instance_of(bytes)), default=None, init=False
    )

    headersSent: bool = attrib(
        validator=instance_of(bool), default=False, init=False
    )

    bodySent: bool = attrib(
        validator=instance_of(bool), default=False, init=False
    )


def validateBody(instance: Any, attribute: Any, body: InternalBody) -> None:
    """
    Validator for L{InternalBody}.
    """

    if not isinstance(body, (bytes, StreamBody)):
        raise TypeError("body must be bytes or StreamBody")


def _attachedHandle(body: StreamBody) -> IReadableHandle:
    if body.handle is None:
        raise MissingResourceError("no handle is attached to the response")
    return body.handle


def checkSource(body: InternalBody, state: MessageState) -> None:
    """
    Raise L{MissingResourceError} if C{body} still has to be sent from a
    handle and none is attached.
    """
    if not state.bodySent and isinstance(body, StreamBody):
        _attachedHandle(body)


def sendBody(
    body: InternalBody, state: MessageState, write: Callable[[bytes], object]
) -> None:
    """
    Write a given L{InternalBody} to C{write}, unless it was already sent.

    A missing handle is reported before the body is marked as sent; any
    other failure happens after.
    """
    if state.bodySent:
        return

    if isinstance(body, bytes):
        state.bodySent = True
        if body:
            write(body)
        return

    handle = _attachedHandle(body)
    state.bodySent = True

    try:
        copied = copyHandle(handle, write, body.chunkSize)
    finally:
        if body.closeOnComplete:
            releaseHandle(handle)

    log.debug(
        "Copied {count} bytes from {handle!r}", count=copied, handle=handle
    )


def bodyAsFount(body: InternalBody, state: MessageState) -> IFount:
    """
    Return a fount for a given L{InternalBody}.
    """

    if state.bodySent:
        raise FountAlreadyAccessedError()

    if isinstance(body, bytes):
        state.bodySent = True
        return bytesToFount(body)

    handle = _attachedHandle(body)
    state.bodySent = True

    return HandleFount(
        handle,
        closeOnComplete=body.closeOnComplete,
        chunkSize=body.chunkSize,
    )


async def bodyAsBytes(body: InternalBody, state: MessageState) -> bytes:
    """
    Return bytes for a given L{InternalBody}.
    """

    if isinstance(body, bytes):
        return body

    if state.cachedBody is not None:
        return state.cachedBody

    state.cachedBody = await fountToBytes(bodyAsFount(body, state))

    return state.cachedBody
