# -*- test-case-name: passthru.test.test_output -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Output channels responses are written to.
"""

from typing import Any

from attr import attrib, attrs
from attr.validators import instance_of
from zope.interface import implementer

from twisted.web.http import RESPONSES
from twisted.web.iweb import IRequest

from ._headers import canonicalHeaderName
from ._imessage import IllegalStateError, IResponseOutput, RawHeaders


__all__ = ()


@implementer(IResponseOutput)
@attrs(frozen=True)
class RequestOutput:
    """
    Output to a Twisted Web request, which takes care of the wire format.
    """

    request: IRequest = attrib()

    def writeHead(self, status: int, rawHeaders: RawHeaders) -> None:
        self.request.setResponseCode(status)
        for name, value in rawHeaders:
            self.request.responseHeaders.addRawHeader(name, value)

    def write(self, data: bytes) -> None:
        self.request.write(data)


@implementer(IResponseOutput)
@attrs(frozen=False)
class TransportOutput:
    """
    Output to anything with a C{write} method accepting L{bytes}: a Twisted
    transport, a socket file, a buffer.

    The head is written as an HTTP/1.1 status line and header block.
    """

    transport: Any = attrib()

    _headWritten: bool = attrib(
        validator=instance_of(bool), default=False, init=False
    )

    def writeHead(self, status: int, rawHeaders: RawHeaders) -> None:
        if self._headWritten:
            raise IllegalStateError(
                "The head of the response has already been written."
            )
        self._headWritten = True

        reason = RESPONSES.get(status, b"")
        lines = [b"HTTP/1.1 %d %s\r\n" % (status, reason)]
        for name, value in rawHeaders:
            lines.append(canonicalHeaderName(name) + b": " + value + b"\r\n")
        lines.append(b"\r\n")

        self.transport.write(b"".join(lines))

    def write(self, data: bytes) -> None:
        self.transport.write(data)
