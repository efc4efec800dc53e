# -*- test-case-name: passthru.test.test_response -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
HTTP response API.
"""

from typing import Mapping, Optional, Union, cast

from attr import Factory, attrib, attrs, evolve
from attr.validators import instance_of
from tubes.itube import IFount
from zope.interface import implementer

from ._handle import DEFAULT_CHUNK_SIZE, readableHandle
from ._headers import asMutableHeaders
from ._imessage import (
    IHTTPResponse,
    IllegalStateError,
    IMutableHTTPHeaders,
    IReadableHandle,
    IResponseOutput,
    IStreamingResponse,
)
from ._message import (
    InternalBody,
    MessageState,
    StreamBody,
    bodyAsBytes,
    bodyAsFount,
    checkSource,
    sendBody,
    validateBody,
)


__all__ = ()


@implementer(IHTTPResponse)
@attrs(frozen=False)
class HTTPResponse:
    """
    HTTP response with a status, headers and a body.

    The head and the body are each sent at most once.
    """

    status: int = attrib(validator=instance_of(int), default=200)

    headers: IMutableHTTPHeaders = attrib(
        converter=asMutableHeaders, default=None
    )

    _body: InternalBody = attrib(validator=validateBody, default=b"")

    _state: MessageState = attrib(default=Factory(MessageState), init=False)

    @property
    def sent(self) -> bool:
        return self._state.bodySent

    def getContent(self) -> Union[bytes, bool]:
        if isinstance(self._body, StreamBody):
            return False
        return self._body

    def setContent(self, content: Optional[bytes]) -> "HTTPResponse":
        if isinstance(self._body, StreamBody):
            if content is not None:
                raise IllegalStateError(
                    "The content cannot be set on a response whose body is "
                    "a stream."
                )
            return self

        if content is None:
            content = b""
        elif not isinstance(content, bytes):
            raise TypeError("content must be bytes")
        self._body = content
        return self

    @property
    def headersSent(self) -> bool:
        return self._state.headersSent

    def sendHeaders(self, output: IResponseOutput) -> None:
        if self._state.headersSent:
            return
        self._state.headersSent = True
        output.writeHead(self.status, self.headers.rawHeaders)

    def sendBody(self, output: IResponseOutput) -> None:
        sendBody(self._body, self._state, output.write)

    def send(self, output: IResponseOutput) -> "HTTPResponse":
        # Nothing is written when the body can not be sent.
        checkSource(self._body, self._state)
        self.sendHeaders(output)
        self.sendBody(output)
        return self

    def bodyAsFount(self) -> IFount:
        return bodyAsFount(self._body, self._state)

    async def bodyAsBytes(self) -> bytes:
        return await bodyAsBytes(self._body, self._state)


@implementer(IStreamingResponse)
class StreamingResponse(HTTPResponse):
    """
    HTTP response whose body is copied from a readable handle (an open file,
    a pipe, a socket) when the response is sent.

    The body can not be set as bytes: L{getContent} returns C{False} and
    L{setContent} only accepts C{None}.

    If C{closeOnComplete} is set, the response releases the handle once the
    body has been copied, whether the copy succeeded or not.

    A send attempted without a handle raises L{MissingResourceError} and does
    not consume the response: attaching a handle and sending again works.
    Any other send consumes it, and later sends do nothing.
    """

    def __init__(
        self,
        handle: object = None,
        status: int = 200,
        headers: Optional[Union[IMutableHTTPHeaders, Mapping]] = None,
        closeOnComplete: bool = True,
        chunkSize: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        super().__init__(
            status=status,
            headers=headers,
            body=StreamBody(
                closeOnComplete=bool(closeOnComplete), chunkSize=chunkSize
            ),
        )
        if handle is not None:
            self.attach(handle)

    @classmethod
    def create(
        cls,
        handle: object = None,
        status: int = 200,
        headers: Optional[Union[IMutableHTTPHeaders, Mapping]] = None,
        closeOnComplete: bool = True,
        chunkSize: int = DEFAULT_CHUNK_SIZE,
    ) -> "StreamingResponse":
        return cls(handle, status, headers, closeOnComplete, chunkSize)

    @property
    def _stream(self) -> StreamBody:
        return cast(StreamBody, self._body)

    @property
    def sourceHandle(self) -> Optional[IReadableHandle]:
        return self._stream.handle

    @property
    def closeOnComplete(self) -> bool:
        return self._stream.closeOnComplete

    def attach(self, handle: object) -> "StreamingResponse":
        # A handle that was attached before is left open.
        self._body = evolve(self._stream, handle=readableHandle(handle))
        return self

    def setCloseOnComplete(
        self, closeOnComplete: bool
    ) -> "StreamingResponse":
        self._body = evolve(
            self._stream, closeOnComplete=bool(closeOnComplete)
        )
        return self
