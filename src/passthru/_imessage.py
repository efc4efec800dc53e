# Copyright (c) 2011-2021. See LICENSE for details.

"""
Interfaces related to HTTP responses and their sources.

Do not import directly from here, except:
 - From interfaces.py.
 - From implementations of these interfaces.
"""

from typing import AnyStr, Iterable, MutableSequence, Sequence, Tuple, Union

from tubes.itube import IFount
from zope.interface import Attribute, Interface


__all__ = ()


RawHeader = Tuple[bytes, bytes]
RawHeaders = Sequence[RawHeader]
MutableRawHeaders = MutableSequence[RawHeader]


# Errors


class FountAlreadyAccessedError(Exception):
    """
    The HTTP message's fount has already been accessed and is no longer
    available.
    """


class InvalidResourceError(TypeError):
    """
    The given object is not a readable byte stream: it is C{None}, closed,
    opened for text or writing only, or of a type that can not be read from.
    """


class IllegalStateError(RuntimeError):
    """
    The operation is not allowed given the current state of the object; for
    example, byte content was assigned to a response whose body is a stream.
    """


class MissingResourceError(RuntimeError):
    """
    A streaming response was sent without a source handle attached to it.
    """


# Interfaces


class IHTTPHeaders(Interface):
    """
    HTTP entity headers.

    Both header names and values are stored as the raw bytes written to the
    network, in the order they were added.
    The C{rawHeaders} attribute provides the header data as a sequence of
    C{(name, value)} L{tuple}s.

    A dictionary-like interface that maps text names to an ordered sequence of
    text values is also available; it assumes that both header name bytes and
    header value bytes are encoded as ISO-8859-1.
    """

    rawHeaders: RawHeaders = Attribute(
        """
        Raw header data as a tuple in the from: C{((name, value), ...)}.
        C{name} and C{value} are bytes.
        Headers with multiple values are provided as separate name and value
        pairs.
        """
    )

    def getValues(name: AnyStr) -> Iterable[AnyStr]:
        """
        Get the values associated with the given header name.

        If the given name is L{bytes}, the value will be returned as the raw
        header L{bytes}.

        If the given name is L{str}, the name will be encoded as ISO-8859-1
        and the value will be returned as text, by decoding the raw header
        value bytes with ISO-8859-1.

        @param name: The name of the header to look for.

        @return: The values of the header with the given name.
        """


class IMutableHTTPHeaders(IHTTPHeaders):
    """
    Mutable HTTP entity headers.
    """

    def remove(name: AnyStr) -> None:
        """
        Remove all header name/value pairs for the given header name.

        @param name: The name of the header to remove.
        """

    def addValue(name: AnyStr, value: AnyStr) -> None:
        """
        Add the given header name/value pair.

        If the given name is L{bytes}, the value must also be L{bytes}.

        If the given name is L{str}, it will be encoded as ISO-8859-1, and the
        value, which must also be L{str}, will be encoded as ISO-8859-1.
        """


class IReadableHandle(Interface):
    """
    A sequential source of bytes which can be read to its end and released.
    """

    closed: bool = Attribute("Whether the handle has been released.")

    def read(size: int) -> bytes:
        """
        Read at most C{size} bytes.

        @return: The bytes read; an empty L{bytes} at end of stream.
        """

    def close() -> None:
        """
        Release the underlying resource.
        """


class IResponseOutput(Interface):
    """
    The raw output channel a response is written to.

    The head (status and headers) is written first, then any number of body
    chunks.
    """

    def writeHead(status: int, rawHeaders: RawHeaders) -> None:
        """
        Write the status and headers of the response.
        """

    def write(data: bytes) -> None:
        """
        Write a chunk of the response body.
        """


class IHTTPResponse(Interface):
    """
    HTTP response.
    """

    status: int = Attribute("Response status code.")
    headers: IMutableHTTPHeaders = Attribute("Response headers.")
    headersSent: bool = Attribute(
        "Whether the response status and headers have been sent."
    )
    sent: bool = Attribute("Whether the response body has been sent.")

    def getContent() -> Union[bytes, bool]:
        """
        The in-memory body of the response.

        @return: The body as L{bytes}, or C{False} if the body is not held in
            memory and must be read from its stream instead.
        """

    def setContent(content: Union[bytes, None]) -> "IHTTPResponse":
        """
        Set the in-memory body of the response.

        @raise IllegalStateError: If C{content} is not C{None} and the body of
            the response is a stream.
        """

    def sendHeaders(output: IResponseOutput) -> None:
        """
        Write the status and headers to the given output.

        @note: The head is only written once; later calls do nothing.
        """

    def sendBody(output: IResponseOutput) -> None:
        """
        Write the body to the given output.

        @note: The body is only written once; later calls do nothing.
        """

    def send(output: IResponseOutput) -> "IHTTPResponse":
        """
        Write the status, headers and body to the given output.

        @raise MissingResourceError: If the body is read from a handle and
            none is attached; nothing is written then.
        """

    def bodyAsFount() -> IFount:
        """
        The entity body, as a fount.

        @note: The fount may only be accessed once, and not after the body has
            been sent.

        @raise FountAlreadyAccessedError: If the fount has previously been
            accessed or the body has been sent.
        """


class IStreamingResponse(IHTTPResponse):
    """
    HTTP response whose body is read from a handle.
    """

    sourceHandle: IReadableHandle = Attribute(
        "The handle the body is read from, or C{None}."
    )
    closeOnComplete: bool = Attribute(
        "Whether the handle is released after the body is sent."
    )

    def attach(handle: object) -> "IStreamingResponse":
        """
        Use the given handle as the source of the body.

        @raise InvalidResourceError: If C{handle} is not a readable stream.
        """

    def setCloseOnComplete(closeOnComplete: bool) -> "IStreamingResponse":
        """
        Set whether the handle is released after the body is sent.
        """
