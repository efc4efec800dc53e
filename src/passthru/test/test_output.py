# -*- test-case-name: passthru.test.test_output -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Tests for L{passthru._output}.
"""

from twisted.internet.testing import StringTransport
from twisted.web.test.requesthelper import DummyRequest

from .._imessage import IllegalStateError, IResponseOutput
from .._output import RequestOutput, TransportOutput
from ._trial import TestCase


__all__ = ()


class RequestOutputTests(TestCase):
    """
    Tests for L{RequestOutput}.
    """

    def test_interface(self) -> None:
        """
        L{RequestOutput} implements L{IResponseOutput}.
        """
        self.assertProvides(IResponseOutput, RequestOutput(DummyRequest([])))

    def test_writeHead(self) -> None:
        """
        L{RequestOutput.writeHead} sets the response code and adds each header
        to the request.
        """
        request = DummyRequest([])

        RequestOutput(request).writeHead(
            404, ((b"content-type", b"text/plain"), (b"vary", b"a"))
        )

        self.assertEqual(request.responseCode, 404)
        self.assertEqual(
            request.responseHeaders.getRawHeaders(b"content-type"),
            [b"text/plain"],
        )
        self.assertEqual(
            request.responseHeaders.getRawHeaders(b"vary"), [b"a"]
        )

    def test_write(self) -> None:
        """
        L{RequestOutput.write} writes to the request.
        """
        request = DummyRequest([])
        output = RequestOutput(request)

        output.write(b"abc")
        output.write(b"def")

        self.assertEqual(request.written, [b"abc", b"def"])


class TransportOutputTests(TestCase):
    """
    Tests for L{TransportOutput}.
    """

    def test_interface(self) -> None:
        """
        L{TransportOutput} implements L{IResponseOutput}.
        """
        self.assertProvides(
            IResponseOutput, TransportOutput(StringTransport())
        )

    def test_writeHead(self) -> None:
        """
        L{TransportOutput.writeHead} writes an HTTP/1.1 status line and one
        line per header, then a blank line.
        """
        transport = StringTransport()

        TransportOutput(transport).writeHead(
            404,
            (
                (b"content-type", b"text/plain"),
                (b"set-cookie", b"a=1"),
                (b"set-cookie", b"b=2"),
            ),
        )

        self.assertEqual(
            transport.value(),
            b"HTTP/1.1 404 Not Found\r\n"
            b"Content-Type: text/plain\r\n"
            b"Set-Cookie: a=1\r\n"
            b"Set-Cookie: b=2\r\n"
            b"\r\n",
        )

    def test_writeHeadUnknownStatus(self) -> None:
        """
        L{TransportOutput.writeHead} writes an empty reason phrase for a
        status it does not know.
        """
        transport = StringTransport()
        TransportOutput(transport).writeHead(599, ())
        self.assertEqual(transport.value(), b"HTTP/1.1 599 \r\n\r\n")

    def test_writeHeadTwice(self) -> None:
        """
        L{TransportOutput.writeHead} raises L{IllegalStateError} when the head
        was already written.
        """
        output = TransportOutput(StringTransport())
        output.writeHead(200, ())
        self.assertRaises(IllegalStateError, output.writeHead, 200, ())

    def test_write(self) -> None:
        """
        L{TransportOutput.write} writes to the transport as is.
        """
        transport = StringTransport()
        output = TransportOutput(transport)

        output.write(b"\r\n")
        output.write(b"data")

        self.assertEqual(transport.value(), b"\r\ndata")
