# -*- test-case-name: passthru.test.test_resource -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Twisted Web integration.
"""

from twisted.web.iweb import IRequest
from twisted.web.resource import Resource
from twisted.web.server import NOT_DONE_YET

from ._imessage import IHTTPResponse
from ._output import RequestOutput


__all__ = ()


class ResponseResource(Resource):
    """
    Leaf resource rendering a single L{IHTTPResponse}.

    Rendering sends the response through the request and finishes it.
    Errors raised while sending propagate to Twisted Web, which reports them
    through the request's C{processingFailed}.
    """

    isLeaf = True

    def __init__(self, response: IHTTPResponse) -> None:
        super().__init__()
        self.response = response

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.response!r}>"

    def render(self, request: IRequest) -> bytes:
        self.response.send(RequestOutput(request))
        request.finish()
        return NOT_DONE_YET  # type: ignore[return-value]
