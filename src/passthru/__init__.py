from ._handle import (
    DEFAULT_CHUNK_SIZE,
    DescriptorHandle,
    FileHandle,
    SocketHandle,
)
from ._headers import MutableHTTPHeaders
from ._output import RequestOutput, TransportOutput
from ._resource import ResponseResource
from ._response import HTTPResponse, StreamingResponse
from ._tubes import HandleFount
from ._version import __version__ as _incremental_version


__all__ = (
    "DEFAULT_CHUNK_SIZE",
    "DescriptorHandle",
    "FileHandle",
    "HTTPResponse",
    "HandleFount",
    "MutableHTTPHeaders",
    "RequestOutput",
    "ResponseResource",
    "SocketHandle",
    "StreamingResponse",
    "TransportOutput",
    "__author__",
    "__copyright__",
    "__license__",
    "__version__",
)


# Make it a str, for backwards compatibility
__version__ = _incremental_version.base()

__author__ = "The passthru contributors (see AUTHORS)"
__license__ = "MIT"
__copyright__ = f"Copyright 2011-2021 {__author__}"
