from ._imessage import (
    FountAlreadyAccessedError,
    IHTTPHeaders,
    IHTTPResponse,
    IllegalStateError,
    IMutableHTTPHeaders,
    InvalidResourceError,
    IReadableHandle,
    IResponseOutput,
    IStreamingResponse,
    MissingResourceError,
)


__all__ = (
    "FountAlreadyAccessedError",
    "IHTTPHeaders",
    "IHTTPResponse",
    "IMutableHTTPHeaders",
    "IReadableHandle",
    "IResponseOutput",
    "IStreamingResponse",
    "IllegalStateError",
    "InvalidResourceError",
    "MissingResourceError",
)
