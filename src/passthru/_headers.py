# -*- test-case-name: passthru.test.test_headers -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
HTTP headers API.
"""

from collections.abc import Mapping as MappingABC
from typing import (
    AnyStr,
    Iterable,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from attr import Factory, attrib, attrs
from zope.interface import implementer

from ._imessage import (
    IMutableHTTPHeaders,
    MutableRawHeaders,
    RawHeader,
    RawHeaders,
)


__all__ = ()


String = Union[bytes, str]
HeaderMapping = Mapping[String, Union[String, Sequence[String]]]


# Encoding/decoding header data

HEADER_NAME_ENCODING = "iso-8859-1"
HEADER_VALUE_ENCODING = "iso-8859-1"


def headerNameAsBytes(name: String) -> bytes:
    """
    Convert a header name to bytes if necessary.
    """
    if isinstance(name, bytes):
        return name
    else:
        return name.encode(HEADER_NAME_ENCODING)


def headerValueAsBytes(value: String) -> bytes:
    """
    Convert a header value to bytes if necessary.
    """
    if isinstance(value, bytes):
        return value
    else:
        return value.encode(HEADER_VALUE_ENCODING)


def headerValueAsText(value: String) -> str:
    """
    Convert a header value to str if necessary.
    """
    if isinstance(value, str):
        return value
    else:
        return value.decode(HEADER_VALUE_ENCODING)


def normalizeHeaderName(name: AnyStr) -> AnyStr:
    """
    Normalize a header name.
    """
    return name.lower()


def canonicalHeaderName(name: bytes) -> bytes:
    """
    Capitalize each dash-separated part of a normalized header name, the way
    header names are conventionally written on the wire.
    """
    return b"-".join(part.capitalize() for part in name.split(b"-"))


# Internal data representation


def normalizeRawHeaders(
    headerPairs: Iterable[Iterable[String]],
) -> Iterable[RawHeader]:
    for pair in headerPairs:
        try:
            name, value = pair
        except ValueError:
            raise ValueError("header pair must be a 2-item iterable")

        yield (
            normalizeHeaderName(headerNameAsBytes(name)),
            headerValueAsBytes(value),
        )


def mappingAsRawHeaders(headers: HeaderMapping) -> Iterable[RawHeader]:
    """
    Flatten a mapping of header names to a value or a sequence of values
    into header pairs.
    """
    for name, valueOrValues in headers.items():
        if isinstance(valueOrValues, (str, bytes)):
            values: Sequence[String] = [valueOrValues]
        else:
            values = valueOrValues
        for value in values:
            yield (name, value)


def normalizeRawHeadersMutable(
    headerPairs: Union[HeaderMapping, Iterable[Iterable[String]]],
) -> MutableRawHeaders:
    if isinstance(headerPairs, MappingABC):
        headerPairs = mappingAsRawHeaders(headerPairs)
    return list(normalizeRawHeaders(headerPairs))


def getFromRawHeaders(rawHeaders: RawHeaders, name: AnyStr) -> Iterable[AnyStr]:
    """
    Get a value from raw headers.
    """
    if isinstance(name, bytes):
        name = normalizeHeaderName(name)
        return (v for n, v in rawHeaders if name == n)

    if isinstance(name, str):
        rawName = headerNameAsBytes(normalizeHeaderName(name))
        return (headerValueAsText(v) for n, v in rawHeaders if rawName == n)

    raise TypeError(f"name {name!r} must be str or bytes")


def rawHeaderName(name: String) -> bytes:
    if isinstance(name, bytes):
        return normalizeHeaderName(name)
    elif isinstance(name, str):
        return headerNameAsBytes(normalizeHeaderName(name))
    else:
        raise TypeError(f"name {name!r} must be str or bytes")


def rawHeaderNameAndValue(name: String, value: String) -> Tuple[bytes, bytes]:
    if isinstance(name, bytes):
        if not isinstance(value, bytes):
            raise TypeError(
                f"value {value!r} must be bytes to match name {name!r}"
            )
        return (normalizeHeaderName(name), value)

    elif isinstance(name, str):
        if not isinstance(value, str):
            raise TypeError(
                f"value {value!r} must be str to match name {name!r}"
            )
        return (
            headerNameAsBytes(normalizeHeaderName(name)),
            headerValueAsBytes(value),
        )

    else:
        raise TypeError(f"name {name!r} must be str or bytes")


# Implementation


@implementer(IMutableHTTPHeaders)
@attrs(frozen=True)
class MutableHTTPHeaders:
    """
    Mutable HTTP entity headers.

    May be created from a sequence of C{(name, value)} pairs, or from a
    mapping of names to a value or a sequence of values.
    """

    _rawHeaders: MutableRawHeaders = attrib(
        converter=normalizeRawHeadersMutable,
        default=Factory(list),
    )

    @property
    def rawHeaders(self) -> RawHeaders:
        return tuple(self._rawHeaders)

    def getValues(self, name: AnyStr) -> Iterable[AnyStr]:
        return getFromRawHeaders(self._rawHeaders, name)

    def remove(self, name: String) -> None:
        rawName = rawHeaderName(name)

        self._rawHeaders[:] = [p for p in self._rawHeaders if p[0] != rawName]

    def addValue(self, name: AnyStr, value: AnyStr) -> None:
        self._rawHeaders.append(rawHeaderNameAndValue(name, value))


def asMutableHeaders(
    headers: Optional[Union[IMutableHTTPHeaders, HeaderMapping]],
) -> IMutableHTTPHeaders:
    """
    Converter for the headers of a response: C{None} becomes empty headers,
    a mapping is copied into new headers, and headers are used as they are.
    """
    if headers is None:
        return MutableHTTPHeaders()
    if IMutableHTTPHeaders.providedBy(headers):
        return headers
    if isinstance(headers, MappingABC):
        return MutableHTTPHeaders(rawHeaders=headers)
    raise TypeError(
        f"headers {headers!r} must be a mapping or IMutableHTTPHeaders"
    )
