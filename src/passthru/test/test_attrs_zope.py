# Copyright (c) 2011-2021. See LICENSE for details.

"""
Tests for L{passthru._attrs_zope}.
"""

from attr import attrib, attrs

from .._attrs_zope import provides
from .._imessage import IReadableHandle
from ._trial import TestCase
from .util import MemoryHandle


__all__ = ()


@attrs
class HandleHolder:
    handle: object = attrib(validator=provides(IReadableHandle))


class ProvidesTests(TestCase):
    """
    Tests for L{provides}.
    """

    def test_provided(self) -> None:
        """
        The validator accepts an object providing the interface.
        """
        handle = MemoryHandle()
        self.assertIdentical(HandleHolder(handle).handle, handle)

    def test_notProvided(self) -> None:
        """
        The validator raises L{TypeError} naming the attribute for an object
        not providing the interface.
        """
        e = self.assertRaises(TypeError, HandleHolder, object())
        self.assertIn("'handle' must provide", e.args[0])

    def test_repr(self) -> None:
        """
        The validator's representation names the interface.
        """
        self.assertEqual(
            repr(provides(IReadableHandle)),
            f"<provides validator for interface {IReadableHandle!r}>",
        )
