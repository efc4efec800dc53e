# Copyright (c) 2011-2021. See LICENSE for details.

"""
Extensions to L{twisted.trial}.
"""

from typing import Type

from zope.interface import Interface
from zope.interface.exceptions import Invalid
from zope.interface.verify import verifyObject

from twisted.trial.unittest import SynchronousTestCase


__all__ = ()


class TestCase(SynchronousTestCase):
    """
    L{SynchronousTestCase} with interface assertions.
    """

    def assertProvides(self, interface: Type[Interface], obj: object) -> None:
        """
        Assert that C{obj} provides C{interface}, verifying its attributes and
        method signatures.
        """
        try:
            self.assertTrue(verifyObject(interface, obj))
        except Invalid:
            self.fail(f"{obj} does not provide {interface}")
