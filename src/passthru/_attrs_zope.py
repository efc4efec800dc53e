# -*- test-case-name: passthru.test.test_attrs_zope -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
attrs validators for zope.interface.
"""

from __future__ import annotations

import attrs
from zope.interface import Interface


__all__ = ()


@attrs.define(repr=False)
class _ProvidesValidator:
    interface: type[Interface] = attrs.field()

    def __call__(
        self, inst: object, attr: attrs.Attribute, value: object
    ) -> None:
        if not self.interface.providedBy(value):
            raise TypeError(
                f"'{attr.name}' must provide {self.interface!r} "
                f"which {value!r} doesn't.",
                attr,
                self.interface,
                value,
            )

    def __repr__(self) -> str:
        return f"<provides validator for interface {self.interface!r}>"


def provides(interface: type[Interface]) -> _ProvidesValidator:
    """
    Validator raising L{TypeError} when given an object that does not provide
    C{interface}, as reported by C{interface.providedBy}.

    Replaces C{attr.validators.provides}, which is deprecated.

    @param interface: The interface to check for.
    """
    return _ProvidesValidator(interface)
