# -*- test-case-name: passthru.test.test_tubes -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Extensions to Tubes.
"""

from io import BytesIO
from typing import Any

from attr import attrib, attrs
from attr.validators import instance_of, optional
from tubes.itube import IDrain, IFount, ISegment, StopFlowCalled
from tubes.kit import Pauser, beginFlowingTo
from tubes.undefer import fountToDeferred
from zope.interface import implementer

from twisted.python.failure import Failure

from ._attrs_zope import provides
from ._handle import (
    DEFAULT_CHUNK_SIZE,
    FileHandle,
    positive,
    releaseHandle,
)
from ._imessage import IReadableHandle


__all__ = ()


# See https://github.com/twisted/tubes/issues/60
async def fountToBytes(fount: IFount) -> bytes:
    chunks = await fountToDeferred(fount)
    return b"".join(chunks)


# See https://github.com/twisted/tubes/issues/60
def bytesToFount(data: bytes) -> IFount:
    return HandleFount(FileHandle(BytesIO(data)))


# https://github.com/twisted/tubes/issues/61
@implementer(IFount)
@attrs(frozen=False)
class HandleFount:
    """
    Fount that reads from a L{IReadableHandle}, one chunk at a time.

    Once the handle is exhausted, fails, or the flow is stopped, the handle is
    released if C{closeOnComplete} is set.
    """

    outputType = ISegment

    _handle: IReadableHandle = attrib(validator=provides(IReadableHandle))

    closeOnComplete: bool = attrib(validator=instance_of(bool), default=True)

    chunkSize: int = attrib(validator=positive, default=DEFAULT_CHUNK_SIZE)

    drain: IDrain = attrib(
        validator=optional(provides(IDrain)), default=None, init=False
    )
    _paused = attrib(validator=instance_of(bool), default=False, init=False)
    _stopped = attrib(validator=instance_of(bool), default=False, init=False)

    def __attrs_post_init__(self) -> None:
        self._pauser = Pauser(self._pause, self._resume)

    def _flowToDrain(self) -> None:
        while (
            self.drain is not None and not self._paused and not self._stopped
        ):
            try:
                data = self._handle.read(self.chunkSize)
            except Exception:
                self._stop(Failure())
                return
            if not data:
                self._stop(Failure(StopIteration()))
                return
            self.drain.receive(data)

    def _stop(self, reason: Failure) -> None:
        self._stopped = True
        if self.closeOnComplete:
            releaseHandle(self._handle)
        if self.drain is not None:
            self.drain.flowStopped(reason)

    def flowTo(self, drain: IDrain) -> IFount:
        result = beginFlowingTo(self, drain)
        self._flowToDrain()
        return result

    def pauseFlow(self) -> Any:
        return self._pauser.pause()

    def stopFlow(self) -> None:
        if not self._stopped:
            self._stop(Failure(StopFlowCalled()))

    def _pause(self) -> None:
        self._paused = True

    def _resume(self) -> None:
        self._paused = False
        self._flowToDrain()
