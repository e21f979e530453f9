"""Multipart messages made of byte frames."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Union

from zmtpy.errors import EmptyMessageError

FrameLike = Union[bytes, bytearray, memoryview, str]


def _as_frame(frame: FrameLike) -> bytes:
    if isinstance(frame, str):
        return frame.encode("utf-8")
    if isinstance(frame, (bytes, bytearray, memoryview)):
        return bytes(frame)
    raise TypeError(f"frame must be bytes or str, not {type(frame).__name__}")


class ZmqMessage:
    """An ordered sequence of byte frames.

    A single ``bytes`` or ``str`` value makes a one-frame message; any other
    iterable supplies the frames. A message cannot be built empty.
    """

    __slots__ = ("_frames",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, frames: FrameLike | Iterable[FrameLike]) -> None:
        if isinstance(frames, (str, bytes, bytearray, memoryview)):
            self._frames: deque[bytes] = deque([_as_frame(frames)])
        else:
            self._frames = deque(_as_frame(frame) for frame in frames)
            if not self._frames:
                raise EmptyMessageError()

    @classmethod
    def _from_frames(cls, frames: deque[bytes]) -> ZmqMessage:
        message = cls.__new__(cls)
        message._frames = frames
        return message

    def push_back(self, frame: FrameLike) -> None:
        """Append a frame."""
        self._frames.append(_as_frame(frame))

    def push_front(self, frame: FrameLike) -> None:
        """Insert a frame at the front."""
        self._frames.appendleft(_as_frame(frame))

    def pop_front(self) -> bytes | None:
        """Remove and return the first frame, or None if there is none."""
        return self._frames.popleft() if self._frames else None

    def get(self, index: int) -> bytes | None:
        """Return the frame at ``index``, or None when out of range."""
        if 0 <= index < len(self._frames):
            return self._frames[index]
        return None

    def prepend(self, message: ZmqMessage) -> None:
        """Put all frames of ``message`` in front of this message's frames."""
        self._frames.extendleft(reversed(message._frames))

    def split_off(self, at: int) -> ZmqMessage:
        """Keep the first ``at`` frames and return the rest as a new message."""
        if not 0 <= at <= len(self._frames):
            raise IndexError("split index out of range")
        frames = list(self._frames)
        self._frames = deque(frames[:at])
        return self._from_frames(deque(frames[at:]))

    def to_bytes(self) -> bytes:
        """Return the only frame; raise ValueError if there is not exactly one."""
        if len(self._frames) != 1:
            raise ValueError("Message must have only 1 frame to convert to bytes")
        return self._frames[0]

    def to_str(self) -> str:
        """Return the only frame decoded as UTF-8."""
        if len(self._frames) != 1:
            raise ValueError("Message must have only 1 frame to convert to String")
        try:
            return self._frames[0].decode("utf-8")
        except UnicodeDecodeError:
            raise ValueError("Could not parse string from message") from None

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._frames)

    def __getitem__(self, index: int) -> bytes:
        return self._frames[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZmqMessage):
            return NotImplemented
        return self._frames == other._frames

    def __repr__(self) -> str:
        return f"ZmqMessage({list(self._frames)!r})"