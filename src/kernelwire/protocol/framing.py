"""Multipart framing for protocol messages.

    ident_0, ..., ident_k, <IDS|MSG>, signature,
    header, parent_header, metadata, content,
    buffer_0, ..., buffer_n

Identity frames are routing information added by the transport; they are
opaque here and carried through unmodified.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .errors import InvalidArgumentError, MissingDelimiterError
from .fields import DELIMITER, JSON_PARTS


Frame = Union[bytes, bytearray, memoryview]


def frame_bytes(frame) -> bytes:
    if isinstance(frame, bytes):
        return frame

    # pyzmq Frame objects expose their content via .bytes
    try:
        return frame.bytes
    except AttributeError:
        pass

    try:
        return frame.encode("utf-8")
    except AttributeError:
        return bytes(frame)


def normalize_idents(idents) -> List[bytes]:
    """Return *idents* as a list of byte strings.

    A single identity (bytes or str) is treated as a one-element sequence.
    """

    if idents is None:
        return []

    if isinstance(idents, (bytes, bytearray, memoryview, str)):
        return [frame_bytes(idents)]

    return [frame_bytes(ident) for ident in idents]


def split_identities(frames: Sequence[Frame]) -> Tuple[List[bytes], List[Frame]]:
    """Split an inbound frame list at the delimiter.

    Returns the identity frames preceding the first delimiter (in order)
    and every frame after it.
    """

    idents: List[bytes] = []

    for index, frame in enumerate(frames):
        frame = frame_bytes(frame)
        if frame == DELIMITER:
            return idents, list(frames[index + 1:])
        idents.append(frame)

    raise MissingDelimiterError(f"no {DELIMITER.decode()} delimiter in {len(frames)} frames")


def assemble(
    idents,
    signature: Union[str, bytes],
    json_parts: Sequence[bytes],
    buffers: Optional[Iterable[Frame]] = None,
) -> List[bytes]:
    """Produce the full outbound frame list."""

    if len(json_parts) != len(JSON_PARTS):
        raise InvalidArgumentError("json_parts", f"expected {len(JSON_PARTS)} JSON parts, got {len(json_parts)}")

    if isinstance(signature, str):
        signature = signature.encode("ascii")

    frames = normalize_idents(idents)
    frames.append(DELIMITER)
    frames.append(signature)
    frames.extend(json_parts)

    if buffers is not None:
        frames.extend(frame_bytes(buffer) for buffer in buffers)

    return frames
