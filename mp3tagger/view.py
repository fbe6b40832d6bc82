"""Reading the ID3v2 text frames at the start of an MP3 file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO

_RULE = "-" * 70
_FRAME_COUNT = 6


class TagError(Exception):
    """Raised when tag data is missing, truncated or malformed."""


@dataclass(frozen=True)
class TagInfo:
    """The tag identifier, version and text frames read from a file."""

    tag_id: str
    version: tuple[int, int]
    title: str
    artist: str
    album: str
    year: str
    genre: str
    comment: str


def check_extension(filename: str | os.PathLike[str]) -> bool:
    """Return True if everything from the first dot of the name is '.mp3'."""
    name = os.fspath(filename)
    dot = name.find(".")
    return dot != -1 and name[dot:] == ".mp3"


def _read_exact(stream: BinaryIO, count: int, what: str) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise TagError(f"unexpected end of data while reading {what}")
    return data


def _decode_size(raw: bytes) -> int:
    return (raw[0] << 21) | (raw[1] << 14) | (raw[2] << 7) | raw[3]


def read_frame(stream: BinaryIO) -> tuple[str, str]:
    """Read one text frame and return its identifier and text."""
    frame_id = _read_exact(stream, 4, "frame id").decode("latin-1")
    size = _decode_size(_read_exact(stream, 4, f"size of frame {frame_id}"))
    if size < 1:
        raise TagError(f"frame {frame_id} has invalid size {size}")
    # Two flag bytes and the text encoding byte.
    stream.read(3)
    raw = _read_exact(stream, size - 1, f"text of frame {frame_id}")
    text = raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return frame_id, text


def read_tags(stream: BinaryIO) -> TagInfo:
    """Read the tag header and the six text frames that follow it."""
    tag_id = _read_exact(stream, 3, "tag id").decode("latin-1")
    major, revision = _read_exact(stream, 2, "tag version")
    # Flags byte and the four-byte tag size.
    stream.read(5)
    texts = [read_frame(stream)[1] for _ in range(_FRAME_COUNT)]
    return TagInfo(tag_id, (major, revision), *texts)


def read_tags_file(path: str | os.PathLike[str]) -> TagInfo:
    """Open the file at path and read its tags."""
    with open(path, "rb") as stream:
        return read_tags(stream)


def format_tags(info: TagInfo) -> str:
    """Render the tags as the report printed by the view command."""
    major, revision = info.version
    lines = [
        _RULE,
        f"{'MP3 Tag Data':>40}",
        _RULE,
        f"{info.tag_id} V2.{major}.{revision}",
        f"Title     :  {info.title}",
        f"Artist    :  {info.artist}",
        f"Album     :  {info.album}",
        f"Year      :  {info.year}",
        f"Genre     :  {info.genre}",
        f"Comments  :  {info.comment}",
        _RULE,
    ]
    return "\n".join(lines) + "\n"