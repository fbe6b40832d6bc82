"""Rewriting one text frame of an MP3 file's ID3v2 tag."""

from __future__ import annotations

import enum
import io
import os
import tempfile
from pathlib import Path
from typing import BinaryIO

from mp3tagger.view import TagError

_HEADER_SIZE = 10
_MAX_FRAME_TEXT = 50


class EditOption(enum.Enum):
    """Command-line flags selecting a frame, in the order frames appear."""

    TITLE = "-t"
    ARTIST = "-a"
    ALBUM = "-A"
    YEAR = "-y"
    GENRE = "-m"
    COMMENT = "-c"

    @property
    def label(self) -> str:
        """Human-readable name of the frame."""
        return {
            EditOption.TITLE: "Title",
            EditOption.ARTIST: "Artist",
            EditOption.ALBUM: "Album",
            EditOption.YEAR: "Year",
            EditOption.GENRE: "Genre",
            EditOption.COMMENT: "Comments",
        }[self]


def _read_exact(stream: BinaryIO, count: int, what: str) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise TagError(f"unexpected end of data while reading {what}")
    return data


def _decode_size(raw: bytes) -> int:
    return (raw[0] << 21) | (raw[1] << 14) | (raw[2] << 7) | raw[3]


def copy_frame(src: BinaryIO, dest: BinaryIO) -> bytes:
    """Copy one frame unchanged from src to dest and return its bytes.

    Frames whose text is empty-sized or longer than 50 bytes are rejected.
    """
    frame_id = _read_exact(src, 4, "frame id")
    raw_size = _read_exact(src, 4, "frame size")
    size = _decode_size(raw_size)
    flags = _read_exact(src, 3, "frame flags")
    if size < 1 or size - 1 > _MAX_FRAME_TEXT:
        raise TagError(f"frame {frame_id.decode('latin-1')} has unsupported size {size}")
    body = _read_exact(src, size - 1, "frame text")
    whole = frame_id + raw_size + flags + body
    dest.write(whole)
    return whole


def replace_frame(src: BinaryIO, dest: BinaryIO, value: str | bytes) -> None:
    """Write the frame at src to dest with its text replaced by value."""
    text = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    frame_id = _read_exact(src, 4, "frame id")
    dest.write(frame_id)
    old_size = _decode_size(_read_exact(src, 4, "frame size"))
    dest.write((len(text) + 1).to_bytes(4, "big"))
    # Flags and encoding byte are carried over as they are.
    dest.write(src.read(3))
    dest.write(text)
    src.seek(old_size - 1, io.SEEK_CUR)


def edit_tags(data: bytes, option: EditOption | str, value: str | bytes) -> bytes:
    """Return data with the frame chosen by option set to value."""
    try:
        target = EditOption(option)
    except ValueError:
        raise TagError(f"invalid edit option {option!r}") from None

    src = io.BytesIO(data)
    dest = io.BytesIO()
    dest.write(_read_exact(src, _HEADER_SIZE, "tag header"))
    for current in EditOption:
        if current is target:
            replace_frame(src, dest, value)
        elif current is not EditOption.COMMENT:
            copy_frame(src, dest)
    dest.write(src.read())
    return dest.getvalue()


def edit_file(
    path: str | os.PathLike[str], option: EditOption | str, value: str | bytes
) -> EditOption:
    """Set one frame of the file at path to value, replacing the file.

    Returns the option that was applied. The file is left untouched on error.
    """
    target = Path(path)
    data = target.read_bytes()
    edited = edit_tags(data, option, value)
    fd, temp_name = tempfile.mkstemp(dir=target.parent, suffix=".mp3")
    try:
        with os.fdopen(fd, "wb") as out:
            out.write(edited)
        os.replace(temp_name, target)
    except BaseException:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise
    return EditOption(option)