import io

import pytest

from mp3tagger.view import (
    TagError,
    TagInfo,
    check_extension,
    format_tags,
    read_frame,
    read_tags,
    read_tags_file,
)

FIELDS = [
    ("TIT2", "Hello"),
    ("TPE1", "Singer"),
    ("TALB", "Record"),
    ("TYER", "1999"),
    ("TCON", "Rock"),
    ("COMM", "Nice"),
]


def frame(frame_id, text):
    body = text.encode("utf-8")
    return frame_id.encode("latin-1") + (len(body) + 1).to_bytes(4, "big") + b"\0\0\0" + body


def sample(fields=FIELDS, tail=b"\xff\xfb\x90\x00"):
    header = b"ID3\x03\x00\x00" + b"\x00\x00\x01\x00"
    return header + b"".join(frame(i, t) for i, t in fields) + tail


@pytest.mark.parametrize(
    "name, expected",
    [
        ("song.mp3", True),
        ("dir/song.mp3", True),
        ("song.txt", False),
        ("song", False),
        ("my.song.mp3", False),
        ("song.MP3", False),
        ("song.mp3.bak", False),
    ],
)
def test_check_extension(name, expected):
    assert check_extension(name) is expected


def test_read_frame_returns_id_and_text():
    stream = io.BytesIO(frame("TIT2", "Hello") + b"rest")
    assert read_frame(stream) == ("TIT2", "Hello")
    assert stream.read() == b"rest"


def test_read_frame_stops_at_nul():
    stream = io.BytesIO(frame("TIT2", "ab\0cd"))
    assert read_frame(stream) == ("TIT2", "ab")


def test_read_frame_zero_size_fails():
    stream = io.BytesIO(b"TIT2\x00\x00\x00\x00\x00\x00\x00abc")
    with pytest.raises(TagError):
        read_frame(stream)


def test_read_frame_truncated_text_fails():
    data = frame("TIT2", "Hello")[:-2]
    with pytest.raises(TagError):
        read_frame(io.BytesIO(data))


def test_read_tags_all_fields():
    info = read_tags(io.BytesIO(sample()))
    assert info == TagInfo("ID3", (3, 0), "Hello", "Singer", "Record", "1999", "Rock", "Nice")


def test_read_tags_missing_frame_fails():
    with pytest.raises(TagError):
        read_tags(io.BytesIO(sample(FIELDS[:4], tail=b"")))


def test_read_tags_empty_fails():
    with pytest.raises(TagError):
        read_tags(io.BytesIO(b"ID"))


def test_read_tags_file(tmp_path):
    path = tmp_path / "song.mp3"
    path.write_bytes(sample())
    info = read_tags_file(path)
    assert info.title == "Hello"
    assert info.comment == "Nice"


def test_read_tags_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_tags_file(tmp_path / "absent.mp3")


def test_format_tags_layout():
    info = read_tags(io.BytesIO(sample()))
    lines = format_tags(info).splitlines()
    rule = "-" * 70
    assert lines[0] == rule and lines[2] == rule and lines[-1] == rule
    assert lines[1].strip() == "MP3 Tag Data"
    assert len(lines[1]) == 40
    assert lines[3] == "ID3 V2.3.0"
    assert lines[4:10] == [
        "Title     :  Hello",
        "Artist    :  Singer",
        "Album     :  Record",
        "Year      :  1999",
        "Genre     :  Rock",
        "Comments  :  Nice",
    ]