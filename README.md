# mp3tagger

A small command-line tool and library for viewing and editing the ID3v2 text
frames at the start of an MP3 file. It expects the tag to begin with these six
frames, in this order: title, artist, album, year, genre and comment.

## Installation

```
pip install .
```

This installs the `mp3tagger` command. It has no dependencies beyond the
standard library.

## Usage

Show the table of modifiers:

```
mp3tagger -h
```

View the tags of a file:

```
mp3tagger -v song.mp3
```

This prints the tag identifier and version (for example `ID3 V2.3.0`)
followed by the title, artist, album, year, genre and comments.

Edit one frame:

```
mp3tagger -e -t song.mp3 "New Title"
```

The edit options are:

| Option | Frame   |
|--------|---------|
| `-t`   | Title   |
| `-a`   | Artist  |
| `-A`   | Album   |
| `-y`   | Year    |
| `-m`   | Genre   |
| `-c`   | Comment |

The help and usage texts list `-g` for the genre, but the flag that the edit
command accepts is `-m`; any other flag is reported as an invalid edit option.

The file name must have `.mp3` as everything from its first dot onwards, so
`song.mp3` is accepted and `my.song.mp3` is not. The command exits with
status 0 on success and 1 on any error.

An edit writes the new contents to a temporary file in the same directory and
then moves it over the original, so the original is left untouched if the edit
fails.

## Library use

```python
from mp3tagger.view import read_tags_file, format_tags
from mp3tagger.edit import EditOption, edit_file, edit_tags

info = read_tags_file("song.mp3")
print(info.title, info.artist, info.version)
print(format_tags(info), end="")

edit_file("song.mp3", EditOption.ARTIST, "Someone Else")
edit_file("song.mp3", "-y", "2024")

with open("song.mp3", "rb") as f:
    new_bytes = edit_tags(f.read(), "-t", "Another Title")
```

- `mp3tagger.view.read_tags(stream)` and `read_tags_file(path)` return a
  `TagInfo` with `tag_id`, `version`, `title`, `artist`, `album`, `year`,
  `genre` and `comment`.
- `mp3tagger.view.read_frame(stream)` reads a single text frame and returns
  its identifier and text.
- `mp3tagger.view.check_extension(filename)` applies the `.mp3` name check.
- `mp3tagger.edit.edit_tags(data, option, value)` returns edited bytes;
  `edit_file(path, option, value)` rewrites a file in place and returns the
  `EditOption` it applied.
- `mp3tagger.edit.copy_frame` and `replace_frame` copy or rewrite one frame
  between binary streams.

Missing, truncated or malformed tag data, and unknown edit options, raise
`mp3tagger.view.TagError`.

## Limitations

- Only the six frames listed above, in that fixed order, are understood.
  Other frames, other frame orders and ID3v1 tags are not handled.
- The first frame text byte is treated as an encoding byte and is kept as it
  is; the text is read up to the first NUL byte and decoded as UTF-8.
- When editing, each frame that is copied unchanged may hold at most 50 bytes
  of text; longer frames are rejected.
- An edit updates the size of the edited frame only. The overall tag size in
  the ten-byte tag header is not changed.

## Running the tests

```
pip install .[test]
pytest
```