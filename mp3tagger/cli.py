"""Command-line entry point for viewing and editing MP3 tags."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from mp3tagger.edit import EditOption, edit_file
from mp3tagger.view import TagError, check_extension, format_tags, read_tags_file

_PROG = "mp3tagger"
_RULE = "-" * 70


def usage() -> str:
    """Return the usage instructions shown on bad arguments."""
    return (
        "Usage:\n"
        f"To view : {_PROG} -v <mp3_filename>\n"
        f"To help : {_PROG} -h\n"
        f"To edit : {_PROG} -e -t/-a/-A/-y/-c/-g <mp3_filename> <new_value>\n"
    )


def help_text() -> str:
    """Return the table of modifiers shown by -h."""
    return (
        "Modifiers         Functions\n"
        "   -v :      View MP3 File Details\n"
        "   -h :      Show Help\n"
        "   -t :      Modify Title Tag\n"
        "   -a :      Modify Artist Tag\n"
        "   -A :      Modify Album Tag\n"
        "   -y :      Modify Year Tag\n"
        "   -c :      Modify Comment Tag\n"
        "   -g :      Modify Genre Tag\n"
    )


def _view(filename: str) -> int:
    if not check_extension(filename):
        return 1
    try:
        info = read_tags_file(filename)
    except OSError:
        return 1
    except TagError as exc:
        print(f"Error: {exc}")
        return 1
    print(format_tags(info), end="")
    return 0


def _edit(option: str, filename: str, value: str) -> int:
    if not check_extension(filename):
        print("Invalid file or extension.")
        return 1
    try:
        chosen = EditOption(option)
    except ValueError:
        chosen = None
    try:
        applied = edit_file(filename, option, value)
    except OSError:
        print("Failed to open file for editing.")
        return 1
    except TagError as exc:
        if chosen is None:
            print("\nError: Enter a valid edit option")
            print(
                "USAGE:\n"
                f"To edit please pass like: {_PROG} -e -t/-a/-A/-m/-y/-c "
                "<mp3_filename> <changing text>"
            )
        else:
            print(f"Error: {exc}")
        return 1
    print(_RULE)
    print(f"{'MP3 Tag Data Edited Successfully':>51}")
    print(_RULE)
    print(f"{applied.label:<11}:  {value}")
    print(_RULE)
    print("Tag edited successfully.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with argv (without the program name) and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        print("Error: Invalid Arguments.\n")
        print(usage(), end="")
        return 1

    command = args[0]
    if command == "-h":
        print(help_text(), end="")
        return 0
    if command == "-v" and len(args) == 2:
        return _view(args[1])
    if command == "-e" and len(args) == 4:
        return _edit(args[1], args[2], args[3])

    print(usage(), end="")
    return 1


if __name__ == "__main__":
    sys.exit(main())