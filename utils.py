import logging
import os
import os.path
import pathlib
import string
import typing
from typing import Tuple


_ASCII_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def path_is_file(path_to_file: str) -> bool:
    path = pathlib.Path(path_to_file)
    return path.is_file()


def path_is_directory(path_to_dir: str) -> bool:
    path = pathlib.Path(path_to_dir)
    return path.is_dir()


def file_exists(path_to_file: str) -> bool:
    return os.path.exists(path_to_file) and path_is_file(path_to_file)


def directory_exists(path_to_dir: str) -> bool:
    return os.path.exists(path_to_dir) and path_is_directory(path_to_dir)


def file_write_all_text(file_path: str, file_contents: str) -> bool:
    try:
        with open(file_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(file_contents)
            return True
    except IOError as e:
        logging.debug("unable to write '%s': %s" % (file_path, e))
        return False


def file_read_all_bytes(file_path: str) -> typing.Optional[bytes]:
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except IOError as e:
        logging.debug("unable to read '%s': %s" % (file_path, e))
        return None


def ascii_casefold(s: str) -> str:
    # only A-Z are folded; everything else compares exactly
    return s.translate(_ASCII_LOWER_TABLE)


def split_min_sec(seconds: int) -> Tuple[int, int]:
    return seconds // 60, seconds % 60


def format_min_sec(seconds: int) -> str:
    minutes, secs = split_min_sec(seconds)
    return "%d:%02d" % (minutes, secs)


def format_playtime(seconds: int) -> str:
    minutes, secs = split_min_sec(seconds)
    return "%d min %d sec" % (minutes, secs)
