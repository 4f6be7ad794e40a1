import logging
from typing import List

import utils
from playlist import Playlist
from playlist_errors import PlaylistFileError, RecordParseError
from song import Song


DEFAULT_DATA_FILE = "playlist_data.txt"
FIELD_DELIMITER = "|"
FIELD_COUNT = 3
FILE_ENCODING = "utf-8"

LOAD_NO_FILE = "no_file"
LOAD_OK = "ok"


class LoadResult(object):
    def __init__(self, status: str, songs_loaded: int = 0, skipped_lines: List[int] = None):
        self.status = status
        self.songs_loaded = songs_loaded
        self.skipped_lines: List[int] = skipped_lines if skipped_lines is not None else []

    def found_file(self) -> bool:
        return self.status != LOAD_NO_FILE


def format_record_line(song: Song) -> str:
    # a '|' inside title or artist is not escaped and will not load back
    return "%s%s%s%s%d\n" % (song.title, FIELD_DELIMITER,
                             song.artist, FIELD_DELIMITER,
                             song.duration)


def decode_record_line(raw_line: bytes, line_number: int = None) -> str:
    try:
        return raw_line.decode(FILE_ENCODING)
    except UnicodeDecodeError as e:
        raise RecordParseError("not valid %s at byte %d" % (FILE_ENCODING, e.start),
                               repr(raw_line), line_number)


def parse_record_line(line: str, line_number: int = None) -> Song:
    record = line.rstrip("\r\n")
    fields = record.split(FIELD_DELIMITER)
    if len(fields) != FIELD_COUNT:
        raise RecordParseError("expected %d fields, found %d" % (FIELD_COUNT, len(fields)),
                               line, line_number)

    title, artist, duration_text = fields
    duration_text = duration_text.strip()
    if not duration_text.isdigit() or not duration_text.isascii():
        raise RecordParseError("invalid duration '%s'" % duration_text, line, line_number)

    return Song(title, artist, int(duration_text))


def save_playlist(playlist: Playlist, file_path: str = DEFAULT_DATA_FILE) -> int:
    """Write every song of `playlist` to `file_path`, replacing its contents.

    Returns the number of records written. Raises PlaylistFileError when the
    file cannot be written.
    """
    file_contents = "".join(format_record_line(song) for song in playlist)
    if not utils.file_write_all_text(file_path, file_contents):
        raise PlaylistFileError(file_path, "write")
    logging.debug("saved %d songs to '%s'" % (playlist.count, file_path))
    return playlist.count


def load_playlist(playlist: Playlist, file_path: str = DEFAULT_DATA_FILE) -> LoadResult:
    """Append the songs stored in `file_path` to `playlist`.

    A missing file is not an error: the playlist is left alone and the
    result status is LOAD_NO_FILE. Malformed lines are logged and skipped;
    their line numbers are listed in the result.
    """
    if not utils.file_exists(file_path):
        if utils.directory_exists(file_path):
            raise PlaylistFileError(file_path, "read")
        logging.debug("no playlist file at '%s'" % file_path)
        return LoadResult(LOAD_NO_FILE)

    file_contents = utils.file_read_all_bytes(file_path)
    if file_contents is None:
        raise PlaylistFileError(file_path, "read")

    songs: List[Song] = []
    skipped_lines: List[int] = []
    for line_number, raw_line in enumerate(file_contents.split(b"\n"), start=1):
        if len(raw_line.strip()) == 0:
            continue
        try:
            songs.append(parse_record_line(decode_record_line(raw_line, line_number), line_number))
        except RecordParseError as e:
            logging.warning("skipping malformed record in '%s', %s" % (file_path, e))
            skipped_lines.append(line_number)

    for song in songs:
        playlist.append(song.title, song.artist, song.duration)

    logging.debug("loaded %d songs from '%s'" % (len(songs), file_path))
    return LoadResult(LOAD_OK, len(songs), skipped_lines)
