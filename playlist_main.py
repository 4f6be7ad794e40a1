import argparse
import logging
import sys
import typing
from typing import Callable, List

import playlist_file
import playlist_options
import utils
from playlist import Playlist
from playlist_errors import EmptyPlaylistError, PlaylistFileError, SongNotFoundError
from song import Song


ARG_PREFIX = "--"
ARG_DEBUG = "debug"
ARG_FILE = "file"
ARG_NAME = "name"

CHOICE_ADD = "1"
CHOICE_REMOVE = "2"
CHOICE_VIEW = "3"
CHOICE_SEARCH = "4"
CHOICE_SAVE_EXIT = "5"

TABLE_RULE = "-" * 75

ReadLine = Callable[[str], str]


def show_menu():
    print("")
    print("=== PLAYLIST MANAGER ===")
    print("%s. Add Song" % CHOICE_ADD)
    print("%s. Remove Song" % CHOICE_REMOVE)
    print("%s. View Playlist" % CHOICE_VIEW)
    print("%s. Search Song" % CHOICE_SEARCH)
    print("%s. Save & Exit" % CHOICE_SAVE_EXIT)


def parse_choice(text: str) -> str:
    # leading integer wins, so " 3" and "3abc" both select 3
    digits = ""
    for ch in text.strip():
        if not ch.isdigit() or not ch.isascii():
            break
        digits += ch
    if len(digits) == 0:
        return ""
    return str(int(digits))


def parse_duration(text: str) -> int:
    # plain ASCII digits only, anything else is rejected as 0
    text = text.strip()
    if not text.isdigit() or not text.isascii():
        return 0
    return int(text)


def show_playlist(pl: Playlist):
    songs, total_seconds = pl.list_songs()
    if len(songs) == 0:
        print("")
        print("--- Playlist: %s (Empty) ---" % pl.playlist_name)
        return

    print("")
    print("--- %s (%d Songs) ---" % (pl.playlist_name, len(songs)))
    print("%-30s %-30s %-10s" % ("Title", "Artist", "Duration"))
    print(TABLE_RULE)
    for song in songs:
        print("%-30s %-30s %s" % (song.title, song.artist, song.formatted_duration()))
    print(TABLE_RULE)
    print("Total Playtime: %s" % utils.format_playtime(total_seconds))


def show_search_results(pl: Playlist, keyword: str):
    if pl.is_empty():
        print("Playlist is empty.")
        return

    print("")
    print("--- Search Results for '%s' ---" % keyword)
    matches: List[Song] = list(pl.search(keyword))
    for song in matches:
        print(" > %s by %s (%s)" % (song.title, song.artist, song.formatted_duration()))
    if len(matches) == 0:
        print("No matches found.")


def add_song(pl: Playlist, read_line: ReadLine):
    title = read_line("Enter Title: ")
    artist = read_line("Enter Artist: ")
    duration = parse_duration(read_line("Enter Duration (seconds): "))
    if duration > 0:
        pl.append(title, artist, duration)
        print(" [Success] Added: '%s' by %s" % (title, artist))
    else:
        print("Invalid duration.")


def remove_song(pl: Playlist, read_line: ReadLine):
    show_playlist(pl)
    title = read_line("Enter Title to Remove (exact or case-insensitive): ")
    try:
        song = pl.remove_by_title(title)
        print(" [Success] Removed song: %s" % song.title)
    except EmptyPlaylistError:
        print(" [Error] Playlist is empty!")
    except SongNotFoundError as e:
        print(" [Error] Song not found: %s" % e.title)


def search_songs(pl: Playlist, read_line: ReadLine):
    keyword = read_line("Enter Search Term (Artist or Title): ")
    show_search_results(pl, keyword)


def load_on_startup(pl: Playlist, data_file: str) -> bool:
    """Load saved songs into `pl`; return False when `data_file` must not be overwritten."""
    try:
        result = playlist_file.load_playlist(pl, data_file)
    except PlaylistFileError as e:
        logging.error(str(e))
        print(" [System] Unable to read saved playlist. Starting fresh.")
        return False

    if not result.found_file():
        print(" [System] No saved playlist found. Starting fresh.")
    else:
        print(" [System] Loaded %d songs from file." % result.songs_loaded)
        if len(result.skipped_lines) > 0:
            print(" [System] Skipped %d malformed line(s)." % len(result.skipped_lines))
    return True


def save_and_release(pl: Playlist, data_file: str, save_on_exit: bool = True):
    if save_on_exit:
        try:
            playlist_file.save_playlist(pl, data_file)
            print(" [System] Playlist saved to '%s'." % data_file)
        except PlaylistFileError as e:
            logging.error(str(e))
            print("Error saving playlist.")
    else:
        logging.warning("not saving over unreadable playlist file '%s'" % data_file)
        print(" [System] Saved playlist was not loaded; '%s' left unchanged." % data_file)
    pl.release()


def run_menu(pl: Playlist, data_file: str, read_line: typing.Optional[ReadLine] = None,
             save_on_exit: bool = True) -> int:
    """Drive the numbered menu until Save & Exit (or end of input)."""
    if read_line is None:
        read_line = input
    while True:
        show_menu()
        try:
            choice = parse_choice(read_line("Enter choice: "))
            if choice == CHOICE_ADD:
                add_song(pl, read_line)
            elif choice == CHOICE_REMOVE:
                remove_song(pl, read_line)
            elif choice == CHOICE_VIEW:
                show_playlist(pl)
            elif choice == CHOICE_SEARCH:
                search_songs(pl, read_line)
            elif choice == CHOICE_SAVE_EXIT:
                break
            else:
                print("Invalid choice! Try again.")
        except EOFError:
            print("")
            logging.debug("end of input, saving and exiting")
            break

    save_and_release(pl, data_file, save_on_exit)
    print("Exiting... Goodbye!")
    return 0


def main():
    opt_parser = argparse.ArgumentParser(description="interactive playlist manager")
    opt_parser.add_argument(ARG_PREFIX + ARG_DEBUG, action="store_true", help="run in debug mode")
    opt_parser.add_argument(ARG_PREFIX + ARG_FILE, type=str,
                            help="playlist data file (default: %s)" % playlist_file.DEFAULT_DATA_FILE)
    opt_parser.add_argument(ARG_PREFIX + ARG_NAME, type=str, help="display name of the playlist")
    args = opt_parser.parse_args()

    options = playlist_options.PlaylistOptions()
    if args.debug:
        options.debug_mode = True
    if args.file is not None:
        options.data_file = args.file
    if args.name is not None:
        options.playlist_name = args.name

    if options.debug_mode:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    if not options.validate_options():
        sys.exit(1)

    logging.debug("using data file '%s'" % options.data_file)

    try:
        pl = Playlist(options.playlist_name)
        save_on_exit = load_on_startup(pl, options.data_file)
        exit_code = run_menu(pl, options.data_file, save_on_exit=save_on_exit)
    except MemoryError:
        print("error: memory allocation failed")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
