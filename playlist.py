import logging
import typing
from typing import Iterator, List, Tuple

from playlist_errors import EmptyPlaylistError, SongNotFoundError
from song import Song


DEFAULT_PLAYLIST_NAME = "My Favorites"


class Playlist(object):
    """Named, ordered collection of songs.

    Songs are kept in insertion order. Lookups are linear scans by title
    (remove) or by substring of title/artist (search).
    """

    def __init__(self, playlist_name: str = DEFAULT_PLAYLIST_NAME):
        self.playlist_name: str = playlist_name
        self.songs: List[Song] = []

    def __len__(self) -> int:
        return len(self.songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self.songs)

    @property
    def count(self) -> int:
        return len(self.songs)

    def is_empty(self) -> bool:
        return len(self.songs) == 0

    def append(self, title: str, artist: str, duration: int) -> Song:
        song = Song(title, artist, duration)
        self.songs.append(song)
        logging.info("added '%s' by %s" % (title, artist))
        return song

    def index_of_title(self, title: str) -> typing.Optional[int]:
        for index, song in enumerate(self.songs):
            if song.title_matches(title):
                return index
        return None

    def remove_by_title(self, title: str) -> Song:
        """Remove the earliest song whose title matches `title`, ignoring ASCII case.

        Raises EmptyPlaylistError when there is nothing to remove and
        SongNotFoundError when no title matches. The playlist is unchanged
        on either error.
        """
        if self.is_empty():
            raise EmptyPlaylistError(self.playlist_name)

        index = self.index_of_title(title)
        if index is None:
            raise SongNotFoundError(title)

        song = self.songs.pop(index)
        logging.info("removed song: %s" % song.title)
        return song

    def search(self, keyword: str) -> Iterator[Song]:
        # case-sensitive substring match on title or artist
        return (song for song in self.songs if song.contains_keyword(keyword))

    def total_duration(self) -> int:
        return sum(song.duration for song in self.songs)

    def list_songs(self) -> Tuple[List[Song], int]:
        return list(self.songs), self.total_duration()

    def release(self):
        if self.songs:
            logging.debug("releasing %d songs from '%s'" % (len(self.songs), self.playlist_name))
        self.songs = []
