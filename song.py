import utils


# soft limit carried over from the fixed-width records; not enforced
MAX_FIELD_LENGTH = 99


class Song:

    def __init__(self, title: str = "", artist: str = "", duration: int = 0):
        self.title: str = title
        self.artist: str = artist
        self.duration: int = duration  # seconds

    def __eq__(self, other: 'Song') -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.title == other.title and \
               self.artist == other.artist and \
               self.duration == other.duration

    def __repr__(self) -> str:
        return "Song(%r, %r, %d)" % (self.title, self.artist, self.duration)

    def title_matches(self, title: str) -> bool:
        return utils.ascii_casefold(self.title) == utils.ascii_casefold(title)

    def contains_keyword(self, keyword: str) -> bool:
        return keyword in self.title or keyword in self.artist

    def formatted_duration(self) -> str:
        return utils.format_min_sec(self.duration)
