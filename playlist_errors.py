import typing


class PlaylistError(Exception):
    """Base class for all playlist manager errors."""


class EmptyPlaylistError(PlaylistError):
    """Raised when removing from a playlist that holds no songs."""

    def __init__(self, playlist_name: str = ""):
        PlaylistError.__init__(self, "playlist is empty")
        self.playlist_name = playlist_name


class SongNotFoundError(PlaylistError):
    """Raised when no song in the playlist has the requested title."""

    def __init__(self, title: str):
        PlaylistError.__init__(self, "song not found: %s" % title)
        self.title = title


class PlaylistFileError(PlaylistError, OSError):
    """Raised when the playlist data file cannot be opened."""

    def __init__(self, file_path: str, action: str):
        PlaylistError.__init__(self, "unable to %s playlist file '%s'" % (action, file_path))
        self.file_path = file_path
        self.action = action


class RecordParseError(PlaylistError, ValueError):
    """Raised for a persisted record line that is not title|artist|duration."""

    def __init__(self, reason: str, line: str, line_number: typing.Optional[int] = None):
        if line_number is not None:
            message = "line %d: %s" % (line_number, reason)
        else:
            message = reason
        PlaylistError.__init__(self, message)
        self.reason = reason
        self.line = line
        self.line_number = line_number
