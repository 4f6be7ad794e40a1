import playlist
import playlist_file
import utils


class PlaylistOptions:
    def __init__(self):
        self.debug_mode = False
        self.data_file = playlist_file.DEFAULT_DATA_FILE
        self.playlist_name = playlist.DEFAULT_PLAYLIST_NAME

    def validate_options(self) -> bool:
        if self.data_file is None or len(self.data_file) == 0:
            print("error: data file must be a non-empty path")
            return False

        if utils.directory_exists(self.data_file):
            print("error: data file '%s' is a directory" % self.data_file)
            return False

        if self.playlist_name is None or len(self.playlist_name) == 0:
            print("error: playlist name must be non-empty")
            return False

        return True
