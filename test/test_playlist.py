import types
import unittest

import playlist
from playlist_errors import EmptyPlaylistError, SongNotFoundError
from song import Song


class TestPlaylist(unittest.TestCase):

    def setUp(self):
        self.pl = playlist.Playlist("Road Trip")

    def titles(self):
        return [s.title for s in self.pl]

    def test_create(self):
        self.assertEqual(self.pl.playlist_name, "Road Trip")
        self.assertEqual(self.pl.count, 0)
        self.assertTrue(self.pl.is_empty())
        self.assertEqual(playlist.Playlist().playlist_name, playlist.DEFAULT_PLAYLIST_NAME)

    def test_append_keeps_order_and_count(self):
        titles = ["One", "Two", "Three", "Four"]
        for i, title in enumerate(titles):
            self.pl.append(title, "Artist", 100 + i)
            self.assertEqual(self.pl.count, i + 1)
        self.assertEqual(len(self.pl), 4)
        self.assertEqual(self.titles(), titles)

    def test_append_returns_song_and_logs(self):
        with self.assertLogs(level="INFO") as cm:
            s = self.pl.append("Song A", "Artist X", 200)
        self.assertEqual(s, Song("Song A", "Artist X", 200))
        self.assertIn("Song A", cm.output[0])
        self.assertIn("Artist X", cm.output[0])

    def test_append_does_not_validate(self):
        self.pl.append("", "", 0)
        self.assertEqual(self.pl.count, 1)

    def test_remove_case_insensitive(self):
        self.pl.append("Yesterday", "The Beatles", 125)
        removed = self.pl.remove_by_title("yesterday")
        self.assertEqual(removed.title, "Yesterday")
        self.assertEqual(self.pl.count, 0)

    def test_remove_from_empty(self):
        with self.assertRaises(EmptyPlaylistError):
            self.pl.remove_by_title("anything")
        self.assertEqual(self.pl.count, 0)

    def test_remove_not_found_leaves_playlist_unchanged(self):
        self.pl.append("Song A", "Artist X", 200)
        self.pl.append("Song B", "Artist Y", 125)
        before = list(self.pl)
        with self.assertRaises(SongNotFoundError) as cm:
            self.pl.remove_by_title("Song C")
        self.assertEqual(cm.exception.title, "Song C")
        self.assertEqual(list(self.pl), before)
        self.assertEqual(self.pl.count, 2)

    def test_remove_only_first_duplicate(self):
        self.pl.append("Echo", "First", 100)
        self.pl.append("Middle", "Artist", 110)
        self.pl.append("ECHO", "Second", 120)
        removed = self.pl.remove_by_title("echo")
        self.assertEqual(removed.artist, "First")
        self.assertEqual([s.artist for s in self.pl], ["Artist", "Second"])

    def test_remove_last_then_append(self):
        self.pl.append("Song A", "Artist X", 200)
        self.pl.append("Song B", "Artist Y", 125)
        self.pl.remove_by_title("song b")
        self.pl.append("Song C", "Artist Z", 90)
        self.assertEqual(self.titles(), ["Song A", "Song C"])

    def test_search(self):
        self.pl.append("Love Story", "Taylor Swift", 235)
        self.pl.append("Crazy Train", "Lovers' Lane", 290)
        self.pl.append("Hey Jude", "The Beatles", 431)

        results = self.pl.search("Lov")
        self.assertIsInstance(results, types.GeneratorType)
        self.assertEqual([s.title for s in results], ["Love Story", "Crazy Train"])
        self.assertEqual(list(self.pl.search("LOV")), [])
        self.assertEqual(len(list(self.pl.search("lov"))), 0)
        self.assertEqual([s.title for s in self.pl.search("ove")], ["Love Story", "Crazy Train"])

    def test_search_lowercase_keyword(self):
        self.pl.append("Lovely Day", "Bill Withers", 255)
        self.pl.append("Glove", "lovejoy", 180)
        self.assertEqual([s.title for s in self.pl.search("lov")], ["Glove"])

    def test_search_is_restartable(self):
        self.pl.append("Love Story", "Taylor Swift", 235)
        self.assertEqual(len(list(self.pl.search("Love"))), 1)
        self.assertEqual(len(list(self.pl.search("Love"))), 1)
        self.assertEqual(self.pl.count, 1)

    def test_list_songs_total(self):
        self.pl.append("Song A", "Artist X", 200)
        self.pl.append("Song B", "Artist Y", 125)
        songs, total = self.pl.list_songs()
        self.assertEqual(total, 325)
        self.assertEqual([s.title for s in songs], ["Song A", "Song B"])

        self.pl.remove_by_title("song a")
        songs, total = self.pl.list_songs()
        self.assertEqual([s.title for s in songs], ["Song B"])
        self.assertEqual(self.pl.count, 1)
        self.assertEqual(total, 125)

    def test_list_songs_is_a_copy(self):
        self.pl.append("Song A", "Artist X", 200)
        songs, _ = self.pl.list_songs()
        songs.clear()
        self.assertEqual(self.pl.count, 1)

    def test_release_is_idempotent(self):
        self.pl.append("Song A", "Artist X", 200)
        self.pl.release()
        self.assertEqual(self.pl.count, 0)
        self.assertEqual(self.pl.list_songs(), ([], 0))
        self.pl.release()
        self.assertEqual(self.pl.count, 0)


if __name__ == '__main__':
    unittest.main()
