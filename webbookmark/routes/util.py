from flask import current_app, g

from webbookmark.errors import ArtistNotFoundError, SongNotFoundError
from webbookmark.models import Artist, ArtistSongIndex, Song, find_artist

SONG_INDEX_EXTENSION = "song_index"


def get_song_index() -> ArtistSongIndex:
    return current_app.extensions[SONG_INDEX_EXTENSION]


def get_artist(artist_name: str) -> Artist:
    artist = find_artist(artist_name)
    if not artist:
        raise ArtistNotFoundError(artist_name)
    return artist


def get_song(artist: Artist, position: int) -> Song:
    """Return the song at ``position`` (1-based) in the artist's sorted list."""
    songs = get_song_index().songs_for(artist.name)
    g.logger.debug("  {} has {} songs", artist.name, len(songs))
    if not 1 <= position <= len(songs):
        raise SongNotFoundError(artist.name, position)
    return songs[position - 1]
