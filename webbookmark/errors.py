class ArtistNotFoundError(Exception):
    def __init__(self, artist_name: str) -> None:
        super().__init__(f"No artist named {artist_name!r}")
        self.artist_name = artist_name


class SongNotFoundError(Exception):
    def __init__(self, artist_name: str, position: int) -> None:
        super().__init__(f"No song at position {position} for {artist_name!r}")
        self.artist_name = artist_name
        self.position = position
