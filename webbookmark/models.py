from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Artist:
    name: str
    # Name of the bundled photo, without extension
    image_ref: str


@dataclass(frozen=True)
class Song:
    title: str
    url: str


@dataclass(frozen=True, eq=False)
class ArtistSongIndex:
    """Read-only mapping of artist name to that artist's songs.

    Each artist's songs are sorted by case-insensitive title when the index is
    built, however it is built. Artists without songs are simply absent.
    """

    songs_by_artist: Mapping[str, Iterable[Song]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "songs_by_artist",
            MappingProxyType(
                {
                    artist: tuple(sorted(songs, key=lambda song: song.title.lower()))
                    for artist, songs in self.songs_by_artist.items()
                }
            ),
        )

    @classmethod
    def from_songs(
        cls, songs_by_artist: Mapping[str, Iterable[Song]]
    ) -> "ArtistSongIndex":
        return cls(songs_by_artist)

    def songs_for(self, artist_name: str) -> tuple[Song, ...]:
        return self.songs_by_artist.get(artist_name, ())

    @property
    def song_count(self) -> int:
        return sum(len(songs) for songs in self.songs_by_artist.values())

    def __len__(self) -> int:
        return len(self.songs_by_artist)


ARTISTS: tuple[Artist, ...] = tuple(
    sorted(
        [
            Artist(name="aespa", image_ref="aespa_img"),
            Artist(name="BIGBANG", image_ref="bigbang_img"),
            Artist(name="ITZY", image_ref="itzy_img"),
            Artist(name="IVE", image_ref="ive_img"),
            Artist(name="Stray_Kids", image_ref="stray_kids_img"),
        ],
        key=lambda artist: artist.name.lower(),
    )
)


def find_artist(name: str) -> Artist | None:
    return next((artist for artist in ARTISTS if artist.name == name), None)
