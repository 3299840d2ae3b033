from collections import defaultdict
from pathlib import Path

from loguru import logger

from webbookmark.models import ArtistSongIndex, Song

FIELD_COUNT = 3


def parse_songs(content: str) -> ArtistSongIndex:
    """Build an index from ``artist,title,url`` rows.

    Rows are separated by ``\\n`` (a trailing ``\\r`` is dropped) and blank
    lines are ignored. The first remaining line is a header and is dropped
    without looking at it. Empty pieces between commas are ignored, and rows
    that don't come to exactly three fields are skipped. There's no quoting
    support, so a comma inside a URL makes the row invalid.
    """
    songs_by_artist: dict[str, list[Song]] = defaultdict(list)

    rows = [
        (line_number, line.removesuffix("\r"))
        for line_number, line in enumerate(content.split("\n"), start=1)
        if line.removesuffix("\r")
    ]

    for line_number, line in rows[1:]:
        columns = [column for column in line.split(",") if column]
        if len(columns) != FIELD_COUNT:
            logger.debug("  skipping malformed row {}: {!r}", line_number, line)
            continue

        artist, title, url = columns
        songs_by_artist[artist].append(Song(title=title, url=url))

    return ArtistSongIndex.from_songs(songs_by_artist)


def load_song_index(path: Path) -> ArtistSongIndex:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.error("Song file not found: {}", path)
        return ArtistSongIndex()
    except (OSError, UnicodeDecodeError) as error:
        logger.error("Error reading song file {}: {}", path, error)
        return ArtistSongIndex()

    song_index = parse_songs(content)
    logger.info(
        "Loaded {} songs for {} artists from {}",
        song_index.song_count,
        len(song_index),
        path,
    )
    return song_index
