from flask import Blueprint, g, render_template

from webbookmark.config import get_config
from webbookmark.embed import normalize_embed_url
from webbookmark.routes.util import get_artist, get_song, get_song_index

artists = Blueprint("artists", __name__)


@artists.route("/artists/<artist_name>")
def get_artist_page(artist_name: str) -> str:
    artist = get_artist(artist_name)
    songs = get_song_index().songs_for(artist.name)
    g.logger.debug("  songs={}", songs)

    return render_template("artist.html.j2", artist=artist, songs=songs)


@artists.route("/artists/<artist_name>/songs/<int:position>")
def get_player_page(artist_name: str, position: int) -> str:
    config = get_config()
    artist = get_artist(artist_name)
    song = get_song(artist, position)
    g.logger.info("Playing {!r} by {}", song.title, artist.name)

    return render_template(
        "player.html.j2",
        artist=artist,
        song=song,
        embed_url=normalize_embed_url(song.url),
        zoom_scale=config.embed_zoom_scale,
        frame_height=config.embed_frame_height,
    )
