from urllib.parse import urlparse

import flask
import sentry_sdk
from flask import Flask, g, request
from loguru import logger
from sentry_sdk.types import Event, Hint
from werkzeug.exceptions import MethodNotAllowed, NotFound

from webbookmark.config import get_config
from webbookmark.error_handlers import (
    handle_404_not_found,
    handle_dev_null_bots,
    handle_generic_errors,
    handle_missing_artist,
    handle_missing_song,
)
from webbookmark.errors import ArtistNotFoundError, SongNotFoundError
from webbookmark.logsetup import add_file_sink, setup_logger
from webbookmark.models import ArtistSongIndex
from webbookmark.routes.util import SONG_INDEX_EXTENSION
from webbookmark.songs import load_song_index

setup_logger()


def filter_healthchecks(event: Event, _: Hint) -> Event:
    url_string = event.get("request", {}).get("url", "")
    parsed_url = urlparse(url_string)

    if parsed_url.path == "/flask-health-check":
        return None

    return event


def create_app(song_index: ArtistSongIndex | None = None) -> Flask:
    config = get_config()  # Loads environment variables
    add_file_sink(config.log_file)

    sentry_sdk.init(
        sample_rate=0.5,
        traces_sample_rate=0.1,
        profiles_sample_rate=0.1,
        before_send_transaction=filter_healthchecks,
    )

    if song_index is None:
        song_index = load_song_index(config.songs_csv)

    flask_app = flask.Flask(__name__)
    # Templates are *.html.j2, which Flask doesn't autoescape on its own
    flask_app.jinja_env.autoescape = True
    flask_app.extensions[SONG_INDEX_EXTENSION] = song_index

    @flask_app.before_request
    def before_request() -> None:
        g.logger = logger.bind(remote=request.remote_addr or "-", path=request.path)

    from webbookmark.routes.artists import artists
    from webbookmark.routes.root import root

    flask_app.register_blueprint(root)
    flask_app.register_blueprint(artists)

    flask_app.register_error_handler(ArtistNotFoundError, handle_missing_artist)
    flask_app.register_error_handler(SongNotFoundError, handle_missing_song)
    flask_app.register_error_handler(NotFound, handle_404_not_found)
    flask_app.register_error_handler(MethodNotAllowed, handle_dev_null_bots)
    flask_app.register_error_handler(Exception, handle_generic_errors)

    return flask_app
