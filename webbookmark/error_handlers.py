from uuid import uuid4

from flask import render_template, request
from loguru import logger
from werkzeug.exceptions import HTTPException

from webbookmark.errors import ArtistNotFoundError, SongNotFoundError


def handle_generic_errors(error: Exception) -> (str, int):
    error_code = uuid4()
    try:
        error.add_note(f"Error code: {error_code}")
        logger.exception(error)
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected exception while handling generic error")
    finally:
        return (  # noqa: B012
            render_template("500_error.html.j2", error_code=str(error_code)[24:]),
            500,
        )


def handle_404_not_found(error: Exception) -> (str, int):
    error_code = uuid4()
    try:
        error.add_note(f"Error code: {error_code}")
        logger.debug("Unknown page requested: {}", request.path)
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected exception while handling Not Found error")
    finally:
        return (  # noqa: B012
            render_template("404_error.html.j2", error_code=str(error_code)[24:]),
            404,
        )


def handle_missing_artist(error: ArtistNotFoundError) -> (str, int):
    logger.info("Request for unknown artist: {}", error.artist_name)
    return handle_404_not_found(error)


def handle_missing_song(error: SongNotFoundError) -> (str, int):
    logger.info(
        "Request for missing song {} of {}", error.position, error.artist_name
    )
    return handle_404_not_found(error)


def handle_dev_null_bots(_: HTTPException) -> (str, int):
    return "Bad Gateway", 502
