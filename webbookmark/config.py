import os
from pathlib import Path

from loguru import logger

BUNDLED_SONGS_CSV = Path(__file__).parent / "data" / "songs.csv"


class InvalidEnvironmentVariableError(Exception):
    def __init__(self, variable_name: str, value: str) -> None:
        super().__init__(f"Invalid {variable_name} environment variable: {value!r}")


class Config:
    def __init__(self) -> None:
        self._log_file: str = os.environ.get(
            "LOG_FILE", "/opt/webbookmark/webbookmark.log"
        )
        logger.debug("logfile={}", self._log_file)  # Ironically

        self._songs_csv: Path = Path(os.environ.get("SONGS_CSV", BUNDLED_SONGS_CSV))
        logger.debug("songs_csv={}", self._songs_csv)

        raw_zoom_scale = os.environ.get("EMBED_ZOOM_SCALE", "0.5")
        try:
            self._embed_zoom_scale: float = float(raw_zoom_scale)
        except ValueError as error:
            raise InvalidEnvironmentVariableError(
                "EMBED_ZOOM_SCALE", raw_zoom_scale
            ) from error
        if not self._embed_zoom_scale > 0:
            raise InvalidEnvironmentVariableError("EMBED_ZOOM_SCALE", raw_zoom_scale)
        logger.debug("embed_zoom_scale={}", self._embed_zoom_scale)

        raw_frame_height = os.environ.get("EMBED_FRAME_HEIGHT", "300")
        try:
            self._embed_frame_height: int = int(raw_frame_height)
        except ValueError as error:
            raise InvalidEnvironmentVariableError(
                "EMBED_FRAME_HEIGHT", raw_frame_height
            ) from error
        if self._embed_frame_height <= 0:
            raise InvalidEnvironmentVariableError(
                "EMBED_FRAME_HEIGHT", raw_frame_height
            )
        logger.debug("embed_frame_height={}", self._embed_frame_height)

    @property
    def log_file(self) -> str:
        return self._log_file

    @property
    def songs_csv(self) -> Path:
        return self._songs_csv

    @property
    def embed_zoom_scale(self) -> float:
        return self._embed_zoom_scale

    @property
    def embed_frame_height(self) -> int:
        return self._embed_frame_height


_config: Config | None = None


def get_config() -> Config:
    global _config  # noqa: PLW0603
    if not _config:
        _config = Config()
    return _config
