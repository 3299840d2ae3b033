from pathlib import Path

import pytest
from pytest_socket import disable_socket

SONGS_CSV_CONTENT = (
    "artist,title,url\n"
    "aespa,Spicy,https://youtu.be/xyz\n"
    "aespa,black mamba,https://www.youtube.com/watch?v=black-mamba\n"
    "aespa,Next Level,https://www.youtube.com/embed/next-level\n"
    "IVE,LOVE DIVE,https://example.com/love-dive\n"
    "IVE,After LIKE\n"
    "ITZY,,https://www.youtube.com/watch?v=missing-title\n"
    "BIGBANG,Haru Haru,https://www.youtube.com/watch?v=haru,haru\n"
)


def pytest_runtest_setup() -> None:
    disable_socket()


@pytest.fixture(autouse=True)
def set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", "/dev/null")  # DEBUG logs still written to stdout
    monkeypatch.delenv("SONGS_CSV", raising=False)
    monkeypatch.delenv("EMBED_ZOOM_SCALE", raising=False)
    monkeypatch.delenv("EMBED_FRAME_HEIGHT", raising=False)
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    # Config is memoised, each test starts from the environment above
    monkeypatch.setattr("webbookmark.config._config", None)


@pytest.fixture
def songs_csv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "songs.csv"
    path.write_text(SONGS_CSV_CONTENT, encoding="utf-8")
    monkeypatch.setenv("SONGS_CSV", str(path))
    return path
