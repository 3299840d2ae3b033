import pytest

from webbookmark.embed import is_youtube_url, normalize_embed_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        (
            "https://youtu.be/xyz",
            "https://youtu.be/xyz?autoplay=0&playsinline=1",
        ),
        (
            "https://www.youtube.com/embed/abc123",
            "https://www.youtube.com/embed/abc123?autoplay=0&playsinline=1",
        ),
        (
            "https://www.youtube.com/embed/abc123?start=30",
            "https://www.youtube.com/embed/abc123?start=30&autoplay=0&playsinline=1",
        ),
        (
            "https://youtu.be/xyz?t=42",
            "https://youtu.be/xyz?t=42&autoplay=0&playsinline=1",
        ),
        (
            "https://m.youtube.com/watch?v=abc123",
            "https://m.youtube.com/embed/abc123&autoplay=0&playsinline=1",
        ),
    ],
)
def test_normalize_youtube(url: str, expected: str) -> None:
    assert normalize_embed_url(url) == expected


def test_watch_url_keeps_missing_question_mark() -> None:
    # The "?" belonged to "watch?v=" and is replaced away
    assert (
        normalize_embed_url("https://www.youtube.com/watch?v=abc123")
        == "https://www.youtube.com/embed/abc123&autoplay=0&playsinline=1"
    )


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/song",
        "https://example.com/song?id=1",
        "https://vimeo.com/123456",
        "not a url at all",
    ],
)
def test_non_youtube_unchanged(url: str) -> None:
    assert normalize_embed_url(url) == url


@pytest.mark.parametrize(
    "url",
    [
        "youtu.be/xyz",
        "https://www.youtube.com/watch?v=abc 123",
        "https://[youtube.com/watch?v=abc",
        "ftp://youtube.com/watch?v=abc",
    ],
)
def test_invalid_result_falls_back_to_original(url: str) -> None:
    assert normalize_embed_url(url) == url


def test_normalize_twice_duplicates_params() -> None:
    once = normalize_embed_url("https://www.youtube.com/embed/abc123")
    twice = normalize_embed_url(once)

    assert twice == (
        "https://www.youtube.com/embed/abc123"
        "?autoplay=0&playsinline=1&autoplay=0&playsinline=1"
    )


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.youtube.com/watch?v=abc", True),
        ("https://youtu.be/abc", True),
        ("https://music.youtube.com/watch?v=abc", True),
        ("https://example.com/?next=youtube.com", True),
        ("https://example.com/song", False),
        ("https://youtube.co/abc", False),
    ],
)
def test_is_youtube_url(url: str, expected: bool) -> None:  # noqa: FBT001
    assert is_youtube_url(url) is expected
