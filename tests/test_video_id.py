from transcript_pro.core.video import extract_video_id, watch_url, embed_url


def test_watch_url():
    assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s") == "dQw4w9WgXcQ"


def test_short_and_embed_urls():
    assert extract_video_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_video_id("https://youtu.be/dQw4w9WgXcQ?si=abc") == "dQw4w9WgXcQ"
    assert extract_video_id("https://www.youtube.com/embed/dQw4w9WgXcQ#start") == "dQw4w9WgXcQ"


def test_bare_id():
    assert extract_video_id("dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_video_id("  dQw4w9WgXcQ\n") == "dQw4w9WgXcQ"


def test_no_match():
    assert extract_video_id("not a url") is None
    assert extract_video_id("") is None
    assert extract_video_id("dQw4w9WgXcQX") is None
    assert extract_video_id("https://vimeo.com/123456") is None


def test_url_builders():
    assert watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert watch_url("dQw4w9WgXcQ", 61.7) == "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=61s"
    assert embed_url("dQw4w9WgXcQ") == "https://www.youtube.com/embed/dQw4w9WgXcQ"
