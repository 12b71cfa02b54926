import re
from typing import Optional

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"^([A-Za-z0-9_-]{11})$"),
]

def extract_video_id(value: str) -> Optional[str]:
    """Return the video ID embedded in a watch/short/embed URL or a bare ID."""
    if not value:
        return None
    value = value.strip()
    for pattern in VIDEO_ID_PATTERNS:
        m = pattern.search(value)
        if m:
            return m.group(1)
    return None

def watch_url(video_id: str, at: Optional[float] = None) -> str:
    url = f"https://www.youtube.com/watch?v={video_id}"
    if at:
        url += f"&t={int(at)}s"
    return url

def embed_url(video_id: str) -> str:
    return f"https://www.youtube.com/embed/{video_id}"
