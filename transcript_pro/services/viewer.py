import os
import re
from typing import List, Optional
from rich.text import Text
from transcript_pro.models.transcript import Segment, Transcript

def format_time(seconds: float) -> str:
    mins, secs = divmod(int(seconds), 60)
    return f"{mins}:{secs:02d}"

def filter_segments(segments: List[Segment], query: Optional[str]) -> List[Segment]:
    if not query:
        return list(segments)
    needle = query.lower()
    return [s for s in segments if needle in s.text.lower()]

def active_index(segments: List[Segment], position: Optional[float]) -> Optional[int]:
    """Index of the segment playing at ``position`` seconds, if any."""
    if position is None:
        return None
    for i, seg in enumerate(segments):
        if seg.start <= position < seg.start + seg.duration:
            return i
    return None

def highlight(text: str, query: Optional[str], style: str = "bold magenta") -> Text:
    rendered = Text(text)
    if query:
        rendered.highlight_regex("(?i)" + re.escape(query), style=style)
    return rendered

def to_clipboard_text(segments: List[Segment]) -> str:
    return " ".join(s.text for s in segments)

def to_download_text(segments: List[Segment]) -> str:
    return "\n\n".join(s.text for s in segments)

def download_filename(video_id: str, fmt: str = "txt") -> str:
    return f"youtube-transcript-{video_id}.{fmt}"

def save_transcript(transcript: Transcript, directory: str, fmt: str = "txt") -> str:
    if fmt not in ("txt", "json"):
        raise ValueError(f"Unsupported export format: {fmt}")
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, download_filename(transcript.video_id, fmt))
    with open(path, "w", encoding="utf-8") as f:
        if fmt == "json":
            f.write(transcript.model_dump_json(indent=2))
        else:
            f.write(to_download_text(transcript.segments))
    return path
