"""Converters from raw caption payloads into :class:`Segment` lists.

Each JSON probe takes a decoded payload of unknown shape and returns either a
list of segments or ``None`` when the payload is not the shape it knows.
:func:`parse_json` runs the probes in priority order.
"""
import re
import json
import html
import xml.etree.ElementTree as ET
from typing import Any, Callable, List, Optional
from transcript_pro.models.transcript import Segment

TEXT_KEYS = ("text", "transcript", "caption", "content")
START_KEYS = ("start", "startTime", "offset", "timestamp")
DURATION_KEYS = ("duration", "dur")
LIST_KEYS = ("transcript", "segments", "captions", "items")
WRAPPED_KEYS = ("contents", "body", "data")

DEFAULT_DURATION = 3.0
FULL_TEXT_STEP = 3.0

XML_MARKERS = ("<transcript", "<text", "<timedtext")

def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if result != result or result < 0:  # NaN or negative
        return default
    return result

def _first(item: dict, keys, default=None):
    # empty strings and zeros fall through to the next synonym
    for key in keys:
        value = item.get(key)
        if value:
            return value
    return default

def drop_blank(segments: List[Segment]) -> List[Segment]:
    return [s for s in segments if s.text.strip()]

def looks_like_xml(text: str) -> bool:
    body = text.lstrip("\ufeff \t\r\n")
    return body.startswith("<") and any(marker in body for marker in XML_MARKERS)

def looks_like_vtt(text: str) -> bool:
    return text.lstrip("\ufeff \t\r\n").startswith("WEBVTT")

# --- XML ---

def parse_xml(content: str) -> List[Segment]:
    """Parse timedtext markup.

    ``<text start=".." dur="..">`` nodes are read first (seconds); documents
    without any fall back to srv3 ``<p t=".." d="..">`` nodes (milliseconds).
    Blank nodes are kept; callers filter them.
    """
    try:
        root = ET.fromstring(content.strip())
    except ET.ParseError:
        return []

    nodes = [n for n in root.iter() if n.tag.split("}")[-1] == "text"]
    if nodes:
        return [
            Segment(
                text=html.unescape("".join(n.itertext())).strip(),
                start=_to_float(n.attrib.get("start")),
                duration=_to_float(n.attrib.get("dur")),
            )
            for n in nodes
        ]

    segments = []
    for n in root.iter():
        if n.tag.split("}")[-1] != "p":
            continue
        segments.append(Segment(
            text=html.unescape("".join(n.itertext())).replace("\n", " ").strip(),
            start=_to_float(n.attrib.get("t")) / 1000.0,
            duration=_to_float(n.attrib.get("d")) / 1000.0,
        ))
    return segments

# --- WebVTT ---

_VTT_TIME = re.compile(
    r"(?P<start>(?:\d+:)?\d{2}:\d{2}[\.,]\d{3})\s+-->\s+(?P<end>(?:\d+:)?\d{2}:\d{2}[\.,]\d{3})"
)
_VTT_TAG = re.compile(r"<[^>]+>")

def _ts_to_sec(ts: str) -> float:
    parts = ts.replace(",", ".").split(":")
    if len(parts) == 2:
        h = "0"
        m, s = parts
    else:
        h, m, s = parts
    return int(h) * 3600 + int(m) * 60 + float(s)

def parse_vtt(content: str) -> List[Segment]:
    lines = content.splitlines()
    segments = []
    i = 0
    while i < len(lines):
        m = _VTT_TIME.search(lines[i])
        i += 1
        if not m:
            continue
        start = _ts_to_sec(m.group("start"))
        end = _ts_to_sec(m.group("end"))
        text_lines = []
        while i < len(lines) and lines[i].strip() and "-->" not in lines[i]:
            text_lines.append(_VTT_TAG.sub("", lines[i]).strip())
            i += 1
        text = html.unescape(" ".join(t for t in text_lines if t))
        segments.append(Segment(text=text, start=start, duration=max(end - start, 0.0)))
    return segments

# --- JSON probes ---

def _unwrap(payload: Any) -> Any:
    """Decode a string-encoded inner JSON document, if there is one."""
    inner = payload
    if isinstance(payload, dict):
        inner = _first(payload, WRAPPED_KEYS)
    if not isinstance(inner, str):
        return None
    try:
        return json.loads(inner)
    except ValueError:
        return None

def probe_events(payload: Any) -> Optional[List[Segment]]:
    """json3 timed events, either direct or wrapped by a CORS proxy."""
    data = payload if isinstance(payload, dict) and "events" in payload else _unwrap(payload)
    if not isinstance(data, dict):
        return None
    events = data.get("events")
    if not isinstance(events, list):
        return None

    segments = []
    for ev in events:
        if not isinstance(ev, dict):
            continue
        segs = ev.get("segs") or []
        if not isinstance(segs, list):
            continue
        text = "".join(str(s.get("utf8") or "") for s in segs if isinstance(s, dict))
        segments.append(Segment(
            text=text.replace("\n", " ").strip(),
            start=_to_float(ev.get("tStartMs")) / 1000.0,
            duration=_to_float(ev.get("dDurationMs")) / 1000.0,
        ))
    return segments

def _items_to_segments(items: list) -> List[Segment]:
    segments = []
    for item in items:
        if not isinstance(item, dict):
            continue
        text = _first(item, TEXT_KEYS, "")
        segments.append(Segment(
            text=str(text).strip(),
            start=_to_float(_first(item, START_KEYS)),
            duration=_to_float(_first(item, DURATION_KEYS), DEFAULT_DURATION),
        ))
    return segments

def probe_items(payload: Any) -> Optional[List[Segment]]:
    if not isinstance(payload, list):
        return None
    return _items_to_segments(payload)

def probe_wrapper(payload: Any) -> Optional[List[Segment]]:
    if not isinstance(payload, dict):
        return None
    for key in LIST_KEYS:
        items = payload.get(key)
        if isinstance(items, list):
            return _items_to_segments(items)
    return None

_SPLIT = re.compile(r"\s*\n\s*|(?<=[.!?])\s+")

def probe_full_text(payload: Any) -> Optional[List[Segment]]:
    """A single text blob with no timing: synthesize a fixed cadence."""
    if not isinstance(payload, dict):
        return None
    text = payload.get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    parts = [p.strip() for p in _SPLIT.split(text) if p and p.strip()]
    return [
        Segment(text=part, start=i * FULL_TEXT_STEP, duration=FULL_TEXT_STEP)
        for i, part in enumerate(parts)
    ]

JSON_PROBES: List[Callable[[Any], Optional[List[Segment]]]] = [
    probe_events,
    probe_items,
    probe_wrapper,
    probe_full_text,
]

def parse_json(payload: Any) -> List[Segment]:
    for probe in JSON_PROBES:
        segments = drop_blank(probe(payload) or [])
        if segments:
            return segments
    return []
