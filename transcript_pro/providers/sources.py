from typing import List, Optional
from urllib.parse import quote, urlencode
from transcript_pro.config import settings
from transcript_pro.models.source import SourceDescriptor

FALLBACK_LANG = "en"

TIMEDTEXT_URL = "https://www.youtube.com/api/timedtext"

def timedtext_url(video_id: str, lang: str, fmt: Optional[str] = None) -> str:
    params = {"v": video_id, "lang": lang}
    if fmt:
        params["fmt"] = fmt
    return f"{TIMEDTEXT_URL}?{urlencode(params)}"

def _chain(video_id: str, lang: str, relay_url: str) -> List[SourceDescriptor]:
    query = urlencode({"videoId": video_id, "lang": lang})
    sources = []
    # Same-origin relay first; it has no cross-origin restrictions upstream.
    if relay_url:
        sources.append(SourceDescriptor(
            name="relay",
            url=relay_url,
            kind="xml",
            language=lang,
            method="POST",
            body={"videoId": video_id, "lang": lang},
        ))
    sources += [
        SourceDescriptor(
            name="youtubetranscripts.app",
            url=f"https://youtubetranscripts.app/api?{query}",
            kind="json",
            language=lang,
        ),
        SourceDescriptor(
            name="tubetext",
            url=f"https://tubetext.vercel.app/api/transcript?{query}",
            kind="json",
            language=lang,
        ),
        SourceDescriptor(
            name="getvideotranscript.com",
            url=f"https://getvideotranscript.com/api?{query}",
            kind="json",
            language=lang,
        ),
        SourceDescriptor(
            name="allorigins",
            url="https://api.allorigins.win/get?url=" + quote(timedtext_url(video_id, lang, "json3"), safe=""),
            kind="json",
            language=lang,
        ),
        # Most likely to be refused, so it goes last.
        SourceDescriptor(
            name="timedtext",
            url=timedtext_url(video_id, lang),
            kind="xml",
            language=lang,
        ),
    ]
    return sources

def build_sources(video_id: str, language: str, relay_url: Optional[str] = None) -> List[SourceDescriptor]:
    """Ordered candidate list for one lookup.

    A non-English request is followed by the same chain forced to English.
    """
    if relay_url is None:
        relay_url = settings.RELAY_URL
    language = language or FALLBACK_LANG
    sources = _chain(video_id, language, relay_url)
    if language != FALLBACK_LANG:
        sources += _chain(video_id, FALLBACK_LANG, relay_url)
    return sources
