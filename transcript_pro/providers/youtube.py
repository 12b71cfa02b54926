import json
import requests
from typing import List, Optional, Tuple
from transcript_pro.config import settings
from transcript_pro.core.errors import ResolutionError
from transcript_pro.models.source import SourceDescriptor
from transcript_pro.models.transcript import Segment, Transcript
from transcript_pro.providers import parsers
from transcript_pro.providers.sources import build_sources
from transcript_pro.utils.logger import logger

class SourceFailed(Exception):
    pass

class TranscriptResolver:
    """Walks the source chain one request at a time until one yields captions."""

    def __init__(self, session: Optional[requests.Session] = None, relay_url: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.relay_url = relay_url
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT

    def resolve(self, video_id: str, language: str = "en") -> List[Segment]:
        return self._resolve(video_id, language)[1]

    def fetch(self, video_id: str, language: str = "en") -> Transcript:
        source, segments = self._resolve(video_id, language)
        return Transcript(video_id=video_id, language=source.language, source=source.name, segments=segments)

    def _resolve(self, video_id: str, language: str) -> Tuple[SourceDescriptor, List[Segment]]:
        failures = []
        for source in build_sources(video_id, language, self.relay_url):
            try:
                segments = self._try_source(source)
            except SourceFailed as e:
                logger.debug(f"{source.name} ({source.language}) failed: {e}")
                failures.append(f"{source.name} ({source.language}): {e}")
                continue
            if segments is None:
                continue
            logger.info(f"Fetched {len(segments)} segments from {source.name} ({source.language})")
            return source, segments

        logger.warning(f"No transcript for {video_id}; {len(failures)} sources failed")
        raise ResolutionError(failures)

    def _try_source(self, source: SourceDescriptor) -> Optional[List[Segment]]:
        """Return segments, ``None`` to skip silently, or raise SourceFailed."""
        headers = {"Accept": source.accept, "User-Agent": settings.USER_AGENT}
        try:
            resp = self.session.request(
                source.method,
                source.url,
                headers=headers,
                json=source.body,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise SourceFailed(f"request error: {e}")

        # 401 comes from deployment protection in front of the relay, not from a real lookup.
        if resp.status_code == 401:
            logger.debug(f"{source.name} answered 401, skipping")
            return None
        if not 200 <= resp.status_code < 300:
            raise SourceFailed(f"HTTP {resp.status_code}")

        try:
            segments = parsers.drop_blank(self._parse_body(resp.text or ""))
        except SourceFailed:
            raise
        except Exception as e:
            raise SourceFailed(f"unparseable payload: {e!r}")
        if not segments:
            raise SourceFailed("no captions in response")
        return segments

    def _parse_body(self, text: str) -> List[Segment]:
        if parsers.looks_like_xml(text):
            return parsers.parse_xml(text)
        if parsers.looks_like_vtt(text):
            return parsers.parse_vtt(text)
        try:
            payload = json.loads(text)
        except ValueError:
            raise SourceFailed("unrecognized payload")
        return parsers.parse_json(payload)
