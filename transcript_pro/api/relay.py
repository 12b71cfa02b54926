"""Caption relay.

Re-issues caption lookups against YouTube's timedtext endpoint from the server
side, where browser cross-origin rules do not apply, and returns the raw
caption markup with permissive CORS headers.
"""
import re
import requests
from typing import Iterable, List, Optional
from flask import Flask, Blueprint, Response, current_app, jsonify, request
from transcript_pro.config import settings
from transcript_pro.providers.sources import timedtext_url, TIMEDTEXT_URL
from transcript_pro.utils.logger import logger
from transcript_pro.utils.retry import upstream_retry

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,POST",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

ENGLISH_VARIANTS = ["en", "en-US", "en-GB"]
FALLBACK_LANGS = ["en", "en-US", "en-GB", "en-CA", "en-AU"]
FORMATS = ["srv3", "srv1", "srv2", "ttml", "vtt"]

_LANG_CODE = re.compile(r'lang_code="([^"]+)"')

relay_routes = Blueprint("relay_routes", __name__)

class CaptionRelay:
    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": settings.USER_AGENT})
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT

    @upstream_retry()
    def _get(self, url: str) -> requests.Response:
        return self.session.get(url, timeout=self.timeout)

    def _fetch_body(self, url: str) -> Optional[str]:
        try:
            resp = self._get(url)
        except requests.exceptions.RequestException as e:
            logger.debug(f"Upstream request failed for {url}: {e}")
            return None
        if not resp.ok:
            return None
        return resp.text

    def available_languages(self, video_id: str) -> List[str]:
        body = self._fetch_body(f"{TIMEDTEXT_URL}?v={video_id}&type=list")
        if not body:
            return []
        return _LANG_CODE.findall(body)

    def find_captions(self, video_id: str, lang: str) -> Optional[str]:
        available = self.available_languages(video_id)
        if available:
            for code in _dedupe([lang, *available, *ENGLISH_VARIANTS]):
                body = self._fetch_body(timedtext_url(video_id, code, "srv3"))
                if body and ("<transcript>" in body or "<text" in body):
                    logger.info(f"Relay found {code} captions for {video_id} via track list")
                    return body

        for code in _dedupe([lang, *FALLBACK_LANGS]):
            for fmt in FORMATS:
                body = self._fetch_body(timedtext_url(video_id, code, fmt))
                if body and ("<transcript>" in body or "<text" in body or "WEBVTT" in body):
                    logger.info(f"Relay found {code} captions for {video_id} ({fmt})")
                    return body
        return None

def _dedupe(codes: Iterable[str]) -> List[str]:
    seen = []
    for code in codes:
        if code and code not in seen:
            seen.append(code)
    return seen

def _json_error(message: str, status: int) -> Response:
    resp = jsonify({"error": message})
    resp.status_code = status
    return resp

@relay_routes.after_request
def add_cors_headers(resp: Response) -> Response:
    resp.headers.update(CORS_HEADERS)
    return resp

@relay_routes.route("/api/transcript", methods=["GET", "POST", "OPTIONS"])
def transcript():
    if request.method == "OPTIONS":
        return Response(status=200)

    if request.method == "POST":
        body = request.get_json(force=True, silent=True)
        if body is None:
            return _json_error("Invalid JSON body", 400)
        if not isinstance(body, dict):
            body = {}
        video_id = body.get("videoId")
        lang = body.get("lang") or body.get("language") or "en"
    else:
        video_id = request.args.get("videoId")
        lang = request.args.get("lang") or "en"

    if not video_id or isinstance(video_id, bool) or not isinstance(video_id, (str, int, float)):
        return _json_error("videoId is required", 400)

    try:
        xml = current_app.extensions["caption_relay"].find_captions(str(video_id), str(lang))
    except Exception as e:
        logger.exception(f"Transcript fetch error: {e}")
        return _json_error("Failed to fetch transcript", 500)

    if not xml:
        return _json_error("Transcript not available for this video. The video may not have captions enabled.", 404)
    return Response(xml, status=200, mimetype="application/xml")

@relay_routes.route("/api/health")
def health_check():
    return {"status": "healthy"}

def create_app(relay: Optional[CaptionRelay] = None) -> Flask:
    app = Flask(__name__)
    app.extensions["caption_relay"] = relay or CaptionRelay()
    app.register_blueprint(relay_routes)
    return app

def main():
    app = create_app()
    logger.info(f"Caption relay listening on http://{settings.RELAY_HOST}:{settings.RELAY_PORT}/api/transcript")
    app.run(host=settings.RELAY_HOST, port=settings.RELAY_PORT, debug=False)

if __name__ == "__main__":
    main()
