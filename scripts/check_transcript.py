import sys
from transcript_pro.core.errors import ResolutionError
from transcript_pro.providers.youtube import TranscriptResolver
from transcript_pro.utils.logger import logger

if __name__ == "__main__":
    video_id = sys.argv[1] if len(sys.argv) > 1 else "dQw4w9WgXcQ"
    lang = sys.argv[2] if len(sys.argv) > 2 else "en"
    r = TranscriptResolver()
    try:
        t = r.fetch(video_id, lang)
        print("source:", t.source)
        print("language:", t.language)
        print("segments:", len(t.segments))
        for s in t.segments[:5]:
            print(f"[{s.start:.2f} +{s.duration:.2f}] {s.text}")
    except ResolutionError as e:
        logger.error(f"Transcript fetch failed: {e}")
        for failure in e.failures:
            logger.error(f"  {failure}")
        raise
