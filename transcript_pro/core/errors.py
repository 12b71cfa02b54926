from typing import List, Optional

GENERIC_FAILURE = (
    "Unable to fetch transcript. The video may not have captions, "
    "or all transcript services are unavailable."
)

class TranscriptError(Exception):
    """Base class for transcript lookup errors."""

class ResolutionError(TranscriptError):
    """Every configured source was tried and none produced captions."""

    def __init__(self, failures: Optional[List[str]] = None, message: str = GENERIC_FAILURE):
        super().__init__(message)
        self.failures = list(failures or [])

    def diagnostics(self) -> str:
        return "\n".join(self.failures)
