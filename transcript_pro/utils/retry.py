from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests
from transcript_pro.config import settings

def upstream_retry():
    """Retry transient upstream failures; HTTP errors are not retried."""
    return retry(
        stop=stop_after_attempt(settings.MAX_RETRIES),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        retry=retry_if_exception_type((
            requests.exceptions.ConnectionError,
            requests.exceptions.Timeout,
        )),
        reraise=True
    )
