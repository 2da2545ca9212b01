import logging

import requests

from .config import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/113.0 Safari/537.36"
    ),
    "Accept": "application/json,text/html;q=0.9,*/*;q=0.8",
    "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8",
}


def safe_get_json(url, params=None):
    """Fetch *url* and decode it as JSON.

    Returns ``None`` when the request fails or the body is not valid JSON, so
    callers can treat both cases as "no data" without catching anything.
    """
    try:
        resp = requests.get(url, params=params, headers=HEADERS, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        return resp.json()
    except ValueError:
        # requests' JSONDecodeError is both a ValueError and a RequestException
        logger.warning("Response from %s is not valid JSON", url)
        return None
    except requests.exceptions.RequestException:
        logger.warning("Request to %s failed", url, exc_info=True)
        return None
