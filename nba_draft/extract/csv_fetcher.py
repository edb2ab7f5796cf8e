"""
CSV Fetcher - Extract Layer

Downloads the raw draft projections CSV and stores it on disk untouched.
"""

import logging
import os
from typing import Optional

import requests

logger = logging.getLogger(__name__)


def fetch_csv(
    url: str,
    file_name: str,
    directory: str,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Download url and write the response body to {directory}/{file_name}

    The directory is created (with parents) if missing and any existing file
    is overwritten. The HTTP status is not checked, so an error page is
    written like any other body.

    Args:
        url: Source URL
        file_name: Name of the file to write
        directory: Target directory
        session: Optional requests session to issue the GET with

    Returns:
        str: file_name

    Raises:
        requests.RequestException: On network errors
        OSError: If the directory or file cannot be written
    """
    logger.info(f"Fetching CSV from {url}")

    try:
        os.makedirs(directory, exist_ok=True)

        getter = session.get if session is not None else requests.get
        response = getter(url)

        file_path = os.path.join(directory, file_name)
        with open(file_path, "wb") as f:
            f.write(response.content)

    except (requests.RequestException, OSError) as e:
        logger.error(f"❌ Failed to fetch {url}: {e}")
        raise

    logger.info(
        f"✅ Saved {len(response.content)} bytes (status={response.status_code}) to {file_path}"
    )
    return file_name
