"""
API distribution updater.

This module locates the vendor API archive in the grid master's
distribution directory listing, downloads it if it is not already on disk,
unpacks it if it has not been unpacked, and works out the commands still
needed to build and install it.
"""

import logging
import os
import re
import tarfile
from html.parser import HTMLParser
from typing import List, Optional

import requests
import urllib3

from ..constants import API_ARCHIVE_PATTERN, API_ARCHIVE_SUFFIX
from ..exceptions import DownloadError
from ..models import UpdatePlan

logger = logging.getLogger(__name__)

_ARCHIVE = re.compile(API_ARCHIVE_PATTERN)
_CHUNK_SIZE = 64 * 1024


class _LinkExtractor(HTMLParser):
    """Collects href/src attribute values from a page."""

    def __init__(self):
        super().__init__()
        self.links: List[str] = []

    def handle_starttag(self, tag, attrs):
        for name, value in attrs:
            if name in ("href", "src") and value:
                self.links.append(value)


def extract_links(html: str) -> List[str]:
    parser = _LinkExtractor()
    parser.feed(html)
    parser.close()
    return parser.links


def find_api_archive(html: str) -> Optional[str]:
    """Return the last link in a listing that names an API archive."""
    found = None
    for link in extract_links(html):
        if _ARCHIVE.match(link):
            logger.info(f"FOUND :  {link}")
            found = link
    return found


def _get(http: requests.Session, url: str, timeout: int, stream: bool = False) -> requests.Response:
    try:
        response = http.get(url, timeout=timeout, stream=stream)
    except requests.exceptions.RequestException as e:
        raise DownloadError(f"Unable to fetch {url}: {e}") from e
    if not response.ok:
        raise DownloadError(f"{response.status_code} {response.reason}")
    return response


def download_file(http: requests.Session, url: str, output_file: str, timeout: int) -> None:
    """
    Stream url into output_file.

    The body is written to ``<output_file>.part`` and moved into place only
    once complete, so an interrupted download never leaves a truncated
    archive behind.

    Raises:
        DownloadError: If the request or the transfer fails
    """
    partial_file = output_file + ".part"
    response = _get(http, url, timeout, stream=True)
    try:
        with open(partial_file, "wb") as f:
            for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
        os.replace(partial_file, output_file)
    except (requests.exceptions.RequestException, OSError) as e:
        if os.path.exists(partial_file):
            os.remove(partial_file)
        raise DownloadError(f"Download of {url} failed: {e}") from e
    finally:
        response.close()


def extract_archive(archive: str, target_dir: str) -> None:
    """Unpack a tar archive into target_dir."""
    with tarfile.open(archive, "r:*") as tar:
        if hasattr(tarfile, "data_filter"):
            tar.extractall(target_dir, filter="data")
        else:
            tar.extractall(target_dir)


def build_plan(config, file_name: str) -> UpdatePlan:
    url = f"https://{config.grid_master}{config.api_path}"
    output_file = os.path.join(config.temp_dir, file_name)
    return UpdatePlan(
        url=url,
        file_name=file_name,
        full_path=url + file_name,
        temp_dir=config.temp_dir,
        output_file=output_file,
        api_dir=output_file[: -len(API_ARCHIVE_SUFFIX)],
    )


def update_api(config, http: Optional[requests.Session] = None) -> UpdatePlan:
    """
    Fetch and unpack the API distribution from the grid master.

    Args:
        config: Loaded ConfigSchema (grid_master, api_path, temp_dir, timeout, verify_ssl)
        http: Optional requests session to use

    Returns:
        UpdatePlan describing what is now on disk

    Raises:
        DownloadError: If the listing or archive cannot be fetched, or no archive is listed
    """
    if http is None:
        http = requests.Session()
        http.verify = config.verify_ssl
    if not config.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    listing_url = f"https://{config.grid_master}{config.api_path}"
    listing = _get(http, listing_url, config.timeout)

    file_name = find_api_archive(listing.text)
    if not file_name:
        raise DownloadError(f"No API archive found at {listing_url}")

    plan = build_plan(config, file_name)

    is_downloaded = False
    if os.path.exists(plan.output_file):
        is_downloaded = True
        logger.info(f"NOTICE:  Skipping download.  File already exists in target location ({plan.output_file}).")
    else:
        logger.info(f"NOTICE:  Attempting to download file '{file_name}'")
        download_file(http, plan.full_path, plan.output_file, config.timeout)
        if os.path.exists(plan.output_file):
            is_downloaded = True
            logger.info(f"NOTICE:  File downloaded to '{plan.output_file}'.")

    is_extracted = False
    if is_downloaded:
        if os.path.exists(plan.api_dir):
            is_extracted = True
            logger.info(f"NOTICE:  Skipping extraction.  Directory '{plan.api_dir}' already exists.")
        elif os.path.isdir(plan.temp_dir):
            logger.info(f"NOTICE:  Attempting to unpack file to '{plan.api_dir}'")
            try:
                extract_archive(plan.output_file, plan.temp_dir)
            except (tarfile.TarError, OSError) as e:
                logger.warning(f"NOTICE:  Failed to extract file: {e}")
            if os.path.exists(plan.api_dir):
                is_extracted = True
                logger.info(f"NOTICE:  File successfully unpacked to '{plan.api_dir}'")
            else:
                logger.warning("NOTICE:  Failed to extract file.")

    return plan._replace(is_downloaded=is_downloaded, is_extracted=is_extracted)


def next_steps(plan: UpdatePlan) -> List[str]:
    """Shell commands that finish installing the API distribution."""
    commands = []
    if not plan.is_downloaded:
        commands.append(f"curl --insecure {plan.full_path} > {plan.output_file}")
    if not plan.is_extracted:
        commands.append(f"cd {plan.temp_dir}")
        commands.append(f"tar xvzf {plan.output_file}")
    commands.extend([
        f"cd {plan.api_dir}",
        "perl Makefile.PL",
        "make",
        "sudo make install",
    ])
    return commands
