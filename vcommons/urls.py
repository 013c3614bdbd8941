"""URL safety checks for links that end up in rendered pages.

Every external link in a project record passes through
:func:`validate_external_url`. Repository links additionally go through
:func:`validate_github_url`, and :func:`parse_github_url` extracts the
owner/name pair the GitHub fetcher and maintainer resolution rely on.
"""

import logging
import re
from typing import NamedTuple, Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")

# Checked against the raw string before any parsing happens
BLOCKED_PATTERNS = [
    re.compile(r"^javascript:", re.IGNORECASE),
    re.compile(r"^data:", re.IGNORECASE),
    re.compile(r"^vbscript:", re.IGNORECASE),
    re.compile(r"^file:", re.IGNORECASE),
    re.compile(r"^about:", re.IGNORECASE),
]

GITHUB_HOSTS = ("github.com", "www.github.com")

_GITHUB_REPO_RE = re.compile(r"github\.com/([^/]+)/([^/]+)")


class GitHubRepoRef(NamedTuple):
    """Owner and repository name parsed from a GitHub URL."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def validate_external_url(url: Optional[str]) -> Optional[str]:
    """Return the trimmed URL if it is safe to link to, otherwise None."""
    if not url or not isinstance(url, str):
        return None

    trimmed = url.strip()
    if not trimmed:
        return None

    for pattern in BLOCKED_PATTERNS:
        if pattern.search(trimmed):
            logger.warning("Blocked malicious URL pattern: %s...", trimmed[:50])
            return None

    try:
        parsed = urlparse(trimmed)
    except ValueError:
        return None

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        logger.warning("Blocked URL with disallowed scheme: %s", parsed.scheme or "<none>")
        return None

    if not parsed.hostname:
        return None

    return trimmed


def validate_github_url(url: Optional[str]) -> Optional[str]:
    """Return the URL if it points at a GitHub repository, otherwise None.

    The URL must pass :func:`validate_external_url`, live on ``github.com``
    (``www.`` allowed) and carry at least ``/owner/repo`` in its path.
    """
    validated = validate_external_url(url)
    if validated is None:
        return None

    parsed = urlparse(validated)
    if parsed.hostname not in GITHUB_HOSTS:
        logger.warning("Invalid GitHub URL hostname: %s", parsed.hostname)
        return None

    path_parts = [part for part in parsed.path.split("/") if part]
    if len(path_parts) < 2:
        logger.warning("Invalid GitHub URL path format: %s", parsed.path or "/")
        return None

    return validated


def parse_github_url(url: Optional[str]) -> Optional[GitHubRepoRef]:
    """Extract owner and repository name from a GitHub URL.

    Matching is deliberately permissive: anything containing
    ``github.com/<owner>/<repo>`` is accepted and a trailing ``.git`` is
    dropped from the repository name.
    """
    if not url or not isinstance(url, str):
        return None

    match = _GITHUB_REPO_RE.search(url)
    if not match:
        return None

    repo = re.sub(r"\.git$", "", match.group(2))
    if not repo:
        return None
    return GitHubRepoRef(owner=match.group(1), repo=repo)
