"""GitHub repository metadata fetcher."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import httpx
import pendulum
from pydantic import ValidationError

from ..config import Config
from ..models import RepositoryMetadata
from ..urls import parse_github_url
from .cache import TTLCache

logger = logging.getLogger(__name__)

RATE_LIMIT_STATUSES = (403, 429)


def _format_reset(reset: Optional[str]) -> str:
    """Render an ``X-RateLimit-Reset`` epoch value as ISO-8601."""
    if reset is None or not reset.isdigit():
        return "unknown"
    return pendulum.from_timestamp(int(reset)).to_iso8601_string()


def _reraise_fatal(result: Any) -> None:
    # gather(return_exceptions=True) also hands back cancellation
    if isinstance(result, BaseException) and not isinstance(result, Exception):
        raise result


class GitHubFetcher:
    """Fetch repository statistics from the GitHub REST API.

    Every lookup costs two requests (repository summary and language
    breakdown), issued concurrently. Failures of any kind are logged and
    reported as ``None``; nothing is raised to the caller.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        api_base: str = "https://api.github.com",
        user_agent: str = "Verus-Commons-Website",
        timeout: float = 30.0,
        cache: Optional[TTLCache] = None,
        cache_ttl: float = 3600,
        rate_limit_warning: int = 10,
        max_concurrent: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize GitHub fetcher.

        Args:
            token: Optional API token, raises the hourly rate limit
            api_base: REST API base URL
            user_agent: User-Agent header value
            timeout: Per-request timeout in seconds
            cache: Response cache shared across lookups (None disables caching)
            cache_ttl: Freshness window for cached responses in seconds
            rate_limit_warning: Warn when remaining quota drops below this
            max_concurrent: Bound on concurrent lookups in fetch_many (None = unbounded)
            transport: Custom httpx transport, mainly for tests
        """
        self.token = token
        self.api_base = api_base.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.cache = cache
        self.cache_ttl = cache_ttl
        self.rate_limit_warning = rate_limit_warning
        self.max_concurrent = max_concurrent
        self.transport = transport

    @classmethod
    def from_config(
        cls,
        config: Config,
        cache: Optional[TTLCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GitHubFetcher":
        """Build a fetcher from the loaded configuration."""
        github = config.config.github
        return cls(
            token=config.get_github_token(),
            api_base=github.api_base,
            user_agent=github.user_agent,
            timeout=github.timeout,
            cache=cache if cache is not None else TTLCache(),
            cache_ttl=github.cache_ttl_seconds,
            rate_limit_warning=github.rate_limit_warning,
            max_concurrent=github.max_concurrent,
            transport=transport,
        )

    def _headers(self) -> Dict[str, str]:
        """Build request headers, adding the bearer token when configured."""
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _check_rate_limit(self, response: httpx.Response, endpoint: str) -> None:
        """Log quota warnings and rate limit exhaustion."""
        remaining = response.headers.get("X-RateLimit-Remaining")
        limit = response.headers.get("X-RateLimit-Limit")
        reset_at = _format_reset(response.headers.get("X-RateLimit-Reset"))

        if remaining is not None and remaining.isdigit() and int(remaining) < self.rate_limit_warning:
            logger.warning(
                "GitHub API rate limit warning: %s/%s remaining. Resets at %s. Endpoint: %s",
                remaining,
                limit or "?",
                reset_at,
                endpoint,
            )

        if response.status_code in RATE_LIMIT_STATUSES:
            hint = "" if self.token else " Consider setting a GitHub token in the environment."
            logger.error("GitHub API rate limit exceeded! Resets at %s.%s", reset_at, hint)

    async def _request(self, client: httpx.AsyncClient, endpoint: str) -> Tuple[int, Any]:
        """GET an API endpoint, serving fresh cached payloads when available."""
        url = f"{self.api_base}/{endpoint}"

        if self.cache is not None:
            cached = self.cache.get(url)
            if cached is not None:
                return 200, cached

        response = await client.get(url)
        self._check_rate_limit(response, endpoint)

        if not response.is_success:
            return response.status_code, None

        payload = response.json()
        if self.cache is not None:
            self.cache.put(url, payload, self.cache_ttl)
        return response.status_code, payload

    def _compose(self, repo_data: Dict[str, Any], languages: List[str]) -> RepositoryMetadata:
        """Build metadata from the summary payload and language names."""
        license_info = repo_data.get("license")
        spdx_id = license_info.get("spdx_id") if isinstance(license_info, dict) else None

        return RepositoryMetadata(
            stars=repo_data.get("stargazers_count") or 0,
            forks=repo_data.get("forks_count") or 0,
            # pushed_at avoids a separate commits request
            last_commit=repo_data.get("pushed_at") or "",
            license=spdx_id or None,
            languages=languages,
        )

    async def fetch_repository(self, repo_url: str) -> Optional[RepositoryMetadata]:
        """Fetch metadata for one repository URL, or None on any failure."""
        ref = parse_github_url(repo_url)
        if ref is None:
            logger.debug("Not a GitHub repository URL: %s", repo_url)
            return None

        endpoint = f"repos/{ref.owner}/{ref.repo}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self._headers(),
                transport=self.transport,
            ) as client:
                summary, languages = await asyncio.gather(
                    self._request(client, endpoint),
                    self._request(client, f"{endpoint}/languages"),
                    return_exceptions=True,
                )
        except (httpx.HTTPError, UnicodeError) as e:
            # Header values (the token included) must be ASCII
            logger.error("Failed to fetch GitHub data for %s: %s", ref.full_name, e)
            return None

        _reraise_fatal(summary)
        _reraise_fatal(languages)

        if isinstance(summary, Exception):
            logger.error("Failed to fetch GitHub data for %s: %s", ref.full_name, summary)
            return None

        status, repo_data = summary
        if status == 404:
            logger.warning("GitHub repo not found: %s", ref.full_name)
            return None
        if repo_data is None:
            return None
        if not isinstance(repo_data, dict):
            logger.error("Malformed GitHub response for %s", ref.full_name)
            return None

        language_names: List[str] = []
        if isinstance(languages, Exception):
            logger.warning("Failed to fetch languages for %s: %s", ref.full_name, languages)
        else:
            _, languages_data = languages
            if isinstance(languages_data, dict):
                language_names = list(languages_data.keys())

        try:
            return self._compose(repo_data, language_names)
        except (ValidationError, AttributeError, TypeError) as e:
            logger.error("Malformed GitHub response for %s: %s", ref.full_name, e)
            return None

    async def fetch_many(self, repo_urls: Sequence[str]) -> List[Optional[RepositoryMetadata]]:
        """Fetch metadata for several repositories concurrently, preserving order."""
        if not repo_urls:
            return []

        if self.max_concurrent is None:
            return list(await asyncio.gather(*(self.fetch_repository(url) for url in repo_urls)))

        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def fetch_with_semaphore(url: str) -> Optional[RepositoryMetadata]:
            async with semaphore:
                return await self.fetch_repository(url)

        tasks = [fetch_with_semaphore(url) for url in repo_urls]
        return list(await asyncio.gather(*tasks))

    def fetch_repository_sync(self, repo_url: str) -> Optional[RepositoryMetadata]:
        """Synchronous wrapper for fetch_repository."""
        return asyncio.run(self.fetch_repository(repo_url))
