import httpx

from recent_papers.common.logging import get_logger
from recent_papers.common.settings import ArxivSettings
from recent_papers.data.arxiv.errors import FetchError

logger = get_logger(__name__)


class ArxivFeedClient:
    """Fetches raw Atom feed text from the arXiv search API.

    A single GET per call; retries are left to the injected client's
    transport, if any.
    """

    def __init__(
        self,
        settings: ArxivSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or ArxivSettings()
        self._client = client

    async def fetch(self, url: str) -> str:
        if self._client is not None:
            return await self._get(self._client, url)

        async with httpx.AsyncClient(
            timeout=self.settings.timeout_seconds,
            headers={"User-Agent": self.settings.user_agent},
        ) as client:
            return await self._get(client, url)

    @staticmethod
    async def _get(client: httpx.AsyncClient, url: str) -> str:
        try:
            response = await client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("arXiv HTTP %d for %s", status, url)
            raise FetchError(f"arXiv returned HTTP {status}", url=url, status_code=status) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("arXiv fetch failed for %s: %r", url, e)
            raise FetchError(f"arXiv fetch failed: {e!r}", url=url) from e

        logger.debug("Fetched %s (%d bytes)", url, len(response.content))
        return response.text
