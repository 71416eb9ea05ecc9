"""Mercury web parser client for extracting article bodies."""

from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import BaseModel


class MercuryArticle(BaseModel):
    """Article payload returned by the Mercury parser."""

    url: str | None = None
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None


class ArticleExtractionError(RuntimeError):
    """Raised when an article body could not be extracted."""


class ArticleExtractor(Protocol):
    """Interface for article-body extraction services."""

    def parse(self, url: str) -> MercuryArticle:
        """Extract the article at the given url."""


@dataclass
class HttpxMercuryClient(ArticleExtractor):
    """HTTPX-backed Mercury parser client."""

    api_key: str
    base_url: str
    http_client: httpx.Client
    timeout: float = 15

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout: float = 15
    ) -> "HttpxMercuryClient":
        """Create a Mercury client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.Client(),
            timeout=timeout,
        )

    def parse(self, url: str) -> MercuryArticle:
        """Extract an article, raising ArticleExtractionError on failure."""
        try:
            response = self.http_client.get(
                f"{self.base_url}/parser",
                params={"url": url},
                headers={"x-api-key": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            article = MercuryArticle.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            raise ArticleExtractionError(f"Mercury failed to parse {url}") from exc
        if not article.content:
            raise ArticleExtractionError(f"Mercury returned no content for {url}")
        return article

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
