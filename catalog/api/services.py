"""
Business logic service layer
"""
import logging
from typing import List, Optional

from catalog.shared import query as engine
from catalog.shared.config import CatalogConfig
from catalog.shared.models import Content, ContentPayload, ContentQuery, ContentUpdate
from catalog.shared.repositories import ContentRepository

logger = logging.getLogger(__name__)


class ContentService:
    """Content business logic service"""

    def __init__(self, repository: ContentRepository, settings: Optional[CatalogConfig] = None):
        self.repository = repository
        self.settings = settings or CatalogConfig()

    def list_contents(self) -> List[Content]:
        return self.repository.list_contents()

    def get_content_by_id(self, content_id: int) -> Optional[Content]:
        return self.repository.get_content_by_id(content_id)

    def featured(self) -> List[Content]:
        return engine.featured(
            self.repository.snapshot(),
            min_rating=self.settings.featured_min_rating,
            limit=self.settings.featured_limit,
        )

    def top_rated(self) -> List[Content]:
        return engine.top_rated(self.repository.snapshot(), limit=self.settings.top_rated_limit)

    def search(self, text: str) -> List[Content]:
        if not text:
            raise ValueError("Search query is required")
        results = engine.search(self.repository.snapshot(), text)
        logger.debug(f"Search '{text}' returned {len(results)} contents")
        return results

    def filter_contents(self, query: ContentQuery) -> List[Content]:
        return engine.run_query(self.repository.snapshot(), query)

    def create_content(self, payload: ContentPayload) -> Content:
        """Create a new content entry"""
        content = self.repository.create_content(payload)
        logger.info(f"Created content: {content.title} ({content.id})")
        return content

    def update_content(self, content_id: int, changes: ContentUpdate) -> Optional[Content]:
        """Update an existing content entry"""
        content = self.repository.update_content(content_id, changes)
        if content:
            logger.info(f"Updated content: {content.title} ({content.id})")
        return content

    def delete_content(self, content_id: int) -> bool:
        """Delete a content entry"""
        deleted = self.repository.delete_content(content_id)
        if deleted:
            logger.info(f"Deleted content: {content_id}")
        return deleted
