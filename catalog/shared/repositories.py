"""
Content repository: in-memory catalog store
"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from .models import Content, ContentPayload, ContentUpdate

logger = logging.getLogger(__name__)

PROTECTED_FIELDS = {"id", "created_at", "updated_at"}


class InvalidPayloadError(ValueError):
    """A create or update payload is missing required fields or has bad values"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validation_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


class ContentRepository:
    """Owns every catalog entry and hands out copies.

    Ids come from a counter that only moves forward, so an id is never
    reused after a delete. Each operation runs to completion without
    yielding, which is all the coordination an in-process dict needs.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._contents: Dict[int, Content] = {}
        self._next_id = 1
        self._clock = clock

    def count(self) -> int:
        return len(self._contents)

    def snapshot(self) -> Tuple[Content, ...]:
        """Copies of all contents as of now, in insertion order"""
        return tuple(c.model_copy(deep=True) for c in self._contents.values())

    def list_contents(self) -> List[Content]:
        """Get all contents"""
        return list(self.snapshot())

    def get_content_by_id(self, content_id: int) -> Optional[Content]:
        """Get content by ID"""
        content = self._contents.get(content_id)
        return content.model_copy(deep=True) if content else None

    def create_content(self, payload: Union[ContentPayload, Mapping[str, Any]]) -> Content:
        """Create a new content entry"""
        if not isinstance(payload, ContentPayload):
            try:
                payload = ContentPayload.model_validate(payload)
            except ValidationError as e:
                raise InvalidPayloadError("Invalid content payload", _validation_errors(e)) from e

        now = self._clock()
        data = payload.model_dump(exclude=PROTECTED_FIELDS)
        content = Content(**data, id=self._next_id, created_at=now, updated_at=now)
        self._next_id += 1
        self._contents[content.id] = content

        logger.debug(f"Stored content {content.id}: {content.title}")
        return content.model_copy(deep=True)

    def update_content(
        self, content_id: int, changes: Union[ContentUpdate, Mapping[str, Any]]
    ) -> Optional[Content]:
        """Merge ``changes`` over an existing content entry"""
        existing = self._contents.get(content_id)
        if existing is None:
            return None

        if not isinstance(changes, ContentUpdate):
            try:
                changes = ContentUpdate.model_validate(changes)
            except ValidationError as e:
                raise InvalidPayloadError("Invalid content update", _validation_errors(e)) from e

        data = existing.model_dump()
        data.update(changes.changes())
        data["updated_at"] = self._clock()

        try:
            updated = Content.model_validate(data)
        except ValidationError as e:
            raise InvalidPayloadError("Invalid content update", _validation_errors(e)) from e

        self._contents[content_id] = updated
        logger.debug(f"Updated content {content_id}: {sorted(changes.changes())}")
        return updated.model_copy(deep=True)

    def delete_content(self, content_id: int) -> bool:
        """Delete a content entry"""
        if self._contents.pop(content_id, None) is None:
            return False
        logger.debug(f"Deleted content {content_id}")
        return True
