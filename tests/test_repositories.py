"""
Content repository tests: id allocation, CRUD contract, copies
"""
import pytest

from catalog.shared.models import ContentPayload, ContentUpdate
from catalog.shared.repositories import ContentRepository, InvalidPayloadError


SERVER_FIELDS = {"id", "created_at", "updated_at"}


def test_create_assigns_sequential_ids(repository, make_payload):
    first = repository.create_content(make_payload(title="One"))
    second = repository.create_content(make_payload(title="Two"))

    assert first.id == 1
    assert second.id == 2
    assert repository.count() == 2


def test_create_then_get_returns_equal_record(repository, make_payload):
    payload = make_payload(tags=["Indian"], cast=["Pratik Gandhi"])
    created = repository.create_content(payload)

    fetched = repository.get_content_by_id(created.id)
    assert fetched == created
    assert fetched.model_dump(exclude=SERVER_FIELDS) == ContentPayload(**payload).model_dump()


def test_create_stamps_timestamps(repository, clock, make_payload):
    expected = clock.now
    created = repository.create_content(make_payload())

    assert created.created_at == expected
    assert created.updated_at == expected


def test_create_defaults_status_to_completed(repository, make_payload):
    created = repository.create_content(make_payload())
    assert created.status == "completed"


def test_create_accepts_payload_model(repository, make_payload):
    created = repository.create_content(ContentPayload(**make_payload(title="Model")))
    assert created.title == "Model"


def test_create_accepts_camel_case_keys(repository, make_payload):
    payload = make_payload()
    payload["imageUrl"] = payload.pop("image_url")
    payload["originalTitle"] = "Original"

    created = repository.create_content(payload)
    assert created.image_url == "https://example.com/image.jpg"
    assert created.original_title == "Original"


@pytest.mark.parametrize("missing", ["title", "genre", "rating", "image_url", "type", "language"])
def test_create_rejects_missing_required_field(repository, make_payload, missing):
    payload = make_payload()
    del payload[missing]

    with pytest.raises(InvalidPayloadError) as exc_info:
        repository.create_content(payload)

    assert exc_info.value.errors
    assert repository.count() == 0


def test_create_rejects_empty_genre(repository, make_payload):
    with pytest.raises(InvalidPayloadError):
        repository.create_content(make_payload(genre=[]))


def test_invalid_payload_error_is_value_error():
    assert issubclass(InvalidPayloadError, ValueError)


def test_store_does_not_enforce_rating_range(repository, make_payload):
    created = repository.create_content(make_payload(rating="11.5"))
    assert created.rating == "11.5"


def test_get_missing_returns_none(repository):
    assert repository.get_content_by_id(42) is None


def test_list_contents_keeps_insertion_order(repository, make_payload):
    for title in ["A", "B", "C"]:
        repository.create_content(make_payload(title=title))

    assert [c.title for c in repository.list_contents()] == ["A", "B", "C"]


def test_returned_records_are_copies(repository, make_payload):
    created = repository.create_content(make_payload())
    created.genre.append("Hacked")
    created.title = "Changed"

    stored = repository.get_content_by_id(created.id)
    assert stored.genre == ["Drama"]
    assert stored.title == "Test Drama"

    listed = repository.list_contents()[0]
    listed.genre.clear()
    assert repository.get_content_by_id(created.id).genre == ["Drama"]


def test_snapshot_is_not_affected_by_later_writes(repository, make_payload):
    repository.create_content(make_payload(title="A"))
    snapshot = repository.snapshot()

    repository.create_content(make_payload(title="B"))
    repository.delete_content(1)

    assert [c.title for c in snapshot] == ["A"]


def test_update_changes_only_given_field(repository, make_payload):
    created = repository.create_content(make_payload(cast=["X"]))

    updated = repository.update_content(created.id, {"title": "Renamed"})

    assert updated.title == "Renamed"
    assert updated.id == created.id
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at
    unchanged = SERVER_FIELDS | {"title"}
    assert updated.model_dump(exclude=unchanged) == created.model_dump(exclude=unchanged)
    assert repository.get_content_by_id(created.id) == updated


def test_update_replaces_sequences_whole(repository, make_payload):
    created = repository.create_content(make_payload(genre=["Drama", "Crime"]))

    updated = repository.update_content(created.id, ContentUpdate(genre=["Comedy"]))

    assert updated.genre == ["Comedy"]


def test_update_rejects_server_assigned_fields(repository, make_payload):
    created = repository.create_content(make_payload())

    with pytest.raises(InvalidPayloadError):
        repository.update_content(created.id, {"id": 99})

    assert repository.get_content_by_id(99) is None
    assert repository.get_content_by_id(created.id).id == created.id


@pytest.mark.parametrize("field", ["createdAt", "updatedAt", "created_at"])
def test_update_rejects_timestamps(repository, make_payload, field):
    created = repository.create_content(make_payload())

    with pytest.raises(InvalidPayloadError):
        repository.update_content(created.id, {field: "2000-01-01T00:00:00Z"})

    assert repository.get_content_by_id(created.id).created_at == created.created_at


def test_update_rejects_null_required_field(repository, make_payload):
    created = repository.create_content(make_payload())

    with pytest.raises(InvalidPayloadError):
        repository.update_content(created.id, {"title": None})

    assert repository.get_content_by_id(created.id).title == "Test Drama"


def test_update_can_clear_optional_field(repository, make_payload):
    created = repository.create_content(make_payload(network="SonyLIV"))

    updated = repository.update_content(created.id, {"network": None})

    assert updated.network is None


def test_update_missing_returns_none(repository):
    assert repository.update_content(7, {"title": "Nope"}) is None


def test_delete_then_get_returns_none(repository, make_payload):
    created = repository.create_content(make_payload())

    assert repository.delete_content(created.id) is True
    assert repository.get_content_by_id(created.id) is None
    assert repository.delete_content(created.id) is False


def test_ids_are_never_reused(repository, make_payload):
    first = repository.create_content(make_payload())
    repository.delete_content(first.id)

    second = repository.create_content(make_payload())

    assert second.id == first.id + 1


def test_repository_uses_real_clock_by_default(make_payload):
    created = ContentRepository().create_content(make_payload())
    assert created.created_at.tzinfo is not None
