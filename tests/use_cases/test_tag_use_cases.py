from __future__ import annotations

from unittest.mock import Mock

import pytest

from gift_certificates.domain.errors import ConflictError, NotFoundError, ValidationError
from gift_certificates.domain.paging import PageRequest, PagingValidationError
from gift_certificates.domain.tag import Tag
from gift_certificates.ports.tag_repository import TagRepository
from gift_certificates.use_cases.assign_tags import AssignTags, AssignTagsRequest
from gift_certificates.use_cases.create_tag import CreateTag, CreateTagRequest
from gift_certificates.use_cases.delete_tag import DeleteTag, DeleteTagRequest
from gift_certificates.use_cases.get_tag_by_id import GetTagById, GetTagByIdRequest
from gift_certificates.use_cases.list_tags import ListTags, ListTagsRequest


@pytest.fixture()
def mock_repository() -> Mock:
    return Mock(spec=TagRepository)


# ==============================================================================
# CreateTag
# ==============================================================================


def test_create_tag(mock_repository: Mock) -> None:
    mock_repository.find_by_name.return_value = None
    mock_repository.save.return_value = 4

    result = CreateTag(tag_repository=mock_repository).execute(CreateTagRequest(name="travel"))

    assert result.tag == Tag(id=4, name="travel")


def test_create_duplicate_tag_is_conflict(mock_repository: Mock) -> None:
    mock_repository.find_by_name.return_value = Tag(id=1, name="travel")

    with pytest.raises(ConflictError):
        CreateTag(tag_repository=mock_repository).execute(CreateTagRequest(name="travel"))

    mock_repository.save.assert_not_called()


def test_create_blank_tag_is_invalid(mock_repository: Mock) -> None:
    with pytest.raises(ValidationError):
        CreateTag(tag_repository=mock_repository).execute(CreateTagRequest(name="  "))

    mock_repository.find_by_name.assert_not_called()


# ==============================================================================
# GetTagById / ListTags / DeleteTag
# ==============================================================================


def test_get_tag(mock_repository: Mock) -> None:
    mock_repository.find.return_value = Tag(id=2, name="luxury")

    result = GetTagById(tag_repository=mock_repository).execute(GetTagByIdRequest(tag_id=2))

    assert result.tag.name == "luxury"


def test_get_missing_tag(mock_repository: Mock) -> None:
    mock_repository.find.return_value = None

    with pytest.raises(NotFoundError):
        GetTagById(tag_repository=mock_repository).execute(GetTagByIdRequest(tag_id=2))


def test_list_tags(mock_repository: Mock) -> None:
    tags = [Tag(id=1, name="wellness"), Tag(id=2, name="luxury")]
    mock_repository.find_all.return_value = tags
    page = PageRequest(page=1, page_size=10)

    result = ListTags(tag_repository=mock_repository).execute(ListTagsRequest(page=page))

    assert result.tags == tags
    mock_repository.find_all.assert_called_once_with(page)


def test_list_tags_rejects_bad_page(mock_repository: Mock) -> None:
    with pytest.raises(PagingValidationError):
        ListTags(tag_repository=mock_repository).execute(
            ListTagsRequest(page=PageRequest(page=0))
        )


def test_delete_tag(mock_repository: Mock) -> None:
    mock_repository.delete.return_value = True

    DeleteTag(tag_repository=mock_repository).execute(DeleteTagRequest(tag_id=3))

    mock_repository.delete.assert_called_once_with(3)


def test_delete_missing_tag(mock_repository: Mock) -> None:
    mock_repository.delete.return_value = False

    with pytest.raises(NotFoundError):
        DeleteTag(tag_repository=mock_repository).execute(DeleteTagRequest(tag_id=3))


# ==============================================================================
# AssignTags
# ==============================================================================


def test_assign_creates_missing_tags_and_assigns_each(mock_repository: Mock) -> None:
    mock_repository.find_by_name.side_effect = [Tag(id=1, name="wellness"), None]
    mock_repository.save.return_value = 8

    result = AssignTags(tag_repository=mock_repository).execute(
        AssignTagsRequest(certificate_id=7, tag_names=("wellness", "travel", "wellness"))
    )

    assert result.tags == (Tag(id=1, name="wellness"), Tag(id=8, name="travel"))
    assert [call.args for call in mock_repository.assign_tag.call_args_list] == [(1, 7), (8, 7)]


def test_assign_validates_every_name_before_writing(mock_repository: Mock) -> None:
    with pytest.raises(ValidationError):
        AssignTags(tag_repository=mock_repository).execute(
            AssignTagsRequest(certificate_id=7, tag_names=("wellness", "x" * 51))
        )

    mock_repository.find_by_name.assert_not_called()
    mock_repository.assign_tag.assert_not_called()


def test_default_tag_name_is_configurable(mock_repository: Mock) -> None:
    mock_repository.find_by_name.return_value = Tag(id=1, name="General")
    assign_tags = AssignTags(tag_repository=mock_repository, default_tag_name="General")

    assert assign_tags.resolve_default() == Tag(id=1, name="General")
    mock_repository.find_by_name.assert_called_once_with("General")
