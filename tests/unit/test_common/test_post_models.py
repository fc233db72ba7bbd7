"""
Post DTO validation tests
"""

import pytest
from pydantic import ValidationError

from blog_api.domain.post import AuthorName, PostCreate, PostUpdate


class TestAuthorName:
    def test_accepts_camel_case_keys(self):
        author = AuthorName.model_validate({"firstName": "Ada", "lastName": "Lovelace"})
        assert author.first_name == "Ada"
        assert author.last_name == "Lovelace"

    def test_display_name(self):
        author = AuthorName(first_name="Ada", last_name="Lovelace")
        assert author.display_name == "Ada Lovelace"

    def test_requires_both_names(self):
        with pytest.raises(ValidationError):
            AuthorName.model_validate({"firstName": "Ada"})


class TestPostCreate:
    def test_valid(self):
        data = PostCreate.model_validate(
            {"title": "T", "content": "C", "author": {"firstName": "A", "lastName": "B"}}
        )
        assert data.author.display_name == "A B"

    @pytest.mark.parametrize("missing", ["title", "content", "author"])
    def test_missing_field_rejected(self, missing):
        payload = {"title": "T", "content": "C", "author": {"firstName": "A", "lastName": "B"}}
        payload.pop(missing)
        with pytest.raises(ValidationError):
            PostCreate.model_validate(payload)

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            PostCreate.model_validate(
                {"title": "", "content": "C", "author": {"firstName": "A", "lastName": "B"}}
            )


class TestPostUpdate:
    def test_all_fields_optional(self):
        data = PostUpdate.model_validate({})
        assert data.model_fields_set == set()

    def test_tracks_provided_fields(self):
        data = PostUpdate.model_validate({"id": "x", "title": "New"})
        assert data.model_fields_set == {"id", "title"}

    @pytest.mark.parametrize("field", ["title", "content", "author"])
    def test_explicit_null_rejected(self, field):
        with pytest.raises(ValidationError):
            PostUpdate.model_validate({field: None})

    def test_partial_author_rejected(self):
        with pytest.raises(ValidationError):
            PostUpdate.model_validate({"author": {"lastName": "Hamilton"}})
