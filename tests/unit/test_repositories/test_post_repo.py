"""
Test Post Repository (SQLAlchemy)
"""

import pytest
from datetime import timezone

from blog_api.domain.post import AuthorName, PostUpdate
from blog_api.repositories.sqlalchemy.post_repo import SQLAlchemyPostRepository


@pytest.mark.asyncio
async def test_insert_assigns_id_and_created(db_session, make_post):
    """Test the store assigns id and creation time on insert"""
    repo = SQLAlchemyPostRepository(db_session)

    post = await repo.insert(make_post())

    assert post.id
    assert len(post.id) == 32
    assert post.title == "Hello world"
    assert post.content == "First post body"
    assert post.author.first_name == "Ada"
    assert post.author.last_name == "Lovelace"
    assert post.created.tzinfo == timezone.utc


@pytest.mark.asyncio
async def test_insert_generates_unique_ids(db_session, make_post):
    """Test ids are unique across the collection"""
    repo = SQLAlchemyPostRepository(db_session)

    ids = {(await repo.insert(make_post())).id for _ in range(5)}

    assert len(ids) == 5


@pytest.mark.asyncio
async def test_get_by_id(db_session, make_post):
    """Test fetching an inserted post"""
    repo = SQLAlchemyPostRepository(db_session)
    created = await repo.insert(make_post(title="Lookup"))

    fetched = await repo.get_by_id(created.id)

    assert fetched is not None
    assert fetched.id == created.id
    assert fetched.title == "Lookup"
    assert fetched.author == created.author
    assert fetched.created == created.created


@pytest.mark.asyncio
async def test_get_nonexistent_post(db_session):
    """Test fetching an unknown id"""
    repo = SQLAlchemyPostRepository(db_session)

    assert await repo.get_by_id("does-not-exist") is None


@pytest.mark.asyncio
async def test_get_all_in_insertion_order(db_session, seeded_posts):
    """Test listing returns every post, oldest first"""
    repo = SQLAlchemyPostRepository(db_session)

    posts = await repo.get_all()

    assert [p.id for p in posts] == [p.id for p in seeded_posts]


@pytest.mark.asyncio
async def test_get_all_empty(db_session):
    repo = SQLAlchemyPostRepository(db_session)

    assert await repo.get_all() == []
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_update_all_fields(db_session, make_post):
    """Test a full update replaces fields but keeps id and created"""
    repo = SQLAlchemyPostRepository(db_session)
    original = await repo.insert(make_post())

    updated = await repo.update(
        original.id,
        PostUpdate(
            title="My name is Alexander Hamilton",
            content="I am a founding father",
            author=AuthorName(first_name="Alexander", last_name="Hamilton"),
        ),
    )

    assert updated is not None
    assert updated.id == original.id
    assert updated.created == original.created
    assert updated.title == "My name is Alexander Hamilton"
    assert updated.content == "I am a founding father"
    assert updated.author.first_name == "Alexander"
    assert updated.author.last_name == "Hamilton"

    stored = await repo.get_by_id(original.id)
    assert stored == updated


@pytest.mark.asyncio
async def test_update_partial_keeps_other_fields(db_session, make_post):
    """Test fields left out of the update are untouched"""
    repo = SQLAlchemyPostRepository(db_session)
    original = await repo.insert(make_post())

    updated = await repo.update(original.id, PostUpdate(title="New title"))

    assert updated.title == "New title"
    assert updated.content == original.content
    assert updated.author == original.author


@pytest.mark.asyncio
async def test_update_nonexistent_post(db_session):
    repo = SQLAlchemyPostRepository(db_session)

    assert await repo.update("missing", PostUpdate(title="x")) is None


@pytest.mark.asyncio
async def test_delete_post(db_session, make_post):
    """Test deleting a post removes it"""
    repo = SQLAlchemyPostRepository(db_session)
    post = await repo.insert(make_post())

    assert await repo.delete(post.id) is True
    assert await repo.get_by_id(post.id) is None
    # Second delete finds nothing
    assert await repo.delete(post.id) is False


@pytest.mark.asyncio
async def test_count_tracks_inserts_and_deletes(db_session, seeded_posts):
    """Test count matches the number of stored posts"""
    repo = SQLAlchemyPostRepository(db_session)

    assert await repo.count() == 10

    await repo.delete(seeded_posts[0].id)
    await repo.delete(seeded_posts[1].id)

    assert await repo.count() == 8
    assert len(await repo.get_all()) == 8
