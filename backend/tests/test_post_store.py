"""
BlogAPI Backend: Post Store Tests
==================================

What:  Tests for PostStore persistence operations.
How:   Real SQLite database per test (see conftest.py); each step uses its own
       session, the way separate requests would. Failure paths use a mocked
       AsyncSession.
"""

import uuid

import pytest
from sqlalchemy.exc import OperationalError

from blogapi.exceptions import NotFoundError, StoreUnavailableError
from blogapi.schemas.post import NewPostDraft, PartialPostUpdate
from blogapi.services.post_store import PostStore


def draft(**overrides) -> NewPostDraft:
    body = {"title": "T", "content": "C", "author": {"firstName": "F", "lastName": "L"}}
    body.update(overrides)
    return NewPostDraft.model_validate(body)


class TestInsertAndFind:

    def setup_method(self):
        self.store = PostStore()

    @pytest.mark.asyncio
    async def test_insert_assigns_id_and_created(self, session_factory):
        async with session_factory() as session:
            post = await self.store.insert(session, draft())
            await session.commit()

        assert post.id is not None
        assert post.created is not None

        async with session_factory() as session:
            stored = await self.store.find_by_id(session, str(post.id))

        assert stored.title == "T"
        assert stored.content == "C"
        assert stored.author == {"firstName": "F", "lastName": "L"}

    @pytest.mark.asyncio
    async def test_insert_assigns_distinct_ids(self, db_session):
        first = await self.store.insert(db_session, draft())
        second = await self.store.insert(db_session, draft())
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_find_unknown_id(self, db_session):
        with pytest.raises(NotFoundError):
            await self.store.find_by_id(db_session, str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_find_malformed_id(self, db_session):
        with pytest.raises(NotFoundError, match="not-a-uuid"):
            await self.store.find_by_id(db_session, "not-a-uuid")


class TestListAndCount:

    def setup_method(self):
        self.store = PostStore()

    @pytest.mark.asyncio
    async def test_empty_store(self, db_session):
        assert await self.store.list_all(db_session) == []
        assert await self.store.count(db_session) == 0

    @pytest.mark.asyncio
    async def test_list_matches_count(self, session_factory, seeded_posts):
        async with session_factory() as session:
            posts = await self.store.list_all(session)
            total = await self.store.count(session)

        assert len(posts) == total == len(seeded_posts)
        assert {p.id for p in posts} == {p.id for p in seeded_posts}

    @pytest.mark.asyncio
    async def test_list_order_is_stable(self, session_factory, seeded_posts):
        async with session_factory() as session:
            first = [p.id for p in await self.store.list_all(session)]
        async with session_factory() as session:
            second = [p.id for p in await self.store.list_all(session)]
        assert first == second


class TestUpdate:

    def setup_method(self):
        self.store = PostStore()

    @pytest.mark.asyncio
    async def test_update_all_fields(self, session_factory, seeded_posts):
        target = seeded_posts[0]
        async with session_factory() as session:
            before = await self.store.find_by_id(session, str(target.id))

        update = PartialPostUpdate.model_validate({
            "title": "There and Back Again",
            "content": "A hobbit's tale.",
            "author": {"firstName": "Bilbo", "lastName": "Baggins"},
        })
        async with session_factory() as session:
            await self.store.update_by_id(session, str(target.id), update)
            await session.commit()

        async with session_factory() as session:
            after = await self.store.find_by_id(session, str(target.id))

        assert after.title == "There and Back Again"
        assert after.content == "A hobbit's tale."
        assert after.author == {"firstName": "Bilbo", "lastName": "Baggins"}
        assert after.id == before.id
        assert after.created == before.created

    @pytest.mark.asyncio
    async def test_update_keeps_unsupplied_fields(self, session_factory, seeded_posts):
        target = seeded_posts[0]
        update = PartialPostUpdate.model_validate({"title": "Only the title"})
        async with session_factory() as session:
            await self.store.update_by_id(session, str(target.id), update)
            await session.commit()

        async with session_factory() as session:
            after = await self.store.find_by_id(session, str(target.id))

        assert after.title == "Only the title"
        assert after.content == target.content
        assert after.author == target.author

    @pytest.mark.asyncio
    async def test_update_unknown_id_leaves_others_untouched(self, session_factory, seeded_posts):
        update = PartialPostUpdate.model_validate({"title": "Ghost"})
        async with session_factory() as session:
            with pytest.raises(NotFoundError):
                await self.store.update_by_id(session, str(uuid.uuid4()), update)
            await session.commit()

        async with session_factory() as session:
            posts = await self.store.list_all(session)

        assert len(posts) == len(seeded_posts)
        assert all(p.title != "Ghost" for p in posts)


class TestDeleteAndReset:

    def setup_method(self):
        self.store = PostStore()

    @pytest.mark.asyncio
    async def test_delete_removes_post(self, session_factory, seeded_posts):
        target = seeded_posts[0]
        async with session_factory() as session:
            await self.store.delete_by_id(session, str(target.id))
            await session.commit()

        async with session_factory() as session:
            with pytest.raises(NotFoundError):
                await self.store.find_by_id(session, str(target.id))
            assert await self.store.count(session) == len(seeded_posts) - 1

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, session_factory, seeded_posts):
        async with session_factory() as session:
            with pytest.raises(NotFoundError):
                await self.store.delete_by_id(session, str(uuid.uuid4()))
            with pytest.raises(NotFoundError):
                await self.store.delete_by_id(session, "not-a-uuid")
            assert await self.store.count(session) == len(seeded_posts)

    @pytest.mark.asyncio
    async def test_reset_removes_everything(self, session_factory, seeded_posts):
        async with session_factory() as session:
            removed = await self.store.reset(session)
            await session.commit()

        assert removed == len(seeded_posts)
        async with session_factory() as session:
            assert await self.store.count(session) == 0


class TestStoreUnavailable:
    """Driver failures surface as StoreUnavailableError, never as raw SQLAlchemy errors."""

    def setup_method(self):
        self.store = PostStore()
        self.failure = OperationalError("SELECT", {}, Exception("connection refused"))

    @pytest.mark.asyncio
    async def test_list_all(self, mock_db_session):
        mock_db_session.execute.side_effect = self.failure
        with pytest.raises(StoreUnavailableError):
            await self.store.list_all(mock_db_session)

    @pytest.mark.asyncio
    async def test_find_by_id(self, mock_db_session):
        mock_db_session.get.side_effect = self.failure
        with pytest.raises(StoreUnavailableError) as exc_info:
            await self.store.find_by_id(mock_db_session, str(uuid.uuid4()))
        assert exc_info.value.context["operation"] == "find_by_id"

    @pytest.mark.asyncio
    async def test_insert(self, mock_db_session):
        mock_db_session.flush.side_effect = self.failure
        with pytest.raises(StoreUnavailableError):
            await self.store.insert(mock_db_session, draft())

    @pytest.mark.asyncio
    async def test_delete_by_id(self, mock_db_session):
        mock_db_session.execute.side_effect = self.failure
        with pytest.raises(StoreUnavailableError):
            await self.store.delete_by_id(mock_db_session, str(uuid.uuid4()))
