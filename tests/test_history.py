"""Unit tests for prompt history."""
from datetime import datetime, timedelta, timezone

import pytest

from voiceprompt.history import (
    InMemoryPromptHistory,
    PromptHistory,
    SavedPrompt,
    create_prompt_history,
)
from voiceprompt.structuring import Category, structure_prompt


def _saved(title: str, minutes_ago: int = 0, **overrides) -> SavedPrompt:
    data = {
        "title": title,
        "raw_transcript": f"transcript for {title}",
        "structured_prompt": f"## Task\n{title}",
        "intent": Category.GENERAL,
        "quality_score": 50,
        "locale": "en-US",
        "timestamp": datetime(2025, 1, 1, tzinfo=timezone.utc) - timedelta(minutes=minutes_ago),
    }
    data.update(overrides)
    return SavedPrompt(**data)


class TestPromptHistory:
    """Tests for PromptHistory interface."""

    def test_history_is_abstract(self):
        """Test that PromptHistory cannot be instantiated directly."""
        with pytest.raises(TypeError):
            PromptHistory()  # type: ignore

    def test_factory(self):
        """Test creating the in-memory backend."""
        history = create_prompt_history("memory", max_items=3)

        assert isinstance(history, InMemoryPromptHistory)
        assert history.backend_type == "memory"

    def test_factory_unknown_backend(self):
        """Test that unknown backends raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported history backend"):
            create_prompt_history("postgres")


@pytest.mark.asyncio
class TestInMemoryPromptHistory:
    """Tests for the in-memory backend."""

    async def test_newest_first(self):
        """Test that list_recent orders by timestamp, newest first."""
        history = InMemoryPromptHistory()
        await history.save(_saved("old", minutes_ago=10))
        await history.save(_saved("new", minutes_ago=0))
        await history.save(_saved("middle", minutes_ago=5))

        titles = [p.title for p in await history.list_recent()]

        assert titles == ["new", "middle", "old"]

    async def test_limit(self):
        """Test that list_recent honors the limit."""
        history = InMemoryPromptHistory()
        for i in range(5):
            await history.save(_saved(f"p{i}", minutes_ago=i))

        assert [p.title for p in await history.list_recent(limit=2)] == ["p0", "p1"]

    async def test_evicts_oldest(self):
        """Test that the oldest prompt is dropped past max_items."""
        history = InMemoryPromptHistory(max_items=2)
        await history.save(_saved("oldest", minutes_ago=30))
        await history.save(_saved("older", minutes_ago=20))
        await history.save(_saved("newest", minutes_ago=0))

        titles = {p.title for p in await history.list_recent()}

        assert titles == {"older", "newest"}

    async def test_get_and_delete(self):
        """Test fetching and deleting by id."""
        history = InMemoryPromptHistory()
        saved = _saved("one")
        await history.save(saved)

        assert await history.get(saved.id) == saved
        assert await history.delete(saved.id) is True
        assert await history.delete(saved.id) is False
        assert await history.get(saved.id) is None

    async def test_save_replaces_same_id(self):
        """Test that saving an existing id replaces it."""
        history = InMemoryPromptHistory()
        saved = _saved("draft")
        await history.save(saved)
        await history.save(saved.model_copy(update={"title": "final"}))

        prompts = await history.list_recent()

        assert [p.title for p in prompts] == ["final"]

    async def test_clear(self):
        """Test that clear removes everything."""
        history = InMemoryPromptHistory()
        await history.save(_saved("one"))

        await history.clear()

        assert await history.list_recent() == []

    async def test_search(self):
        """Test case-insensitive search on title, transcript and intent."""
        history = InMemoryPromptHistory()
        await history.save(_saved("REST API", intent=Category.CODE_GENERATION))
        await history.save(_saved("Poem", raw_transcript="a poem about the sea"))

        assert [p.title for p in await history.search("rest")] == ["REST API"]
        assert [p.title for p in await history.search("SEA")] == ["Poem"]
        assert [p.title for p in await history.search("code generation")] == ["REST API"]

    async def test_record(self, code_request: str):
        """Test saving a freshly structured prompt."""
        history = InMemoryPromptHistory()
        prompt = structure_prompt(code_request)

        saved = await history.record(prompt, code_request, "en-IN")

        assert saved.title == prompt.title
        assert saved.structured_prompt == prompt.full_prompt
        assert saved.intent == prompt.intent
        assert saved.locale == "en-IN"
        assert await history.get(saved.id) == saved
