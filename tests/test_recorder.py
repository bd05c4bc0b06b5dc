"""
Unit tests for SnippetRecorder.

The classifier is mocked; the snippet service runs on in-memory backends.
"""

import base64
from unittest.mock import AsyncMock, Mock

import pytest

from casual_lifelog.errors import ClassificationError
from casual_lifelog.models import Classification, StatBlock
from casual_lifelog.recorder import SnippetRecorder
from casual_lifelog.snippet_service import SnippetService
from casual_lifelog.storage.local.memory import InMemorySnippetStore
from casual_lifelog.storage.remote.memory import InMemoryRemoteMirror


@pytest.fixture
def classification():
    return Classification(
        event_name="Morning Run",
        stat_changes=StatBlock(body=3, reflexes=1),
        comment="晨跑",
    )


@pytest.fixture
def mock_classifier(classification):
    """Mock classifier returning a fixed classification."""
    classifier = Mock()
    classifier.classify = AsyncMock(return_value=classification)
    return classifier


@pytest.fixture
def local_store():
    return InMemorySnippetStore()


@pytest.fixture
def service(local_store):
    return SnippetService(local_store, InMemoryRemoteMirror())


@pytest.fixture
def recorder(mock_classifier, service):
    return SnippetRecorder(mock_classifier, service)


@pytest.mark.asyncio
async def test_record_text(recorder, mock_classifier, local_store):
    snippet = await recorder.record_text("  Ran 5km before work ")

    mock_classifier.classify.assert_awaited_once_with('Analyze life update: "Ran 5km before work"')
    assert snippet.type == "text"
    assert snippet.event_name == "Morning Run"
    assert snippet.media_url is None
    assert local_store.load() == [snippet]


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   ", "\n"])
async def test_record_blank_text_rejected(recorder, mock_classifier, text):
    with pytest.raises(ValueError):
        await recorder.record_text(text)

    mock_classifier.classify.assert_not_called()


@pytest.mark.asyncio
async def test_record_text_classifier_failure_preserves_input(recorder, mock_classifier, local_store):
    """A failed classification writes nothing and hands the text back."""
    mock_classifier.classify.side_effect = ClassificationError("Empty AI response")

    with pytest.raises(ClassificationError) as exc_info:
        await recorder.record_text("Ran 5km before work")

    assert exc_info.value.input_text == "Ran 5km before work"
    assert local_store.load() == []


@pytest.mark.asyncio
async def test_record_voice(recorder, mock_classifier, local_store):
    audio = b"\x1aE\xdf\xa3 fake webm"

    snippet = await recorder.record_voice(audio)

    prompt, media = mock_classifier.classify.await_args.args
    assert prompt == "Analyze voice log."
    assert media.mime_type == "audio/webm"
    assert base64.b64decode(media.data) == audio
    assert snippet.type == "voice"
    assert snippet.media_url is None
    assert local_store.load() == [snippet]


@pytest.mark.asyncio
async def test_record_image_keeps_data_url(recorder, mock_classifier):
    image = b"\x89PNG\r\n\x1a\n"

    snippet = await recorder.record_image(image, "image/png")

    prompt, media = mock_classifier.classify.await_args.args
    assert prompt == "Analyze image log."
    assert snippet.type == "image"
    assert snippet.media_url == "data:image/png;base64," + base64.b64encode(image).decode("ascii")


@pytest.mark.asyncio
async def test_record_image_failure_writes_nothing(recorder, mock_classifier, local_store):
    mock_classifier.classify.side_effect = ClassificationError("AI analysis failed")

    with pytest.raises(ClassificationError):
        await recorder.record_image(b"img", "image/jpeg")

    assert local_store.load() == []


@pytest.mark.asyncio
async def test_refresh_returns_snippets_and_stats(recorder, service):
    await recorder.record_text("Ran 5km")
    await service.wait_for_pending()

    view = await recorder.refresh()

    assert len(view.snippets) == 1
    assert view.stats == StatBlock(body=13, intelligence=10, reflexes=11, technical=10, cool=10)


@pytest.mark.asyncio
async def test_refresh_empty_is_baseline(recorder):
    view = await recorder.refresh()

    assert view.snippets == []
    assert view.stats.as_dict() == {k: 10 for k in view.stats.as_dict()}


@pytest.mark.asyncio
async def test_wipe(recorder, service, local_store):
    await recorder.record_text("Ran 5km")
    await service.wait_for_pending()

    result = await recorder.wipe()

    assert result.fully_cleared
    assert local_store.load() == []
    assert (await recorder.refresh()).snippets == []
