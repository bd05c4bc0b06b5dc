"""
Snippet recorder.

Ties the classifier to the snippet service: each record_* call classifies
one input and, only if classification succeeds, logs the resulting snippet.
"""

import base64
import logging
from dataclasses import dataclass, field
from typing import List

from casual_lifelog.classifiers.base import SnippetClassifier
from casual_lifelog.errors import ClassificationError
from casual_lifelog.models import BASELINE_STATS, MediaPayload, Snippet, StatBlock
from casual_lifelog.snippet_service import ClearAllResult, SnippetService
from casual_lifelog.stats import aggregate_stats

logger = logging.getLogger(__name__)


@dataclass
class LogView:
    """The snippet log as last read, with its cumulative stats."""

    snippets: List[Snippet] = field(default_factory=list)
    stats: StatBlock = BASELINE_STATS


class SnippetRecorder:
    """
    Records text, voice and image updates as snippets.

    A classifier failure raises ClassificationError and writes nothing. For
    text input the error carries the submitted text so it can be resubmitted.
    """

    def __init__(self, classifier: SnippetClassifier, service: SnippetService):
        self.classifier = classifier
        self.service = service

    async def record_text(self, text: str) -> Snippet:
        """
        Classify and log a text update.

        Raises:
            ValueError: If the text is blank
            ClassificationError: If classification fails
        """
        content = text.strip()
        if not content:
            raise ValueError("Cannot record an empty update")

        try:
            classification = await self.classifier.classify(f'Analyze life update: "{content}"')
        except ClassificationError as e:
            e.input_text = text
            raise

        return await self.service.write(classification.to_draft("text"))

    async def record_voice(self, audio: bytes, mime_type: str = "audio/webm") -> Snippet:
        """Classify and log a recorded voice note."""
        media = MediaPayload(mime_type=mime_type, data=base64.b64encode(audio).decode("ascii"))
        classification = await self.classifier.classify("Analyze voice log.", media)
        return await self.service.write(classification.to_draft("voice"))

    async def record_image(self, image: bytes, mime_type: str) -> Snippet:
        """Classify and log an image; the image is kept inline as a data URL."""
        media = MediaPayload(mime_type=mime_type, data=base64.b64encode(image).decode("ascii"))
        classification = await self.classifier.classify("Analyze image log.", media)
        return await self.service.write(
            classification.to_draft("image", media_url=media.to_data_url())
        )

    async def refresh(self) -> LogView:
        """Read the log and compute its cumulative stats."""
        snippets = await self.service.read()
        view = LogView(snippets=snippets, stats=aggregate_stats(snippets))
        logger.debug(f"Refreshed view: {len(snippets)} snippets, stats={view.stats.as_dict()}")
        return view

    async def wipe(self) -> ClearAllResult:
        """Delete every snippet from both stores. Callers must confirm first."""
        return await self.service.clear_all()
