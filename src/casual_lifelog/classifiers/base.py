"""
Base protocol for snippet classifiers.
"""

from __future__ import annotations

from typing import Optional, Protocol

from casual_lifelog.models import Classification, MediaPayload


class SnippetClassifier(Protocol):
    """
    Protocol for snippet classifiers.

    This is a Protocol (PEP 544), meaning any class that implements
    the classify() method with this signature is compatible - no
    inheritance required.
    """

    async def classify(self, prompt: str, media: Optional[MediaPayload] = None) -> Classification:
        """
        Classify a life update into an event name, stat delta and comment.

        Args:
            prompt: Instruction text describing the update
            media: Optional inline media (voice or image) to analyze

        Returns:
            Classification

        Raises:
            ClassificationError: If the classifier fails or returns nothing usable
        """
        ...
