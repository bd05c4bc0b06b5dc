"""
Snippet classification.

Turns a life update (text, voice, or image) into an event name, stat delta
and comment.
"""

from casual_lifelog.classifiers.base import SnippetClassifier
from casual_lifelog.classifiers.llm_classifier import LLMSnippetClassifier
from casual_lifelog.classifiers.prompts import SNIPPET_CLASSIFIER_PROMPT

__all__ = [
    "SnippetClassifier",
    "LLMSnippetClassifier",
    "SNIPPET_CLASSIFIER_PROMPT",
]
