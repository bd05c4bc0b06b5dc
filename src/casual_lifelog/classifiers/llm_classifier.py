import json
import logging
from typing import Optional

from casual_llm import LLMProvider, SystemMessage, UserMessage
from pydantic import ValidationError

from casual_lifelog.classifiers.prompts import SNIPPET_CLASSIFIER_PROMPT
from casual_lifelog.errors import ClassificationError
from casual_lifelog.models import Classification, MediaPayload

logger = logging.getLogger(__name__)


class LLMSnippetClassifier:
    """Classifies life updates into stat deltas with an LLM."""

    def __init__(self, llm_provider: LLMProvider, prompt: str = SNIPPET_CLASSIFIER_PROMPT):
        self.prompt = prompt
        self.llm_provider = llm_provider

    async def classify(self, prompt: str, media: Optional[MediaPayload] = None) -> Classification:
        content = prompt
        if media is not None:
            # Inline media travels as a data URL after the instruction
            content = f"{prompt}\n\nAttached media ({media.mime_type}):\n{media.to_data_url()}"

        llm_messages = [
            SystemMessage(content=self.prompt),
            UserMessage(content=content),
        ]

        try:
            logger.debug("Classifying snippet")
            response = await self.llm_provider.chat(
                messages=llm_messages, response_format="json", temperature=0.2
            )
        except Exception as e:
            logger.error(f"Snippet classifier LLM failed: {e}")
            raise ClassificationError(f"AI analysis failed: {e}") from e

        if not response.content or not response.content.strip():
            logger.error("Snippet classifier returned an empty response")
            raise ClassificationError("Empty AI response")

        try:
            response_data = json.loads(response.content)
            classification = Classification.model_validate(response_data)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse classification JSON: {e}")
            raise ClassificationError(f"AI response was not valid JSON: {e}") from e
        except ValidationError as e:
            logger.error(f"Classification response is missing fields: {e}")
            raise ClassificationError(f"AI response was incomplete: {e}") from e

        logger.info(f"Classified snippet as '{classification.event_name}'")

        return classification
