"""
Life-Logging Quickstart

Classifies a few life updates with a local LLM, logs them as snippets and
prints the cumulative stats. Set REMOTE_URL and REMOTE_KEY to mirror the
log into a database; leave them unset to run local-only.
"""

import asyncio

from casual_llm import ModelConfig, Provider, create_provider

from casual_lifelog import (
    STAT_LABELS,
    ClassificationError,
    LifelogConfig,
    SnippetRecorder,
    configure_logging,
    create_snippet_service,
)
from casual_lifelog.classifiers import LLMSnippetClassifier


async def main():
    print("=== Life-Logging Quickstart ===\n")

    config = LifelogConfig.from_env()
    configure_logging(config.log_level)

    llm_provider = create_provider(ModelConfig(
        name="qwen2.5:7b-instruct",
        provider=Provider.OLLAMA,
        base_url="http://localhost:11434",
    ))

    service = create_snippet_service(config)
    recorder = SnippetRecorder(LLMSnippetClassifier(llm_provider), service)

    print(f"Mode: {'cloud-sync' if service.remote_enabled else 'local buffer'}\n")

    updates = [
        "Ran 5km before work",
        "Finished reading a book on compilers",
        "Fixed the bike's rear derailleur myself",
    ]

    for update in updates:
        try:
            snippet = await recorder.record_text(update)
        except ClassificationError as e:
            print(f"  ! Analysis failed for {e.input_text!r}: {e}")
            continue
        print(f"  + {snippet.event_name}: {snippet.comment}")

    await service.wait_for_pending()

    view = await recorder.refresh()

    print(f"\nPackets: {len(view.snippets)}")
    for key, value in view.stats.as_dict().items():
        print(f"  {STAT_LABELS[key]} ({key}): {value}")

    print("\n=== Example Complete ===")


if __name__ == "__main__":
    asyncio.run(main())
