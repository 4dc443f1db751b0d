"""Example completion client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in
CompletionClientFactory.
"""

import json
from typing import ClassVar

from docanalyst.analysis.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Example adapter that returns a fixed valid analysis JSON.

    No network calls. Useful for local development and tests. Chat
    prompts get a fixed plain-text answer instead.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example summary of the document.",
        "key_topics": ["Example topic"],
        "important_findings": [],
        "recommendations": [],
    }
    DEFAULT_CHAT_RESPONSE: ClassVar[str] = "This is an example answer."

    def __init__(self) -> None:
        self.calls = 0

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt
        self.calls += 1
        if "User Question:" in user_prompt:
            return self.DEFAULT_CHAT_RESPONSE
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE) + "\n```"
