"""
Intent Generator Port (Interface)

Abstracts the language-model call so the handler does not depend on a
specific LLM API shape (chat-completions vs. responses).
"""
from abc import ABC, abstractmethod


class IntentGenerator(ABC):
    """
    Turns a free-text prompt into the model's raw answer text

    Implementations:
        - OpenAIChatIntentGenerator: OpenAI chat-completions API
        - OpenAIResponsesIntentGenerator: OpenAI responses API
        - fakes in tests

    Example:
        generator = OpenAIChatIntentGenerator(client, model="gpt-4o-mini")
        raw = await generator.generate("Send a thank-you note to alice@example.com")
        # raw = '{"to": "alice@example.com", "subject": "...", "body": "..."}'
    """

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Send the prompt together with the fixed email instruction

        Args:
            prompt: user prompt describing the email to write

        Returns:
            str: raw model text, expected to be a JSON object literal.
                 May be empty; interpreting it is the caller's job.

        Raises:
            LLMAPIError: API call failed
            LLMTimeoutError: API call timed out
        """
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """
        Returns:
            str: model identifier (e.g. "gpt-4o-mini")
        """
        pass


class LLMAPIError(Exception):
    """LLM API call failed"""
    pass


class LLMTimeoutError(Exception):
    """LLM API call timed out"""
    pass
