"""
OpenAI Intent Generator Implementations

IntentGenerator adapters for the two OpenAI API shapes:
    - chat.completions.create (system + user messages)
    - responses.create (instructions + input)

No retries: the client is created with max_retries=0 and failures are
surfaced to the caller as LLMAPIError / LLMTimeoutError.
"""
from typing import Optional

import openai
from openai import AsyncOpenAI

from mail_agent.config import Settings
from mail_agent.ports.intent_generator import IntentGenerator, LLMAPIError, LLMTimeoutError
from mail_agent.prompts.email_prompt import EMAIL_AGENT_SYSTEM_PROMPT
from mail_agent.utils.logger import get_logger

logger = get_logger(__name__)


def create_openai_client(settings: Settings) -> AsyncOpenAI:
    """Build the async OpenAI client from settings"""
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.llm_timeout,
        max_retries=0
    )


class _OpenAIIntentGenerator(IntentGenerator):
    """Shared setup and error mapping for the OpenAI adapters"""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = "gpt-4o-mini",
        temperature: float = 0.4,
        system_prompt: str = EMAIL_AGENT_SYSTEM_PROMPT
    ):
        """
        Args:
            client: AsyncOpenAI client
            model: model identifier
            temperature: sampling temperature
            system_prompt: fixed instruction sent with every prompt
        """
        self._client = client
        self._model = model
        self._temperature = temperature
        self._system_prompt = system_prompt

    async def generate(self, prompt: str) -> str:
        try:
            logger.debug(f"Invoking LLM: model={self._model}, prompt_length={len(prompt)}")
            content = await self._call(prompt)
        except openai.APITimeoutError as e:
            logger.error(f"LLM timeout: {e}")
            raise LLMTimeoutError(f"LLM call timed out: {e}") from e
        except openai.APIError as e:
            logger.error(f"LLM API error: {e}")
            raise LLMAPIError(f"LLM call failed: {e}") from e

        logger.info(f"LLM response received: length={len(content or '')}")
        return content or ""

    async def _call(self, prompt: str) -> Optional[str]:
        raise NotImplementedError

    def get_model_name(self) -> str:
        return self._model


class OpenAIChatIntentGenerator(_OpenAIIntentGenerator):
    """chat.completions API"""

    async def _call(self, prompt: str) -> Optional[str]:
        response = await self._client.chat.completions.create(
            model=self._model,
            temperature=self._temperature,
            messages=[
                {"role": "system", "content": self._system_prompt},
                {"role": "user", "content": prompt}
            ]
        )
        return response.choices[0].message.content

    def __repr__(self) -> str:
        return f"<OpenAIChatIntentGenerator model={self._model}>"


class OpenAIResponsesIntentGenerator(_OpenAIIntentGenerator):
    """responses API"""

    async def _call(self, prompt: str) -> Optional[str]:
        response = await self._client.responses.create(
            model=self._model,
            temperature=self._temperature,
            instructions=self._system_prompt,
            input=prompt
        )
        return response.output_text

    def __repr__(self) -> str:
        return f"<OpenAIResponsesIntentGenerator model={self._model}>"


GENERATORS = {
    "chat": OpenAIChatIntentGenerator,
    "responses": OpenAIResponsesIntentGenerator,
}


def create_intent_generator(settings: Settings, client: Optional[AsyncOpenAI] = None) -> IntentGenerator:
    """
    Build the generator selected by settings.llm_api

    Raises:
        ValueError: unknown llm_api
    """
    generator_cls = GENERATORS.get(settings.llm_api)
    if generator_cls is None:
        raise ValueError(
            f"Unknown llm_api: {settings.llm_api}. "
            f"Available: {list(GENERATORS.keys())}"
        )

    return generator_cls(
        client=client or create_openai_client(settings),
        model=settings.llm_model,
        temperature=settings.llm_temperature
    )
