"""Field extraction service.

Asks an LLM to infer form fields from a free-text description so the wizard
can be pre-filled.  Only fields the model can infer are set; everything else
comes back as ``None``.  Merging into an existing form is done by
:func:`~prompt_factory.core.validation.merge_extracted`.
"""

from __future__ import annotations

import json

from pydantic import BaseModel

from prompt_factory.core.models import ExtractedFields
from prompt_factory.core.llm.parsing import parse_json_response
from prompt_factory.core.prompts.extraction import (
    AGENT_PLATFORM_NAMES,
    AGENT_SYSTEM_PROMPT,
    AGENT_USER_TEMPLATE,
    EXTRACTION_SYSTEM_PROMPT,
    EXTRACTION_USER_TEMPLATE,
)
from prompt_factory.core.services.base import LLMService
from prompt_factory.utils.logging import get_logger

logger = get_logger("services.extraction")


class AgentFields(BaseModel):
    """Agent configuration fields; which ones are set depends on the platform."""

    working_on: str | None = None
    trying_to_do: str | None = None
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    conversation_starters: list[str] | None = None


class ExtractionResult(BaseModel):
    extracted: ExtractedFields | None = None
    input_tokens: int = 0
    output_tokens: int = 0
    provider: str = ""
    fallback: bool = False


class AgentExtractionResult(BaseModel):
    platform: str
    agent: AgentFields | None = None
    input_tokens: int = 0
    output_tokens: int = 0
    provider: str = ""
    fallback: bool = False


def _clean_str(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        # Multi-valued answers, joined like FormData's multi-value fields
        value = ", ".join(
            s for s in (_clean_str(item) for item in value) if s
        )
    elif not isinstance(value, str):
        value = str(value)
    value = value.strip()
    if not value or value.lower() == "null":
        return None
    return value


class FieldExtractor(LLMService):
    """Extracts :class:`ExtractedFields` from free text."""

    async def extract(
        self,
        free_text: str,
        task_type: str = "",
        models: list[str] | None = None,
    ) -> ExtractionResult:
        user_msg = EXTRACTION_USER_TEMPLATE.format(
            models=", ".join(models or []) or "non precise",
            task_type=task_type or "non precise",
            free_text=free_text,
        )
        completion, fallback = await self._complete(EXTRACTION_SYSTEM_PROMPT, user_msg)

        extracted = self._parse_fields(completion.text)
        logger.info(
            "fields_extracted",
            provider=completion.provider,
            fallback=fallback,
            fields=sorted(
                k for k, v in extracted.model_dump().items() if v is not None
            ) if extracted else None,
        )
        return ExtractionResult(
            extracted=extracted,
            input_tokens=completion.input_tokens,
            output_tokens=completion.output_tokens,
            provider=completion.provider,
            fallback=fallback,
        )

    async def extract_agent(self, free_text: str, platform: str) -> AgentExtractionResult:
        user_msg = AGENT_USER_TEMPLATE.format(
            platform=platform,
            platform_name=AGENT_PLATFORM_NAMES.get(platform, platform),
            free_text=free_text,
        )
        completion, fallback = await self._complete(AGENT_SYSTEM_PROMPT, user_msg)

        agent = self._parse_agent(completion.text)
        logger.info(
            "agent_fields_extracted",
            platform=platform,
            provider=completion.provider,
            parsed=agent is not None,
        )
        return AgentExtractionResult(
            platform=platform,
            agent=agent,
            input_tokens=completion.input_tokens,
            output_tokens=completion.output_tokens,
            provider=completion.provider,
            fallback=fallback,
        )

    # ----- Parsing -----------------------------------------------------------

    def _parse_fields(self, text: str) -> ExtractedFields | None:
        """Unparseable or non-object replies yield ``None``, not an error."""
        try:
            data = parse_json_response(text)
        except json.JSONDecodeError as exc:
            logger.warning("extraction_parse_failed", error=str(exc), raw=text[:200])
            return None
        if not isinstance(data, dict):
            return None
        return ExtractedFields(**{
            name: _clean_str(data.get(name))
            for name in ExtractedFields.model_fields
        })

    def _parse_agent(self, text: str) -> AgentFields | None:
        try:
            data = parse_json_response(text)
        except json.JSONDecodeError as exc:
            logger.warning("agent_parse_failed", error=str(exc), raw=text[:200])
            return None
        if not isinstance(data, dict):
            return None

        starters = data.get("conversation_starters")
        if isinstance(starters, list):
            starters = [s for s in (_clean_str(item) for item in starters) if s]
        else:
            starters = None

        return AgentFields(
            working_on=_clean_str(data.get("working_on")),
            trying_to_do=_clean_str(data.get("trying_to_do")),
            name=_clean_str(data.get("name")),
            description=_clean_str(data.get("description")),
            instructions=_clean_str(data.get("instructions")),
            conversation_starters=starters,
        )
