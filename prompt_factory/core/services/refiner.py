"""Prompt rewrite ("optimization") service.

The rewrite is treated as an opaque text-to-text call.  The optimized text is
attached to a copy of the adapted prompt so the original rendering is kept
for side-by-side comparison.
"""

from __future__ import annotations

from pydantic import BaseModel

from prompt_factory.core.models import AdaptedPrompt
from prompt_factory.core.prompts.refine import REFINE_SYSTEM_PROMPT, REFINE_USER_TEMPLATE
from prompt_factory.core.rendering import estimate_tokens, raw_prompt
from prompt_factory.core.services.base import LLMService
from prompt_factory.utils.exceptions import ResponseParseError
from prompt_factory.utils.logging import get_logger

logger = get_logger("services.refiner")


class RefineResult(BaseModel):
    optimized_prompt: str
    notes: list[str] = []
    model: str = ""
    provider: str = ""
    input_tokens: int = 0
    output_tokens: int = 0


class PromptRefiner(LLMService):
    async def refine(
        self,
        raw_prompt_text: str,
        target_provider: str = "",
        task_type: str = "",
        complexity: str = "",
    ) -> RefineResult:
        user_msg = REFINE_USER_TEMPLATE.format(
            target_provider=target_provider or "generique",
            task_type=task_type or "non specifie",
            complexity=complexity or "basic",
            prompt=raw_prompt_text,
        )
        completion, fallback = await self._complete(REFINE_SYSTEM_PROMPT, user_msg)

        optimized = completion.text.strip()
        if not optimized:
            raise ResponseParseError(completion.provider, "empty rewrite")

        before = estimate_tokens(raw_prompt_text)
        after = estimate_tokens(optimized)
        notes = [f"Tokens estimes : ~{before} -> ~{after}"]
        if fallback:
            notes.append(f"Optimisation effectuee via {completion.provider} (fallback).")

        logger.info(
            "prompt_refined",
            target_provider=target_provider,
            provider=completion.provider,
            tokens_before=before,
            tokens_after=after,
        )
        return RefineResult(
            optimized_prompt=optimized,
            notes=notes,
            model=completion.model,
            provider=completion.provider,
            input_tokens=completion.input_tokens,
            output_tokens=completion.output_tokens,
        )

    async def optimize(
        self,
        adapted: AdaptedPrompt,
        task_type: str = "",
        complexity: str = "",
    ) -> AdaptedPrompt:
        """Return a copy of *adapted* carrying the optimized variant."""
        result = await self.refine(
            raw_prompt(adapted), adapted.provider_id, task_type, complexity,
        )
        return adapted.with_optimized(result.optimized_prompt, result.notes)
