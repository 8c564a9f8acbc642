"""PTCF prompt assembly.

Turns a :class:`FormData` into the provider-independent
:class:`GenericPrompt`:

  - **P**ersona -- explicit override, or a role sentence synthesised from the
    task type and domain, enriched progressively with the complexity level.
  - **T**ask -- the task description, tagged with the custom task label.
  - **C**ontext -- ``Label : value`` lines for the non-empty context fields.
  - **F**ormat -- output format, length and language on a single line.

Assembly is pure: missing fields fall back to defaults and never raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_factory.core import labels
from prompt_factory.core.models import (
    AdaptedPrompt,
    Complexity,
    FormData,
    FormSnapshot,
    GenericPrompt,
)
from prompt_factory.utils.logging import get_logger

if TYPE_CHECKING:
    from prompt_factory.core.adapters.registry import AdapterRegistry

logger = get_logger("core.assembler")

# One sentence per level above basic, appended in order.
_COMPLEXITY_SENTENCES: list[tuple[Complexity, str]] = [
    (
        Complexity.INTERMEDIATE,
        "Tu adaptes ton niveau de detail au contexte et priorises la precision.",
    ),
    (
        Complexity.ADVANCED,
        "Tu structures tes reponses de maniere hierarchique et appliques une "
        "rigueur methodologique.",
    ),
    (
        Complexity.EXPERT,
        "Tu indiques ton niveau de confiance, signales les ambiguites, et "
        "proposes des alternatives quand pertinent.",
    ),
]

_COMPLEXITY_RANK: dict[Complexity, int] = {
    Complexity.BASIC: 0,
    Complexity.INTERMEDIATE: 1,
    Complexity.ADVANCED: 2,
    Complexity.EXPERT: 3,
}


class PromptAssembler:
    """Builds the generic PTCF structure from form data."""

    def assemble(self, form: FormData) -> GenericPrompt:
        """Build the generic prompt from a read-only copy of *form*.

        Later changes to *form* do not reach the returned prompt, and the
        prompt's ``form`` cannot be modified.
        """
        snapshot = FormSnapshot.of(form)
        return GenericPrompt(
            persona=self.build_persona(snapshot),
            task=self.build_task(snapshot),
            context=self.build_context(snapshot),
            format=self.build_format(snapshot),
            examples=tuple(snapshot.usable_examples),
            chain_of_thought=snapshot.chain_of_thought,
            output_length=snapshot.output_length,
            form=snapshot,
        )

    def generate_all(
        self,
        form: FormData,
        registry: AdapterRegistry,
    ) -> dict[str, AdaptedPrompt]:
        """Assemble once and adapt for every selected provider."""
        return self.adapt_all(self.assemble(form), registry)

    def adapt_all(
        self,
        prompt: GenericPrompt,
        registry: AdapterRegistry,
    ) -> dict[str, AdaptedPrompt]:
        """Adapt an assembled prompt for every provider selected in its form."""
        form = prompt.form
        results: dict[str, AdaptedPrompt] = {}
        for provider_id in form.target_models:
            results[provider_id] = registry.adapt(prompt, provider_id)
        logger.info(
            "prompts_generated",
            providers=list(results),
            task_type=form.task_type,
            complexity=form.complexity.value,
        )
        return results

    # ----- P -----------------------------------------------------------------

    def build_persona(self, form: FormData) -> str:
        if form.persona:
            return form.persona

        role = labels.ROLE_BY_TASK.get(form.task_type, labels.DEFAULT_ROLE)
        domain = f" specialise en {form.domain}" if form.domain else ""
        lines = [f"Tu es un {role}{domain}."]

        rank = _COMPLEXITY_RANK[form.complexity]
        for level, sentence in _COMPLEXITY_SENTENCES:
            if rank >= _COMPLEXITY_RANK[level]:
                lines.append(sentence)
        return "\n".join(lines)

    # ----- T -----------------------------------------------------------------

    def build_task(self, form: FormData) -> str:
        if form.task_type == "autre" and form.custom_task_type:
            return f"[{form.custom_task_type}] {form.task_description}"
        return form.task_description

    # ----- C -----------------------------------------------------------------

    def build_context(self, form: FormData) -> str:
        fields = [
            ("Domaine", form.domain),
            ("Public", form.audience),
            ("Ton", form.tone),
            ("Contraintes", form.constraints),
            ("Input", form.input_description),
        ]
        return "\n".join(f"{label} : {value}" for label, value in fields if value)

    # ----- F -----------------------------------------------------------------

    def build_format(self, form: FormData) -> str:
        output_format = labels.lookup(labels.OUTPUT_FORMAT, form.output_format)
        length = labels.lookup(labels.OUTPUT_LENGTH, form.output_length)
        language = form.output_language or labels.DEFAULT_LANGUAGE
        return f"{output_format} - {length} - Langue : {language}"


_default_assembler = PromptAssembler()


def assemble(form: FormData) -> GenericPrompt:
    return _default_assembler.assemble(form)


def generate_all(form: FormData, registry: AdapterRegistry) -> dict[str, AdaptedPrompt]:
    return _default_assembler.generate_all(form, registry)
