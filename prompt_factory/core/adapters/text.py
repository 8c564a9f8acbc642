"""Adapters for chat-style text LLMs.

Each adapter orders the same ingredients (context, examples, follow-up
answers, input description, reasoning instruction, task, constraints, format)
the way the vendor's prompting guide recommends.
"""

from __future__ import annotations

from prompt_factory.core.adapters.base import BaseAdapter, ProviderMetadata, bullet_lines
from prompt_factory.core.labels import DEFAULT_LANGUAGE, audience_label
from prompt_factory.core.models import AdaptedPrompt, Complexity, GenericPrompt, ProviderCategory

INSTRUCTION_HIERARCHY = (
    "Instruction Hierarchy (priorite decroissante) :\n"
    "1. Contraintes de securite et de format (toujours respecter)\n"
    "2. Instructions de la tache principale\n"
    "3. Preferences stylistiques et tonales\n"
    "4. Optimisations secondaires"
)

ERROR_RECOVERY = (
    "Si tu n'es pas certain d'une reponse, indique ton niveau de confiance et "
    "propose des alternatives.\n"
    "Si les instructions semblent contradictoires, signale l'ambiguite avant de "
    "repondre."
)

# Task types that get a verbosity-control section for ChatGPT.
_VERBOSITY_TASKS = ("code", "analyse", "agent", "classification")

# Task types that get a grounding clause for Gemini.
_FACTUAL_TASKS = ("analyse", "extraction", "classification", "qa-rag")


def _is_detailed(complexity: Complexity) -> bool:
    return complexity in (Complexity.ADVANCED, Complexity.EXPERT)


class ClaudeAdapter(BaseAdapter):
    """Pseudo-XML sections, data on top, question at the bottom."""

    @property
    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(
            id="claude",
            name="Claude",
            description="Anthropic - XML structure, donnees en haut",
            category=ProviderCategory.TEXT,
            color="#D97757",
            letter="C",
        )

    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        form = prompt.form

        system_prompt = prompt.persona
        if _is_detailed(form.complexity):
            system_prompt += "\n\n" + INSTRUCTION_HIERARCHY

        parts: list[str] = ["<context>\n"]
        if form.domain:
            parts.append(f"  <domain>{form.domain}</domain>\n")
        if form.audience:
            parts.append(f"  <audience>{audience_label(form.audience)}</audience>\n")
        if form.tone:
            parts.append(f"  <tone>{form.tone}</tone>\n")
        if form.output_language:
            parts.append(f"  <langue>{form.output_language}</langue>\n")
        parts.append("</context>\n\n")

        if prompt.examples:
            parts.append("<examples>\n")
            for example in prompt.examples:
                parts.append("  <example>\n")
                parts.append(f"    <input>{example.input}</input>\n")
                parts.append(f"    <output>{example.output}</output>\n")
                parts.append("  </example>\n")
            parts.append("</examples>\n\n")

        if form.follow_up_answers:
            parts.append("<clarifications>\n")
            for item in form.follow_up_answers:
                parts.append("  <clarification>\n")
                parts.append(f"    <question>{item.question}</question>\n")
                parts.append(f"    <answer>{item.answer}</answer>\n")
                parts.append("  </clarification>\n")
            parts.append("</clarifications>\n\n")

        if form.input_description:
            parts.append(f"<input_description>\n{form.input_description}\n</input_description>\n\n")

        if prompt.chain_of_thought:
            parts.append(
                "<instructions>\nRaisonne etape par etape dans des balises <thinking> "
                "avant de fournir ta reponse finale.\n</instructions>\n\n"
            )

        parts.append(f"<task>\n{prompt.task}\n</task>\n\n")

        if form.constraints:
            parts.append(f"<constraints>\n{form.constraints}\n</constraints>\n\n")

        if form.complexity == Complexity.EXPERT:
            parts.append(f"<error_recovery>\n{ERROR_RECOVERY}\n</error_recovery>\n\n")

        parts.append(f"<output_format>\n{prompt.format}\n</output_format>")

        notes = [
            'Conseil : Placez le system prompt dans le champ "System" de l\'API Claude.',
            "Le prompt caching est recommande pour le system prompt (90% de reduction de cout).",
            "Les balises XML permettent a Claude de mieux structurer sa comprehension.",
        ]
        if form.complexity == Complexity.EXPERT:
            notes.append("Niveau expert : Instruction Hierarchy + Error Recovery actives.")

        return self._result(system_prompt, "".join(parts), notes)


class ChatGPTAdapter(BaseAdapter):
    """Developer-role rules list, no personality padding."""

    @property
    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(
            id="chatgpt",
            name="ChatGPT",
            description="OpenAI - Developer role, strict mode",
            category=ProviderCategory.TEXT,
            color="#10A37F",
            letter="G",
        )

    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        form = prompt.form

        system = [prompt.persona, "\n\n", "Regles :\n"]
        if form.tone:
            system.append(f"- Ton : {form.tone}\n")
        if form.audience:
            system.append(f"- Public cible : {audience_label(form.audience)}\n")
        if form.output_language:
            system.append(f"- Langue de reponse : {form.output_language}\n")
        system.append(f"- Format de sortie : {prompt.format}\n")
        if form.constraints:
            system.append(bullet_lines(form.constraints) + "\n")

        if form.task_type in _VERBOSITY_TASKS:
            system.append("\nControle de verbosity :\n")
            system.append("- Ne fournir que les elements demandes.\n")
            system.append("- Ne pas s'etendre au-dela du scope de la question.\n")

        if form.complexity == Complexity.EXPERT:
            system.append("\nGestion des erreurs :\n")
            system.append("- Si l'input est ambigu, demande une clarification avant de repondre.\n")
            system.append(
                "- Indique ton niveau de confiance (eleve/moyen/faible) pour chaque reponse.\n"
            )

        user: list[str] = []
        if form.domain:
            user.append(f"Domaine : {form.domain}\n\n")

        if prompt.examples:
            user.append("Exemples :\n\n")
            for i, example in enumerate(prompt.examples, start=1):
                user.append(f"Exemple {i} :\n")
                user.append(f"Input : {example.input}\n")
                user.append(f"Output : {example.output}\n\n")

        if form.follow_up_answers:
            user.append("Precisions supplementaires :\n")
            for item in form.follow_up_answers:
                user.append(f"- {item.question} {item.answer}\n")
            user.append("\n")

        if form.input_description:
            user.append(f"Donnees d'entree : {form.input_description}\n\n")

        if prompt.chain_of_thought:
            user.append("Reflechis etape par etape avant de repondre.\n\n")
        user.append(prompt.task)

        notes = [
            'Conseil : Utilisez le role "developer" (pas "system") dans l\'API GPT.',
            'Pour du JSON, activez "strict: true" dans response_format.',
            'Evitez le personality padding ("prends une grande respiration") - bruit inutile.',
            'Pour les taches complexes, utilisez reasoning_effort: "high".',
        ]
        return self._result("".join(system), "".join(user), notes)


class GeminiAdapter(BaseAdapter):
    """Anchor context on top, grounding clause, question at the bottom."""

    @property
    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(
            id="gemini",
            name="Gemini",
            description="Google - Anchor context, grounding",
            category=ProviderCategory.TEXT,
            color="#4285F4",
            letter="G",
        )

    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        form = prompt.form

        user: list[str] = []
        if form.domain:
            user.append(f"Domaine : {form.domain}\n")
        if form.audience:
            user.append(f"Public cible : {audience_label(form.audience)}\n")
        if form.output_language:
            user.append(f"Langue : {form.output_language}\n")
        if form.tone:
            user.append(f"Ton : {form.tone}\n")
        user.append("\n")

        if prompt.examples:
            user.append("Exemples de reference :\n\n")
            for i, example in enumerate(prompt.examples, start=1):
                user.append(f"Exemple {i} :\n")
                user.append(f"  Entree : {example.input}\n")
                user.append(f"  Sortie : {example.output}\n\n")

        if form.follow_up_answers:
            user.append("Precisions apportees par l'utilisateur :\n")
            for item in form.follow_up_answers:
                user.append(f"- {item.question} {item.answer}\n")
            user.append("\n")

        if form.input_description:
            user.append(f"Donnees d'entree fournies : {form.input_description}\n\n")

        if form.task_type in _FACTUAL_TASKS:
            user.append(
                "IMPORTANT : Reponds UNIQUEMENT sur la base des informations fournies. "
                "Ne recours pas a tes connaissances pre-entrainees.\n\n"
            )

        if prompt.chain_of_thought:
            user.append(
                "Detaille ton raisonnement etape par etape avant de fournir ta reponse finale.\n\n"
            )

        user.append("D'apres le contexte fourni ci-dessus, execute la tache suivante :\n\n")
        user.append(prompt.task + "\n\n")

        if form.constraints:
            user.append(f"Contraintes : {form.constraints}\n\n")
        user.append(f"Format de reponse attendu : {prompt.format}")

        notes = [
            "Conseil : temperature 0 pour extraction/classification, 1.0 pour creativite.",
            "Activez thinking_level: HIGH pour le raisonnement complexe.",
            "Verbes d'action positifs > instructions negatives avec Gemini.",
        ]
        return self._result(prompt.persona, "".join(user), notes)


class PerplexityAdapter(BaseAdapter):
    """Search-first: restitution rules only, few-shot examples dropped."""

    @property
    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(
            id="perplexity",
            name="Perplexity",
            description="Search-first, zero-shot",
            category=ProviderCategory.TEXT,
            color="#20B2AA",
            letter="P",
        )

    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        form = prompt.form

        system = [prompt.persona, "\n\n", "Instructions de restitution :\n"]
        system.append(f"- Langue : {form.output_language or DEFAULT_LANGUAGE}\n")
        system.append(f"- Format : {prompt.format}\n")
        if form.tone:
            system.append(f"- Ton : {form.tone}\n")
        if form.audience:
            system.append(f"- Public : {audience_label(form.audience)}\n")
        if form.constraints:
            system.append(bullet_lines(form.constraints) + "\n")

        user = f"[{form.domain}] " if form.domain else ""
        user += prompt.task
        if form.input_description:
            user += f"\n\nContexte supplementaire : {form.input_description}"
        if form.follow_up_answers:
            user += "\n\nPrecisions :\n" + "\n".join(
                f"- {item.question} {item.answer}" for item in form.follow_up_answers
            )

        notes = [
            "Conseil : Les parametres API sont plus efficaces que les instructions texte.",
            'Parametres recommandes : search_domain_filter, search_context_size: "large".',
            "Ne demandez JAMAIS d'inclure des URLs dans la reponse textuelle.",
        ]
        if prompt.examples:
            notes.append(
                "Les exemples few-shot ont ete retires : ils polluent les sous-recherches "
                "de Perplexity."
            )
        return self._result("".join(system), user, notes)
