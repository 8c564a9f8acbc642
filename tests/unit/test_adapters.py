"""Tests for provider adapters and the adapter registry."""
import pytest

from prompt_factory.core.adapters import (
    AdapterRegistry,
    BaseAdapter,
    ClaudeAdapter,
    GenericAdapter,
    ProviderMetadata,
)
from prompt_factory.core.adapters.generic import NO_OPTIMIZATION_NOTE
from prompt_factory.core.adapters.text import ERROR_RECOVERY, INSTRUCTION_HIERARCHY
from prompt_factory.core.assembler import assemble
from prompt_factory.core.models import (
    AdaptedPrompt,
    FormData,
    GenericPrompt,
    ProviderCategory,
)


class TestClaudeAdapter:
    def test_basic_form(self, basic_form, registry):
        adapted = registry.adapt(assemble(basic_form), "claude")
        assert adapted.system_prompt == "Tu es un redacteur professionnel specialise en marketing."
        assert adapted.user_prompt == (
            "<context>\n"
            "  <domain>marketing</domain>\n"
            "</context>\n\n"
            "<task>\nWrite a tagline\n</task>\n\n"
            "<output_format>\n"
            "Texte libre - reponse de longueur moderee - Langue : francais\n"
            "</output_format>"
        )
        assert "<examples>" not in adapted.user_prompt
        assert INSTRUCTION_HIERARCHY not in adapted.system_prompt

    def test_expert_adds_instruction_hierarchy(self, basic_form, registry):
        form = FormData(**{**basic_form.model_dump(), "complexity": "expert"})
        adapted = registry.adapt(assemble(form), "claude")
        assert INSTRUCTION_HIERARCHY in adapted.system_prompt
        assert f"<error_recovery>\n{ERROR_RECOVERY}\n</error_recovery>" in adapted.user_prompt
        assert adapted.notes[-1] == "Niveau expert : Instruction Hierarchy + Error Recovery actives."

    def test_advanced_adds_hierarchy_without_error_recovery(self, basic_form, registry):
        form = FormData(**{**basic_form.model_dump(), "complexity": "advanced"})
        adapted = registry.adapt(assemble(form), "claude")
        assert INSTRUCTION_HIERARCHY in adapted.system_prompt
        assert "<error_recovery>" not in adapted.user_prompt

    def test_full_form_section_order(self, full_form, registry):
        user = registry.adapt(assemble(full_form), "claude").user_prompt
        assert "<audience>Business / Management, Technique / Developpeurs</audience>" in user
        assert "<langue>anglais</langue>" in user
        order = [
            "<context>",
            "<examples>",
            "<input_description>",
            "<instructions>",
            "<task>",
            "<constraints>",
            "<error_recovery>",
            "<output_format>",
        ]
        positions = [user.index(tag) for tag in order]
        assert positions == sorted(positions)
        assert user.count("<example>") == 1
        assert user.endswith("</output_format>")

    def test_follow_up_answers_block(self, basic_form, registry):
        form = FormData(**{
            **basic_form.model_dump(),
            "follow_up_answers": [{"question": "Quel produit ?", "answer": "Une montre"}],
        })
        user = registry.adapt(assemble(form), "claude").user_prompt
        assert (
            "<clarifications>\n"
            "  <clarification>\n"
            "    <question>Quel produit ?</question>\n"
            "    <answer>Une montre</answer>\n"
            "  </clarification>\n"
            "</clarifications>"
        ) in user


class TestChatGPTAdapter:
    def test_rules_and_sections(self, full_form, registry):
        adapted = registry.adapt(assemble(full_form), "chatgpt")
        system = adapted.system_prompt
        assert "Regles :\n- Ton : formel\n" in system
        assert "- Public cible : Business / Management, Technique / Developpeurs\n" in system
        assert "- Pas de jargon\n- Maximum 500 mots\n" in system
        assert "Controle de verbosity :" in system
        assert "Gestion des erreurs :" in system

        user = adapted.user_prompt
        assert user.startswith("Domaine : finance\n\nExemples :\n\nExemple 1 :\n")
        assert user.endswith(
            "Reflechis etape par etape avant de repondre.\n\nAnalyse le rapport trimestriel"
        )

    def test_no_verbosity_for_creative_tasks(self, basic_form, registry):
        form = basic_form.model_copy(update={"target_models": ["chatgpt"]})
        adapted = registry.adapt(assemble(form), "chatgpt")
        assert "Controle de verbosity" not in adapted.system_prompt
        assert adapted.user_prompt == "Domaine : marketing\n\nWrite a tagline"


class TestGeminiAdapter:
    def test_grounding_and_anchor(self, full_form, registry):
        user = registry.adapt(assemble(full_form), "gemini").user_prompt
        assert user.startswith("Domaine : finance\n")
        assert "IMPORTANT : Reponds UNIQUEMENT" in user
        assert "D'apres le contexte fourni ci-dessus, execute la tache suivante :" in user
        assert user.endswith(
            "Format de reponse attendu : Markdown formate - "
            "reponse detaillee et approfondie - Langue : anglais"
        )

    def test_no_grounding_for_redaction(self, basic_form, registry):
        user = registry.adapt(assemble(basic_form), "gemini").user_prompt
        assert "IMPORTANT" not in user


class TestPerplexityAdapter:
    def test_examples_dropped_with_note(self, full_form, registry):
        adapted = registry.adapt(assemble(full_form), "perplexity")
        assert "CA en hausse" not in adapted.user_prompt
        assert "CA en hausse" not in adapted.system_prompt
        assert any("few-shot" in note for note in adapted.notes)
        assert adapted.user_prompt.startswith("[finance] Analyse le rapport trimestriel")

    def test_default_language(self, basic_form, registry):
        adapted = registry.adapt(assemble(basic_form), "perplexity")
        assert "- Langue : francais\n" in adapted.system_prompt
        assert not any("few-shot" in note for note in adapted.notes)


class TestMediaAdapters:
    def test_flux_prompt(self, image_form, registry):
        adapted = registry.adapt(assemble(image_form), "flux")
        assert adapted.user_prompt == (
            "a red fox in the snow, photorealistic photography, close-up shot, "
            "golden hour warm lighting, 8K, ultra detailed, sharp focus, high resolution"
        )
        assert "Negative prompt : blurry, distorted, low quality, watermark, text" in adapted.notes

    def test_stable_diffusion_custom_negative(self, image_form, registry):
        image = image_form.image.model_copy(update={"negative": "people", "quality": "standard"})
        form = image_form.model_copy(update={"image": image})
        adapted = registry.adapt(assemble(form), "stable-diffusion")
        assert adapted.user_prompt == (
            "a red fox in the snow, photorealistic photography, close-up shot, "
            "golden hour warm lighting"
        )
        assert "Negative prompt (a copier dans le champ dedie) : people" in adapted.notes

    def test_image_falls_back_to_task(self, registry):
        form = FormData(target_models=["flux"], task_description="un chat")
        assert registry.adapt(assemble(form), "flux").user_prompt == "un chat"

    def test_veo_prompt(self, registry):
        form = FormData(
            target_models=["veo"],
            task_type="video-gen",
            video={"subject": "a surfer", "shot": "drone", "style": "documentary", "tempo": "slow-motion"},
        )
        adapted = registry.adapt(assemble(form), "veo")
        assert adapted.user_prompt == (
            "Aerial drone shot, a surfer, documentary style, slow motion, 120fps, "
            "cinematic quality, professional cinematography"
        )
        assert adapted.system_prompt == "Prompt video (langage cinematographique)"


class TestGenericAdapter:
    def test_unknown_provider(self, basic_form, registry):
        adapted = registry.adapt(assemble(basic_form), "mistral")
        assert adapted.provider_id == "mistral"
        assert adapted.system_prompt == "Tu es un redacteur professionnel specialise en marketing."
        assert adapted.user_prompt == "Write a tagline"
        assert adapted.notes == [NO_OPTIMIZATION_NOTE]


class TestTotality:
    @pytest.mark.parametrize(
        "provider_id",
        ["claude", "chatgpt", "gemini", "perplexity", "flux", "stable-diffusion", "veo"],
    )
    def test_every_adapter_handles_an_empty_form(self, registry, provider_id):
        adapted = registry.adapt(assemble(FormData()), provider_id)
        assert adapted.provider_id == provider_id
        assert adapted.notes

    @pytest.mark.parametrize("provider_id", ["claude", "chatgpt", "gemini", "perplexity"])
    def test_no_empty_labelled_lines(self, registry, provider_id):
        form = FormData(target_models=[provider_id], task_type="redaction", task_description="x")
        adapted = registry.adapt(assemble(form), provider_id)
        text = adapted.system_prompt + "\n" + adapted.user_prompt
        for label in ("<domain></domain>", "<audience></audience>", "Ton : \n", "Domaine : \n"):
            assert label not in text

    def test_deterministic(self, full_form, registry):
        prompt = assemble(full_form)
        assert registry.adapt(prompt, "claude") == registry.adapt(prompt, "claude")


class TestAdapterRegistry:
    def test_default_providers(self, registry):
        ids = [meta.id for meta in registry.list_all()]
        assert ids == ["claude", "chatgpt", "gemini", "perplexity", "flux", "stable-diffusion", "veo"]

    def test_list_by_category(self, registry):
        assert [m.id for m in registry.list_by_category(ProviderCategory.IMAGE)] == [
            "flux",
            "stable-diffusion",
        ]
        assert [m.id for m in registry.list_by_category(ProviderCategory.VIDEO)] == ["veo"]

    def test_contains_and_fallback(self, registry):
        assert "claude" in registry
        assert "mistral" not in registry
        assert isinstance(registry.get("mistral"), GenericAdapter)
        assert registry.metadata_for("mistral").name == "mistral"

    def test_register_custom_adapter(self):
        class EchoAdapter(BaseAdapter):
            @property
            def metadata(self):
                return ProviderMetadata(id="echo", name="Echo", description="test")

            def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
                return self._result("", prompt.task, [])

        registry = AdapterRegistry()
        registry.register(EchoAdapter())
        registry.register(ClaudeAdapter())
        adapted = registry.adapt(assemble(FormData(task_description="hello")), "echo")
        assert adapted.user_prompt == "hello"
        assert len(registry.list_all()) == 2
