"""Tests for preview, raw text, filenames, token estimates and diffs."""
from prompt_factory.core.assembler import assemble
from prompt_factory.core.models import AdaptedPrompt
from prompt_factory.core.rendering import (
    diff_prompts,
    estimate_tokens,
    export_filename,
    raw_prompt,
    render_preview,
)


class TestRawAndTokens:
    def test_raw_prompt(self):
        adapted = AdaptedPrompt(provider_id="claude", system_prompt="SYS", user_prompt="USER")
        assert raw_prompt(adapted) == (
            "=== SYSTEM PROMPT ===\n\nSYS\n\n=== USER PROMPT ===\n\nUSER"
        )

    def test_estimate_tokens(self):
        assert estimate_tokens("") == 0
        assert estimate_tokens("abcd") == 1
        assert estimate_tokens("abcde") == 2

    def test_export_filenames(self):
        assert export_filename("claude") == "prompt-claude.md"
        assert export_filename("claude", "original") == "prompt-original-claude.md"
        assert export_filename("veo", "optimized") == "prompt-optimise-veo.md"


class TestPreview:
    def test_text_provider_has_both_sections(self, basic_form, registry):
        adapted = registry.adapt(assemble(basic_form), "claude")
        preview = render_preview(adapted, registry.metadata_for("claude"))
        assert preview.startswith("# Prompt optimise pour Claude\n")
        assert "## System Prompt\n\n```\nTu es un redacteur professionnel" in preview
        assert "## User Prompt\n\n```\n<context>" in preview
        assert "## Notes et recommandations" in preview
        assert "> Les balises XML permettent" in preview

    def test_media_provider_has_single_section(self, image_form, registry):
        adapted = registry.adapt(assemble(image_form), "flux")
        preview = render_preview(adapted, registry.metadata_for("flux"))
        assert "## Prompt\n\n```\na red fox in the snow" in preview
        assert "## System Prompt" not in preview

    def test_no_notes_section_without_notes(self, registry):
        adapted = AdaptedPrompt(provider_id="claude", system_prompt="a", user_prompt="b")
        preview = render_preview(adapted, registry.metadata_for("claude"))
        assert "Notes" not in preview


class TestDiff:
    def test_no_optimized_variant(self):
        adapted = AdaptedPrompt(provider_id="claude", system_prompt="a", user_prompt="b")
        assert diff_prompts(adapted) == []

    def test_optimized_copy_keeps_original(self):
        adapted = AdaptedPrompt(provider_id="claude", system_prompt="a", user_prompt="b")
        optimized = adapted.with_optimized("better prompt", ["note"])
        assert adapted.optimized is None
        assert optimized.system_prompt == "a"
        assert optimized.optimized.text == "better prompt"

        diff = diff_prompts(optimized)
        assert diff[0] == "--- prompt-original-claude.md"
        assert diff[1] == "+++ prompt-optimise-claude.md"
        assert "+better prompt" in diff
        assert "-=== SYSTEM PROMPT ===" in diff
