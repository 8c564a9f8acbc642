"""Text renderings of adapted prompts: Markdown preview, raw copy text,
export filenames, token estimates and original/optimized diffs.
"""

from __future__ import annotations

import difflib
import math

from jinja2 import Environment

from prompt_factory.core.adapters.base import ProviderMetadata
from prompt_factory.core.models import AdaptedPrompt, ProviderCategory

PREVIEW_TEMPLATE = """\
# Prompt optimise pour {{ name }}

{% if is_media %}
## Prompt

```
{{ user_prompt }}
```

{% else %}
## System Prompt

```
{{ system_prompt }}
```

## User Prompt

```
{{ user_prompt }}
```

{% endif %}
{% if notes %}
## Notes et recommandations

{% for note in notes %}
> {{ note }}
>
{% endfor %}
{% endif %}
"""

_env = Environment(trim_blocks=True, keep_trailing_newline=True, autoescape=False)
_preview = _env.from_string(PREVIEW_TEMPLATE)

_EXPORT_PREFIX: dict[str, str] = {
    "current": "prompt",
    "original": "prompt-original",
    "optimized": "prompt-optimise",
}


def render_preview(adapted: AdaptedPrompt, metadata: ProviderMetadata) -> str:
    """Markdown document shown in the preview panel."""
    return _preview.render(
        name=metadata.name,
        is_media=metadata.category in (ProviderCategory.IMAGE, ProviderCategory.VIDEO),
        system_prompt=adapted.system_prompt,
        user_prompt=adapted.user_prompt,
        notes=adapted.notes,
    )


def raw_prompt(adapted: AdaptedPrompt) -> str:
    """Plain text used for copy/download and sent to the rewrite service."""
    return (
        "=== SYSTEM PROMPT ===\n\n"
        f"{adapted.system_prompt}\n\n"
        "=== USER PROMPT ===\n\n"
        f"{adapted.user_prompt}"
    )


def estimate_tokens(text: str) -> int:
    """Rough token count at ~4 characters per token."""
    if not text:
        return 0
    return math.ceil(len(text) / 4)


def export_filename(provider_id: str, variant: str = "current") -> str:
    prefix = _EXPORT_PREFIX.get(variant, "prompt")
    return f"{prefix}-{provider_id}.md"


def diff_prompts(adapted: AdaptedPrompt) -> list[str]:
    """Unified diff between the raw original and its optimized variant.

    Returns an empty list when no optimized variant is attached.
    """
    if adapted.optimized is None:
        return []
    return list(
        difflib.unified_diff(
            raw_prompt(adapted).splitlines(),
            adapted.optimized.text.splitlines(),
            fromfile=export_filename(adapted.provider_id, "original"),
            tofile=export_filename(adapted.provider_id, "optimized"),
            lineterm="",
        )
    )
