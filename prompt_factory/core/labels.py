"""Fixed label tables used when rendering prompts.

Every lookup falls back to the raw value, so free-text entries typed by the
user flow through unchanged.
"""

from __future__ import annotations

ROLE_BY_TASK: dict[str, str] = {
    "redaction": "redacteur professionnel",
    "analyse": "analyste expert",
    "code": "developpeur senior",
    "extraction": "specialiste en extraction de donnees",
    "classification": "classificateur expert",
    "traduction": "traducteur professionnel",
    "qa-rag": "assistant factuel et precis",
    "agent": "agent IA autonome et methodique",
    "brainstorming": "consultant creatif",
    "image-gen": "artiste digital",
    "video-gen": "directeur de la photographie",
    "autre": "assistant specialise",
}
DEFAULT_ROLE = "assistant"

OUTPUT_FORMAT: dict[str, str] = {
    "texte": "Texte libre",
    "json": "JSON structure",
    "markdown": "Markdown formate",
    "code": "Code source",
    "liste": "Liste a puces",
    "tableau": "Tableau",
}

OUTPUT_LENGTH: dict[str, str] = {
    "court": "reponse concise (quelques phrases)",
    "moyen": "reponse de longueur moderee",
    "long": "reponse detaillee et approfondie",
    "illimite": "pas de limite de longueur",
}

DEFAULT_LANGUAGE = "francais"

AUDIENCE: dict[str, str] = {
    "general": "Grand public",
    "technical": "Technique / Developpeurs",
    "business": "Business / Management",
    "academic": "Academique / Recherche",
    "children": "Enfants / Debutants",
}

IMAGE_STYLE: dict[str, str] = {
    "photorealistic": "photorealistic photography",
    "digital-art": "digital art illustration",
    "oil-painting": "oil painting, textured brushstrokes",
    "watercolor": "watercolor painting, soft edges",
    "anime": "anime style, cel-shaded",
    "3d-render": "3D render, octane render",
    "pencil-sketch": "detailed pencil sketch, graphite",
    "vintage-photo": "vintage photograph, Kodak Portra 400, analog film grain",
    "minimalist": "minimalist, clean lines, simple",
    "surrealist": "surrealist, dreamlike, Salvador Dali inspired",
}

LIGHTING: dict[str, str] = {
    "natural": "natural lighting",
    "golden-hour": "golden hour warm lighting",
    "studio": "professional studio lighting",
    "dramatic": "dramatic chiaroscuro lighting",
    "neon": "neon lights, cyberpunk glow",
    "soft": "soft diffused lighting",
    "backlit": "backlit, rim lighting, silhouette",
}

COMPOSITION: dict[str, str] = {
    "rule-of-thirds": "rule of thirds composition",
    "centered": "centered symmetric composition",
    "close-up": "close-up shot",
    "wide-shot": "wide establishing shot",
    "birds-eye": "bird's eye view, top-down",
    "low-angle": "low angle, looking up",
    "macro": "macro photography, extreme close-up",
}

VIDEO_SHOT: dict[str, str] = {
    "tracking": "Slow tracking shot",
    "static": "Static locked camera",
    "drone": "Aerial drone shot",
    "close-up": "Close-up shot",
    "establishing": "Wide establishing shot",
    "pov": "First-person POV",
}

VIDEO_TEMPO: dict[str, str] = {
    "slow-motion": "slow motion, 120fps",
    "real-time": "real-time speed",
    "timelapse": "timelapse, accelerated",
    "quick-cuts": "quick cuts, fast editing",
    "continuous": "single continuous take, no cuts",
}

# Quality keywords appended to image prompts, per provider and quality level.
FLUX_QUALITY: dict[str, str] = {
    "high": "8K, ultra detailed, sharp focus, high resolution",
    "masterpiece": "masterpiece, best quality, 8K, ultra detailed, sharp focus, professional",
}

SD_QUALITY: dict[str, str] = {
    "high": "(high quality:1.2), (detailed:1.3), sharp focus, 8K",
    "masterpiece": (
        "(masterpiece:1.4), (best quality:1.4), (ultra detailed:1.3), "
        "sharp focus, 8K, professional photography"
    ),
}


def lookup(table: dict[str, str], value: str) -> str:
    """Return the label for *value*, or *value* itself when unmapped."""
    return table.get(value, value)


def audience_label(value: str) -> str:
    """Label every comma-separated audience entry independently."""
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return ", ".join(lookup(AUDIENCE, part) for part in parts)
