"""Adapters for image and video generators.

Media prompts have no system/user split: ``user_prompt`` holds one
comma-separated descriptive string and ``system_prompt`` only a short
header describing how to use it.

Image structure: [Subject], [Style], [Composition], [Lighting], [Quality].
Video structure: [Shot], [Subject + action], [Style], [Tempo].
"""

from __future__ import annotations

from prompt_factory.core import labels
from prompt_factory.core.adapters.base import BaseAdapter, ProviderMetadata
from prompt_factory.core.models import (
    AdaptedPrompt,
    GenericPrompt,
    ImageData,
    ProviderCategory,
    VideoData,
)


def _compose_image(prompt: GenericPrompt, quality_table: dict[str, str]) -> str:
    image = prompt.form.image or ImageData()
    segments = [image.subject or prompt.task]
    if image.style:
        segments.append(labels.lookup(labels.IMAGE_STYLE, image.style))
    if image.composition:
        segments.append(labels.lookup(labels.COMPOSITION, image.composition))
    if image.lighting:
        segments.append(labels.lookup(labels.LIGHTING, image.lighting))
    quality = quality_table.get(image.quality or "standard")
    if quality:
        segments.append(quality)
    return ", ".join(segments)


class FluxAdapter(BaseAdapter):
    DEFAULT_NEGATIVE = "blurry, distorted, low quality, watermark, text"

    @property
    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(
            id="flux",
            name="FLUX",
            description="Image - Sujets detailles, style, negative prompts",
            category=ProviderCategory.IMAGE,
            color="#FF6B35",
            letter="F",
        )

    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        image = prompt.form.image or ImageData()
        negative = image.negative or self.DEFAULT_NEGATIVE
        notes = [
            "Format FLUX : [Sujet detaille], [Style], [Composition], [Eclairage], [Qualite]",
            f"Negative prompt : {negative}",
            "Conseil : Soyez tres specifique sur le sujet (race, pose, expression, vetements).",
            "Les mots-cles de qualite (8K, ultra detailed) ameliorent significativement le resultat.",
            "Iterative refinement : Commencez large, puis ajoutez style, puis technique.",
        ]
        return self._result(
            "Prompt positif (ce que vous voulez voir)",
            _compose_image(prompt, labels.FLUX_QUALITY),
            notes,
        )


class StableDiffusionAdapter(BaseAdapter):
    DEFAULT_NEGATIVE = (
        "blurry, distorted, extra limbs, extra fingers, deformed, bad anatomy, "
        "watermark, text, low quality, cartoon, anime"
    )

    @property
    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(
            id="stable-diffusion",
            name="Stable Diffusion",
            description="Image - Quality keywords, composition, lighting",
            category=ProviderCategory.IMAGE,
            color="#A855F7",
            letter="S",
        )

    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        image = prompt.form.image or ImageData()
        negative = image.negative or self.DEFAULT_NEGATIVE
        notes = [
            "Format SD : [Sujet], [Style], [Composition], [Eclairage], [Qualite avec poids]",
            f"Negative prompt (a copier dans le champ dedie) : {negative}",
            "Syntaxe poids : (mot:1.3) pour augmenter l'importance, max recommande 1.5.",
            "Conseil : Stable Diffusion repond tres bien aux mots-cles photographiques "
            "(Kodak, Fujifilm, etc.).",
            "Evitez les prompts trop longs (>75 tokens) - priorisez les elements importants.",
        ]
        return self._result(
            "Prompt positif (poids entre parentheses pour emphase)",
            _compose_image(prompt, labels.SD_QUALITY),
            notes,
        )


class VeoAdapter(BaseAdapter):
    CINEMATIC_SUFFIX = "cinematic quality, professional cinematography"

    @property
    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(
            id="veo",
            name="Veo (Google)",
            description="Video - Camera movement, cinematique, tempo",
            category=ProviderCategory.VIDEO,
            color="#EA4335",
            letter="V",
        )

    def format(self, prompt: GenericPrompt) -> AdaptedPrompt:
        video = prompt.form.video or VideoData()

        segments: list[str] = []
        if video.shot:
            segments.append(labels.lookup(labels.VIDEO_SHOT, video.shot))
        segments.append(video.subject or prompt.task)
        if video.style:
            segments.append(f"{video.style} style")
        if video.tempo:
            segments.append(labels.lookup(labels.VIDEO_TEMPO, video.tempo))
        segments.append(self.CINEMATIC_SUFFIX)

        notes = [
            "Format Veo : [Type plan], [Sujet + action], [Decor], [Style], [Tempo]",
            "Conseil : Decrivez le mouvement de camera avec du vocabulaire cinematographique.",
            "Les descriptions d'action doivent etre continues (pas de coupes implicites).",
            'Temporal : "slow motion" pour les details, "timelapse" pour montrer le passage '
            "du temps.",
            "Veo comprend le langage naturel - ecrivez comme un script de film.",
        ]
        return self._result(
            "Prompt video (langage cinematographique)",
            ", ".join(segments),
            notes,
        )
