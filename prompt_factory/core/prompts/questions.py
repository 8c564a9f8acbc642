"""Prompt templates for clarifying questions.

Used by :class:`~prompt_factory.core.services.questions.QuestionGenerator`
to ask the LLM for 3 to 5 targeted questions about what the form is missing.
"""

QUESTIONS_SYSTEM_PROMPT: str = """Tu es un expert en prompt engineering. On te fournit les donnees d'un formulaire de creation de prompt.

Ton role est de poser 3 a 5 questions PERTINENTES et CIBLEES pour ameliorer ce prompt.

Regles strictes :
- Chaque question doit aider a affiner le prompt final
- Ne pose PAS de questions dont la reponse est deja dans les donnees fournies
- Adapte les questions au type de tache et au modele cible
- Pose des questions sur les aspects manquants : exemples specifiques, cas limites, contraintes non dites, preferences de style, structure attendue
- Langue : francais

Format de sortie OBLIGATOIRE : un JSON array d'objets avec ces champs :
- "id" : identifiant unique (string, ex: "q1", "q2")
- "question" : la question en francais
- "placeholder" : texte d'aide pour le champ de reponse
- "type" : "text" (input court), "textarea" (reponse longue), ou "choice" (options)
- Si type="choice", ajouter un champ "options" : tableau de strings

Retourne UNIQUEMENT le JSON, sans commentaire ni explication."""

QUESTIONS_USER_TEMPLATE: str = (
    "Donnees du formulaire :\n"
    "{summary}\n"
    "\n"
    "Genere les questions d'optimisation en JSON."
)

# Returned when the model's reply cannot be parsed.
FALLBACK_QUESTIONS: list[dict] = [
    {
        "id": "q1",
        "question": "Pouvez-vous donner un exemple concret du resultat attendu ?",
        "placeholder": "Decrivez un exemple...",
        "type": "textarea",
    },
    {
        "id": "q2",
        "question": "Y a-t-il des erreurs courantes que le LLM devrait eviter ?",
        "placeholder": "Ex: Ne pas inventer de sources...",
        "type": "text",
    },
    {
        "id": "q3",
        "question": "Quelle est la longueur ideale de la reponse ?",
        "placeholder": "Ex: 200-300 mots",
        "type": "text",
    },
]
