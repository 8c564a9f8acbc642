"""Prompt templates for field extraction.

Consumed by :class:`~prompt_factory.core.services.extraction.FieldExtractor`
to pre-fill the form from a free-text description of the user's need, or to
derive agent configuration fields for a given platform.
"""

EXTRACTION_SYSTEM_PROMPT: str = """Tu es un assistant d'analyse de texte. L'utilisateur decrit un besoin pour un prompt LLM.
Extrais les informations structurees du texte libre.

Retourne UNIQUEMENT un JSON valide avec ces champs (null si non mentionne) :
{
  "domain": "valeur parmi: marketing-digital, developpement-web, data-science, finance, droit, medecine, education, ecommerce, rh, redaction, design, immobilier, ou null",
  "audience": "valeur parmi: general, technical, business, academic, children, marketers, designers, students, executives, ou null",
  "tone": "valeur parmi: professionnel, decontracte, creatif, technique, pedagogique, formel, humoristique, empathique, autoritaire, narratif, ou null",
  "output_language": "valeur parmi: francais, english, espanol, deutsch, italiano, portugues, arabic, chinese, japanese, korean, ou null",
  "task_description": "description detaillee de la tache a accomplir, ou null",
  "input_description": "description des donnees d'entree si mentionnees, ou null",
  "output_format": "valeur parmi: texte, json, markdown, code, tableau, liste, email, autre, ou null",
  "constraints": "contraintes mentionnees (longueur, style, etc.), ou null",
  "persona": "role ou persona mentionne (ex: 'un developpeur senior Python'), ou null",
  "complexity": "valeur parmi: basic, intermediate, advanced, expert, ou null"
}

Regles :
- Extrais UNIQUEMENT ce qui est explicitement mentionne ou clairement implique
- Ne donne PAS de valeurs par defaut - utilise null si non mentionne
- Pour domain, audience, tone, output_language : utilise les valeurs exactes de la liste
- Si le texte mentionne une valeur hors liste, choisis la plus proche
- Retourne UNIQUEMENT le JSON, rien d'autre"""

EXTRACTION_USER_TEMPLATE: str = (
    "Modeles cibles : {models}\n"
    "Type de tache choisi : {task_type}\n"
    "\n"
    "Texte libre de l'utilisateur :\n"
    "---\n"
    "{free_text}\n"
    "---\n"
    "\n"
    "Extrais les informations structurees en JSON."
)

AGENT_SYSTEM_PROMPT: str = """Tu es un assistant specialise dans la creation d'agents IA (GPT ChatGPT, Projet Claude, Gem Gemini).
L'utilisateur decrit librement l'agent qu'il veut creer. Tu dois extraire les champs structures selon la plateforme ciblee.

Selon la plateforme, retourne UNIQUEMENT un JSON valide avec ces champs :

Pour "claude" (Projet Claude) :
{
  "working_on": "description du contexte de travail (Sur quoi travaillez-vous ?)",
  "trying_to_do": "objectif principal (Qu'essayez-vous de faire ?)",
  "instructions": "instructions detaillees et structurees pour le projet"
}

Pour "chatgpt" (GPT ChatGPT) :
{
  "name": "nom court et accrocheur pour le GPT",
  "description": "description concise (1-2 phrases) du GPT",
  "instructions": "instructions detaillees et structurees pour le GPT",
  "conversation_starters": ["amorce 1", "amorce 2", "amorce 3", "amorce 4"]
}

Pour "gemini" (Gem Gemini) :
{
  "name": "nom court et accrocheur pour le Gem",
  "description": "description concise (1-2 phrases) du Gem",
  "instructions": "instructions detaillees et structurees pour le Gem"
}

Regles :
- Genere des instructions RICHES et STRUCTUREES (sections, listes, regles claires)
- Les instructions doivent etre directement utilisables, pas un resume
- Pour les amorces de conversation (ChatGPT uniquement) : genere 4 phrases que l'utilisateur pourrait envoyer
- Si certaines infos ne sont pas explicites, deduis-les intelligemment du contexte
- Retourne UNIQUEMENT le JSON, rien d'autre"""

AGENT_USER_TEMPLATE: str = (
    "Plateforme cible : {platform} ({platform_name})\n"
    "\n"
    "Description libre de l'agent :\n"
    "---\n"
    "{free_text}\n"
    "---\n"
    "\n"
    'Extrais les champs structures pour la plateforme "{platform}" en JSON.'
)

AGENT_PLATFORM_NAMES: dict[str, str] = {
    "claude": "Projet Claude",
    "chatgpt": "GPT ChatGPT",
    "gemini": "Gem Gemini",
}
