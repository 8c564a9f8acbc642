"""Required-field checks and form update helpers.

The checks mirror the wizard's per-step predicates; callers decide what to do
with the issues (block navigation, return a 422, ...).  The update helpers
never modify the form they receive: each returns a new copy.
"""

from __future__ import annotations

from pydantic import BaseModel

from prompt_factory.core.models import (
    ClarifyingQuestion,
    Complexity,
    ExtractedFields,
    FollowUpAnswer,
    FormData,
    has_image_model,
    has_text_model,
    has_video_model,
)
from prompt_factory.utils.exceptions import FormValidationError
from prompt_factory.utils.logging import get_logger

logger = get_logger("core.validation")


class ValidationIssue(BaseModel):
    step: int
    field: str
    message: str


def validate_form(form: FormData) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    if not form.target_models:
        issues.append(ValidationIssue(
            step=1, field="target_models",
            message="Selectionnez au moins un modele.",
        ))

    if not form.task_type:
        issues.append(ValidationIssue(
            step=2, field="task_type",
            message="Choisissez un type de tache.",
        ))
    elif form.task_type == "autre" and not form.custom_task_type:
        issues.append(ValidationIssue(
            step=2, field="custom_task_type",
            message="Precisez le type de tache.",
        ))

    if has_text_model(form.target_models) and not form.task_description:
        issues.append(ValidationIssue(
            step=4, field="task_description",
            message="Decrivez la tache a accomplir.",
        ))
    if has_image_model(form.target_models) and not (form.image and form.image.subject):
        issues.append(ValidationIssue(
            step=4, field="image.subject",
            message="Decrivez le sujet de l'image.",
        ))
    if has_video_model(form.target_models) and not (form.video and form.video.subject):
        issues.append(ValidationIssue(
            step=4, field="video.subject",
            message="Decrivez le sujet de la video.",
        ))

    return issues


def ensure_valid(form: FormData) -> FormData:
    """Return *form* unchanged, or raise :class:`FormValidationError`."""
    issues = validate_form(form)
    if issues:
        logger.info("form_invalid", fields=[issue.field for issue in issues])
        raise FormValidationError(issues)
    return form


def apply_feedback(form: FormData, feedback: str) -> FormData:
    """Append user feedback to the constraints, on its own line."""
    feedback = feedback.strip()
    if not feedback:
        return form
    constraints = f"{form.constraints}\n{feedback}" if form.constraints else feedback
    return form.model_copy(update={"constraints": constraints}, deep=True)


def merge_extracted(form: FormData, extracted: ExtractedFields | None) -> FormData:
    """Fill empty form fields with extracted values.

    A field the user already filled is never overwritten.  For fields with a
    non-empty default (``output_format``, ``complexity``), "filled" means
    explicitly set when the form was built.
    """
    if extracted is None:
        return form

    updates: dict = {}
    for name, value in extracted.model_dump().items():
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        current = getattr(form, name)
        if name in form.model_fields_set and current:
            continue
        if name == "complexity":
            try:
                value = Complexity(value)
            except ValueError:
                logger.debug("extracted_complexity_ignored", value=value)
                continue
        else:
            value = value.strip()
        updates[name] = value

    if updates:
        logger.info("extracted_fields_merged", fields=sorted(updates))
    return form.model_copy(update=updates, deep=True)


def fold_answers(
    form: FormData,
    questions: list[ClarifyingQuestion],
    answers: dict[str, str],
) -> FormData:
    """Add answered clarifying questions to ``follow_up_answers``.

    Answers already on the form are kept.  A new answer to a question that
    is already there replaces the old answer in place; other answers are
    appended in question order.
    """
    follow_ups = [item.model_copy() for item in form.follow_up_answers]
    position = {item.question: i for i, item in enumerate(follow_ups)}
    for q in questions:
        answer = answers.get(q.id, "").strip()
        if not answer:
            continue
        item = FollowUpAnswer(question=q.question, answer=answer)
        if q.question in position:
            follow_ups[position[q.question]] = item
        else:
            position[q.question] = len(follow_ups)
            follow_ups.append(item)
    return form.model_copy(update={"follow_up_answers": follow_ups}, deep=True)
