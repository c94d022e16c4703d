"""
TOML rendering for question_attributes.toml and attempt_attributes.toml.

The attempt file is built as a tomlkit document and annotated in place, so
the trickiness scale comment and the multi-line reflections block survive as
valid TOML.
"""

import tomlkit

from question_model import AttemptAttributes, QuestionAttributes

TRICKINESS_COMMENT = "7-point scale: 1 is brain-dead, 7 is diabolical"
REFLECTIONS_COMMENT = "This is multiline!"


def dump_question_attributes(attrs: QuestionAttributes) -> str:
    doc = tomlkit.document()
    for key, value in attrs.model_dump(mode="json").items():
        doc[key] = value
    return tomlkit.dumps(doc)


def dump_attempt_attributes(attrs: AttemptAttributes) -> str:
    values = attrs.model_dump()

    reflections = tomlkit.string(values["reflections"], multiline=True)
    reflections.comment(REFLECTIONS_COMMENT)
    values["reflections"] = reflections

    doc = tomlkit.document()
    for key, value in values.items():
        doc[key] = value
    doc["perceived_trickiness"].comment(TRICKINESS_COMMENT)

    return tomlkit.dumps(doc)


def load_attempt_attributes(text: str) -> AttemptAttributes:
    return AttemptAttributes.model_validate(tomlkit.parse(text).unwrap())
