"""
Question data models.
Pydantic v2 models for LeetCode GraphQL payloads and the on-disk attribute records.
"""

from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


# ---------------------------------------------------------------------------
# GraphQL payloads (the `data` field of each response)
# ---------------------------------------------------------------------------

class QuestionMetadata(BaseModel):
    frontend_id: str = Field(alias="questionFrontendId")
    title: str
    difficulty: Difficulty

    @property
    def folder_name(self) -> str:
        return f"{self.frontend_id}_{self.title.replace(' ', '_')}"


class QuestionContent(BaseModel):
    content: str  # HTML


class TopicTag(BaseModel):
    name: str


class QuestionTopics(BaseModel):
    topic_tags: list[TopicTag] = Field(alias="topicTags")

    @property
    def names(self) -> list[str]:
        return [tag.name for tag in self.topic_tags]


class CodeSnippet(BaseModel):
    lang: str
    lang_slug: str = Field(alias="langSlug")
    code: str


class QuestionBoilerplate(BaseModel):
    code_snippets: list[CodeSnippet] = Field(alias="codeSnippets")

    def snippet_for(self, lang_slug: str) -> CodeSnippet | None:
        for snippet in self.code_snippets:
            if snippet.lang_slug == lang_slug:
                return snippet
        return None


QuestionT = TypeVar("QuestionT", bound=BaseModel)


class QuestionData(BaseModel, Generic[QuestionT]):
    question: QuestionT


# ---------------------------------------------------------------------------
# On-disk records
# ---------------------------------------------------------------------------

class QuestionAttributes(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    difficulty: Difficulty
    topics: list[str] = Field(default_factory=list)


class AttemptAttributes(BaseModel):
    success: bool = False
    perceived_trickiness: int = Field(default=1, ge=1, le=7)
    attempt_start_time: datetime
    attempt_end_time: datetime
    reflections: str = ""
