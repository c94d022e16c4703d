"""
LeetCode GraphQL client.
Four read-only queries, each keyed by a question's title slug.
"""

import logging
import os
from typing import Any, Optional

import requests
from pydantic import ValidationError

from errors import RemoteDecodeFailure, RemoteTransportFailure
from question_model import (
    QuestionBoilerplate,
    QuestionContent,
    QuestionData,
    QuestionMetadata,
    QuestionT,
    QuestionTopics,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

GRAPHQL_URL = os.getenv("GRINDSET_GRAPHQL_URL", "https://leetcode.com/graphql")
HTTP_TIMEOUT = float(os.getenv("GRINDSET_HTTP_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Query documents
# ---------------------------------------------------------------------------

METADATA_QUERY = """
query questionTitle($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
        questionFrontendId
        title
        difficulty
    }
}
"""

CONTENT_QUERY = """
query questionContent($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
        content
    }
}
"""

TOPICS_QUERY = """
query singleQuestionTopicTags($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
        topicTags {
            name
        }
    }
}
"""

BOILERPLATE_QUERY = """
query questionEditorData($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
        codeSnippets {
            lang
            langSlug
            code
        }
    }
}
"""


class QuestionClient:
    """
    Posts GraphQL documents to a single endpoint and decodes `data.question`.

    `http` is anything with a requests-style `post()`; the `requests` module
    itself by default. Nothing is retried.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Any = requests,
    ):
        self.url = url or GRAPHQL_URL
        self.timeout = timeout if timeout is not None else HTTP_TIMEOUT
        self.http = http

    def query(
        self,
        document: str,
        variables: dict[str, Any],
        model: type[QuestionT],
    ) -> QuestionT:
        logger.debug(f"POST {self.url} variables={variables}")
        try:
            resp = self.http.post(
                self.url,
                json={"query": document, "variables": variables},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise RemoteTransportFailure(f"Request to {self.url} failed: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise RemoteDecodeFailure(f"Response from {self.url} is not JSON: {e}") from e

        if not isinstance(payload, dict) or payload.get("data") is None:
            raise RemoteDecodeFailure(_describe_missing_data(payload))

        try:
            decoded = QuestionData[model].model_validate(payload["data"])
        except ValidationError as e:
            raise RemoteDecodeFailure(
                f"Unexpected shape for {model.__name__}: {e}"
            ) from e
        return decoded.question

    def _question(self, document: str, title_slug: str, model: type[QuestionT]) -> QuestionT:
        return self.query(document, {"titleSlug": title_slug}, model)

    def fetch_metadata(self, title_slug: str) -> QuestionMetadata:
        return self._question(METADATA_QUERY, title_slug, QuestionMetadata)

    def fetch_content(self, title_slug: str) -> QuestionContent:
        return self._question(CONTENT_QUERY, title_slug, QuestionContent)

    def fetch_topics(self, title_slug: str) -> QuestionTopics:
        return self._question(TOPICS_QUERY, title_slug, QuestionTopics)

    def fetch_boilerplate(self, title_slug: str) -> QuestionBoilerplate:
        return self._question(BOILERPLATE_QUERY, title_slug, QuestionBoilerplate)


def _describe_missing_data(payload: Any) -> str:
    errors = payload.get("errors") if isinstance(payload, dict) else None
    if errors:
        if not isinstance(errors, list):
            errors = [errors]
        messages = "; ".join(
            str(err.get("message", err)) if isinstance(err, dict) else str(err)
            for err in errors
        )
        return f"GraphQL returned no data: {messages}"
    return "GraphQL response has no `data` field"
