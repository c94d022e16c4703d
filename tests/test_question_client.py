"""Unit tests for question_client.py against a fake HTTP transport."""

import pytest
import requests

from errors import RemoteDecodeFailure, RemoteTransportFailure
from question_client import (
    BOILERPLATE_QUERY,
    CONTENT_QUERY,
    METADATA_QUERY,
    TOPICS_QUERY,
    QuestionClient,
)
from question_model import Difficulty, QuestionMetadata


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeHTTP:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def make_client(payload=None, status_code=200, error=None) -> tuple[QuestionClient, FakeHTTP]:
    http = FakeHTTP(FakeResponse(payload, status_code), error)
    client = QuestionClient(url="https://example.test/graphql", timeout=5, http=http)
    return client, http


def question(**fields) -> dict:
    return {"data": {"question": fields}}


# ---------------------------------------------------------------------------
# Request shape
# ---------------------------------------------------------------------------

class TestRequest:
    def test_posts_query_and_variables(self):
        client, http = make_client(question(content="<p>hi</p>"))
        client.fetch_content("two-sum")

        assert len(http.calls) == 1
        call = http.calls[0]
        assert call["url"] == "https://example.test/graphql"
        assert call["timeout"] == 5
        assert call["json"] == {
            "query": CONTENT_QUERY,
            "variables": {"titleSlug": "two-sum"},
        }

    @pytest.mark.parametrize("method, document", [
        ("fetch_metadata", METADATA_QUERY),
        ("fetch_content", CONTENT_QUERY),
        ("fetch_topics", TOPICS_QUERY),
        ("fetch_boilerplate", BOILERPLATE_QUERY),
    ])
    def test_each_operation_uses_its_document(self, method, document):
        client, http = make_client({"data": {"question": {}}})
        with pytest.raises(RemoteDecodeFailure):
            getattr(client, method)("two-sum")
        assert http.calls[0]["json"]["query"] == document


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

class TestDecode:
    def test_metadata(self):
        client, _ = make_client(question(
            questionFrontendId="1", title="Two Sum", difficulty="Easy",
        ))
        meta = client.fetch_metadata("two-sum")
        assert isinstance(meta, QuestionMetadata)
        assert meta.frontend_id == "1"
        assert meta.title == "Two Sum"
        assert meta.difficulty is Difficulty.EASY

    def test_topics_keep_server_order_and_duplicates(self):
        client, _ = make_client(question(topicTags=[
            {"name": "Hash Table"}, {"name": "Array"}, {"name": "Array"},
        ]))
        topics = client.fetch_topics("two-sum")
        assert topics.names == ["Hash Table", "Array", "Array"]

    def test_boilerplate(self):
        client, _ = make_client(question(codeSnippets=[
            {"lang": "C++", "langSlug": "cpp", "code": "class Solution {};"},
            {"lang": "Python3", "langSlug": "python3", "code": "class Solution:\n    pass\n"},
        ]))
        boilerplate = client.fetch_boilerplate("two-sum")
        assert [s.lang_slug for s in boilerplate.code_snippets] == ["cpp", "python3"]
        assert boilerplate.snippet_for("python3").code == "class Solution:\n    pass\n"
        assert boilerplate.snippet_for("rust") is None

    def test_first_snippet_wins_for_repeated_slug(self):
        client, _ = make_client(question(codeSnippets=[
            {"lang": "Python3", "langSlug": "python3", "code": "# first\n"},
            {"lang": "Python3", "langSlug": "python3", "code": "# second\n"},
        ]))
        boilerplate = client.fetch_boilerplate("two-sum")
        assert boilerplate.snippet_for("python3").code == "# first\n"

    def test_missing_field(self):
        client, _ = make_client(question(title="Two Sum", difficulty="Easy"))
        with pytest.raises(RemoteDecodeFailure):
            client.fetch_metadata("two-sum")

    def test_type_mismatch(self):
        client, _ = make_client(question(
            questionFrontendId=1, title="Two Sum", difficulty="Easy",
        ))
        with pytest.raises(RemoteDecodeFailure):
            client.fetch_metadata("two-sum")

    def test_unknown_difficulty(self):
        client, _ = make_client(question(
            questionFrontendId="1", title="Two Sum", difficulty="Trivial",
        ))
        with pytest.raises(RemoteDecodeFailure):
            client.fetch_metadata("two-sum")

    def test_null_question(self):
        client, _ = make_client({"data": {"question": None}})
        with pytest.raises(RemoteDecodeFailure):
            client.fetch_content("no-such-question")

    def test_graphql_errors_reported(self):
        client, _ = make_client({
            "data": None,
            "errors": [{"message": "That question does not exist."}],
        })
        with pytest.raises(RemoteDecodeFailure) as exc:
            client.fetch_content("nope")
        assert "That question does not exist." in str(exc.value)

    def test_graphql_errors_as_string(self):
        client, _ = make_client({"data": None, "errors": "rate limited"})
        with pytest.raises(RemoteDecodeFailure) as exc:
            client.fetch_content("two-sum")
        assert str(exc.value) == "GraphQL returned no data: rate limited"

    def test_missing_data(self):
        client, _ = make_client({"something": "else"})
        with pytest.raises(RemoteDecodeFailure):
            client.fetch_content("two-sum")

    def test_non_object_body(self):
        client, _ = make_client(["not", "an", "object"])
        with pytest.raises(RemoteDecodeFailure):
            client.fetch_content("two-sum")

    def test_body_not_json(self):
        client, _ = make_client(ValueError("Expecting value"))
        with pytest.raises(RemoteDecodeFailure):
            client.fetch_content("two-sum")


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class TestTransport:
    def test_connection_error(self):
        client, _ = make_client(error=requests.ConnectionError("refused"))
        with pytest.raises(RemoteTransportFailure) as exc:
            client.fetch_metadata("two-sum")
        assert isinstance(exc.value.__cause__, requests.ConnectionError)

    def test_timeout(self):
        client, _ = make_client(error=requests.Timeout("slow"))
        with pytest.raises(RemoteTransportFailure):
            client.fetch_metadata("two-sum")

    def test_non_2xx(self):
        client, _ = make_client({"data": None}, status_code=502)
        with pytest.raises(RemoteTransportFailure):
            client.fetch_metadata("two-sum")

    def test_not_retried(self):
        client, http = make_client(error=requests.ConnectionError("refused"))
        with pytest.raises(RemoteTransportFailure):
            client.fetch_topics("two-sum")
        assert len(http.calls) == 1
