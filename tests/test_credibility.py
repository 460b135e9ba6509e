# tests/test_credibility.py
"""
Unit tests for the credibility assessment flow.
"""

import pytest

from credcheck.errors import ConfigurationError, FetchError, ValidationError
from credcheck.services.credibility import assess_article
from fakes import FakeReader


class TestAssessArticle:
    def test_plain_text_skips_reader(self, calls, reader, llm_factory):
        result = assess_article("The sky is blue.", api_key="sk-test", reader=reader, llm_factory=llm_factory)

        assert result.score == 80
        assert calls == [("llm", "sk-test"), ("assess", "The sky is blue.")]

    def test_url_is_fetched_before_llm(self, calls, reader, llm_factory):
        assess_article(
            "  https://example.com/article ",
            api_key="sk-test",
            reader=reader,
            llm_factory=llm_factory,
        )

        assert calls == [
            ("fetch_text", "https://example.com/article"),
            ("llm", "sk-test"),
            ("assess", "Fetched article body."),
        ]

    def test_non_url_text_passed_verbatim(self, calls, reader, llm_factory):
        assess_article("  ftp://x  ", api_key="sk-test", reader=reader, llm_factory=llm_factory)

        assert calls[-1] == ("assess", "  ftp://x  ")

    @pytest.mark.parametrize("article", [None, ""])
    def test_missing_article(self, article, calls, reader, llm_factory):
        with pytest.raises(ValidationError) as exc:
            assess_article(article, api_key="sk-test", reader=reader, llm_factory=llm_factory)

        assert exc.value.status_code == 400
        assert exc.value.message == "Article text or URL is required"
        assert calls == []

    def test_article_checked_before_credential(self, reader, llm_factory):
        with pytest.raises(ValidationError):
            assess_article("", api_key=None, reader=reader, llm_factory=llm_factory)

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_missing_credential_makes_no_calls(self, api_key, calls, reader, llm_factory):
        with pytest.raises(ConfigurationError) as exc:
            assess_article("https://example.com/a", api_key=api_key, reader=reader, llm_factory=llm_factory)

        assert exc.value.status_code == 500
        assert exc.value.message == "OpenAI API key not configured"
        assert calls == []

    def test_fetch_failure_aborts_before_llm(self, calls, llm_factory):
        reader = FakeReader(calls, fail=True)

        with pytest.raises(FetchError):
            assess_article("https://example.com/a", api_key="sk-test", reader=reader, llm_factory=llm_factory)

        assert calls == [("fetch_text", "https://example.com/a")]

    def test_text_starting_with_url_passed_verbatim(self, calls, reader, llm_factory):
        article = "https://example.com is a site I read, and this article says the sky is green."

        assess_article(article, api_key="sk-test", reader=reader, llm_factory=llm_factory)

        assert calls == [("llm", "sk-test"), ("assess", article)]
