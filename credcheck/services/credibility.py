# credcheck/services/credibility.py
"""
Credibility assessment: resolve the article text (fetching it when the input
is a URL) and hand it to the LLM agent for the five-criterion rating.
"""

from typing import Callable, Optional
import logging

from credcheck.errors import ConfigurationError, ValidationError
from credcheck.models.schema import AssessmentResult
from credcheck.services.llm_agent import LLMAgent
from credcheck.services.reader import Reader
from credcheck.services.url_check import is_url

logger = logging.getLogger("credibility")


def assess_article(
    article: Optional[str],
    *,
    api_key: Optional[str],
    reader: Reader,
    llm_factory: Callable[[str], LLMAgent] = LLMAgent,
) -> AssessmentResult:
    if not article:
        raise ValidationError("Article text or URL is required")

    if not api_key:
        raise ConfigurationError("OpenAI API key not configured")

    # non-URL input is used verbatim, whatever its length
    text = article
    if is_url(article):
        text = reader.fetch_text(article.strip())
        logger.debug("fetched %d chars for %s", len(text), article.strip())

    return llm_factory(api_key).assess(text)
