# credcheck/services/llm_agent.py
"""
LLM wrapper for the credibility assessment.

Features:
 - Uses the official OpenAI Python SDK (chat.completions) with a fixed rubric prompt.
 - SDK retries are disabled; one request per assessment.
 - Strips markdown code fences from the reply before parsing it as JSON.
 - Malformed replies are recovered into a neutral fallback result, never raised.
"""

from typing import Optional, List, Dict, Any
import json
import logging
import re

import openai
from openai import OpenAI
from pydantic import ValidationError as ShapeError

from credcheck.config import Config
from credcheck.errors import UpstreamError
from credcheck.models.schema import AssessmentDetails, AssessmentResult

logger = logging.getLogger("llm_agent")

UPSTREAM_FAILED = "OpenAI API request failed"

SYSTEM_PROMPT = """You are an assistant that evaluates the credibility of articles. Assess the article based on the following criteria and provide the results strictly in JSON format:

1. **Ratio of Claims to Facts and Evidence**: Assess if the article is based on solid facts and evidence or on unproven claims.
2. **Direct vs. Indirect Evidence**: Determine whether the article uses direct evidence (quotes, data) or indirect sources.
3. **Independent Analysis**: Check if the article is based on independent analysis or relies on second-hand information.
4. **Headline and Purpose**: Evaluate if the headline and main content reflect verified facts.
5. **Incendiary Nature**: Consider the sensitivity and impact of the article, especially if based on unproven claims.

Provide the following output strictly in JSON format:

{
  "score": <number 0-100>,
  "rating": "<string>",
  "summary": "<string>",
  "details": {
    "claimsToEvidence": {"score": <number 0-100>, "html": "<html>"},
    "evidenceType": {"score": <number 0-100>, "html": "<html>"},
    "independentAnalysis": {"score": <number 0-100>, "html": "<html>"},
    "headlineConsistency": {"score": <number 0-100>, "html": "<html>"},
    "incendiaryNature": {"score": <number 0-100>, "html": "<html>"}
  }
}

Ensure each 'details' html starts with the section's title followed by a description, and strings are formatted for HTML interpretation."""

_FENCE_OPEN = re.compile(r"^```(?:json)?[ \t]*\n?", flags=re.I)
_FENCE_CLOSE = re.compile(r"\n?[ \t]*```$")


def strip_code_fence(content: str) -> str:
    text = (content or "").strip()
    text = _FENCE_OPEN.sub("", text)
    text = _FENCE_CLOSE.sub("", text)
    return text.strip()


def fallback_result(raw: str) -> AssessmentResult:
    return AssessmentResult(
        score=50,
        rating="Unable to parse",
        summary=raw or "",
        details=AssessmentDetails.uniform(score=50, html=""),
    )


def parse_assessment(content: str) -> AssessmentResult:
    """
    Parse a model reply into an AssessmentResult.
    Anything that is not a JSON object of the expected shape yields the fallback.
    """
    try:
        data = json.loads(strip_code_fence(content))
        return AssessmentResult.model_validate(data)
    except (ValueError, TypeError, ShapeError) as e:
        logger.warning("could not parse model reply: %s", str(e)[:300])
        return fallback_result(content)


def _parse_model_response(resp: Any) -> str:
    """
    Pull the first completion's text out of a chat response.
    Works with SDK objects (resp.choices[0].message.content) and plain dicts.
    A reply without a first message is an upstream failure, not model output.
    """
    choices = resp.get("choices") if isinstance(resp, dict) else getattr(resp, "choices", None)
    if not choices:
        logger.error("chat completion returned no choices")
        raise UpstreamError(UPSTREAM_FAILED)
    first = choices[0]
    msg = first.get("message") if isinstance(first, dict) else getattr(first, "message", None)
    if msg is None:
        logger.error("chat completion choice has no message")
        raise UpstreamError(UPSTREAM_FAILED)
    if isinstance(msg, dict):
        return msg.get("content") or ""
    return getattr(msg, "content", None) or ""


def _upstream_message(err: openai.APIStatusError) -> str:
    body = err.body
    if isinstance(body, dict):
        # the SDK unwraps {"error": {...}} but be tolerant of either shape
        inner = body.get("error", body)
        if isinstance(inner, dict) and inner.get("message"):
            return str(inner["message"])
    return UPSTREAM_FAILED


class LLMAgent:
    def __init__(self, api_key: str, model: Optional[str] = None, client: Any = None):
        self.model = model or Config.OPENAI_MODEL
        self.client = client or OpenAI(api_key=api_key, max_retries=0)

    def _call_model(self, messages: List[Dict[str, str]]) -> str:
        try:
            resp = self.client.chat.completions.create(model=self.model, messages=messages)
        except openai.APIStatusError as e:
            logger.error("chat.completions.create returned %s: %s", e.status_code, str(e)[:300])
            raise UpstreamError(_upstream_message(e)) from e
        except openai.APIError as e:
            logger.error("chat.completions.create failed: %s", str(e)[:300])
            raise UpstreamError(UPSTREAM_FAILED) from e
        return _parse_model_response(resp)

    def assess(self, text: str) -> AssessmentResult:
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": f"Here is the article to assess: {text}"},
        ]
        return parse_assessment(self._call_model(messages))
