from typing import Callable, Iterator

import requests

from credcheck.config import Config, get_openai_key
from credcheck.services.llm_agent import LLMAgent
from credcheck.services.reader import Reader

__all__ = ["get_openai_key", "get_reader", "get_llm_factory"]


def get_reader() -> Iterator[Reader]:
    session = requests.Session()
    try:
        yield Reader(base_url=Config.READER_BASE_URL, session=session)
    finally:
        session.close()


def get_llm_factory() -> Callable[[str], LLMAgent]:
    return LLMAgent
