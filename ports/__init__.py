from .llm import LLMClientPort
from .repos import SharesRepoPort

__all__ = [
    "LLMClientPort",
    "SharesRepoPort",
]
