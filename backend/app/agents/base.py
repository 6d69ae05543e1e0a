from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.core.llm.base import BaseLLM


@dataclass
class AgentResult:
    output: str
    metadata: dict = field(default_factory=dict)


class BaseAgent(ABC):
    def __init__(self, llm: BaseLLM):
        self.llm = llm

    @abstractmethod
    async def execute(self, input_text: str, context: dict | None = None) -> AgentResult:
        ...
