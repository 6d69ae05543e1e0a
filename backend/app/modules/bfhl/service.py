import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.agents.answer.agent import AI_FAILURE_MESSAGE, AnswerAgent
from app.core.config import Settings
from app.core.errors import AiRequestFailedError, BadRequestError, BfhlError
from app.modules.bfhl import numeric
from app.modules.bfhl.schemas import BfhlResponse

logger = logging.getLogger(__name__)


class OperationKind(str, Enum):
    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


RECOGNIZED_KEYS = tuple(kind.value for kind in OperationKind)

NO_KEY_MESSAGE = f"Request must contain exactly one of: {', '.join(RECOGNIZED_KEYS)}"
MULTIPLE_KEYS_MESSAGE = "Request must contain exactly one key, found multiple"
NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"


@dataclass(frozen=True)
class Operation:
    kind: OperationKind
    value: Any


def select_operation(payload: Any) -> Operation:
    """Pick the single recognized key out of a request body.

    Unrecognized keys are ignored; the value itself is not inspected here,
    each operation validates its own input when it runs.
    """
    if not isinstance(payload, dict):
        raise BadRequestError(NOT_AN_OBJECT_MESSAGE)

    provided = [key for key in payload if key in RECOGNIZED_KEYS]
    if not provided:
        raise BadRequestError(NO_KEY_MESSAGE)
    if len(provided) > 1:
        raise BadRequestError(MULTIPLE_KEYS_MESSAGE)

    key = provided[0]
    return Operation(kind=OperationKind(key), value=payload[key])


AgentFactory = Callable[[], AnswerAgent]


def _build_agent(agent_factory: AgentFactory) -> AnswerAgent:
    try:
        return agent_factory()
    except Exception as exc:
        logger.error("Could not build answer agent: %s", exc)
        raise AiRequestFailedError(AI_FAILURE_MESSAGE) from exc


async def execute_operation(
    operation: Operation,
    agent_factory: AgentFactory,
    settings: Settings,
) -> Any:
    if operation.kind is OperationKind.FIBONACCI:
        return numeric.fibonacci(operation.value, max_terms=settings.FIBONACCI_MAX_TERMS)
    if operation.kind is OperationKind.PRIME:
        return numeric.filter_primes(operation.value)
    if operation.kind is OperationKind.LCM:
        return numeric.lcm(operation.value)
    if operation.kind is OperationKind.HCF:
        return numeric.hcf(operation.value)
    # The provider client is only built when a question is actually asked.
    agent = _build_agent(agent_factory)
    return await agent.answer(operation.value)


async def process_request(
    payload: Any,
    settings: Settings,
    agent_factory: AgentFactory,
) -> tuple[int, BfhlResponse]:
    official_email = settings.OFFICIAL_EMAIL
    try:
        operation = select_operation(payload)
        data = await execute_operation(operation, agent_factory, settings)
    except BfhlError as exc:
        logger.info("Rejected /bfhl request: %s", exc.message)
        return 400, BfhlResponse(is_success=False, official_email=official_email, error=exc.message)
    except Exception as exc:
        logger.exception("Unexpected error while handling /bfhl request")
        return 400, BfhlResponse(is_success=False, official_email=official_email, error=str(exc))

    return 200, BfhlResponse(is_success=True, official_email=official_email, data=data)
