"""Query and QueryHandler base classes."""

from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Query(BaseModel): ...


class Result(BaseModel): ...


C = TypeVar("C", bound=Query)
R = TypeVar("R", bound=Result)

# Unbound async handler method: (self, cmd) -> Coroutine -> Result
_HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def _wrap_query_run_with_logging(original_run: _HandlerMethod) -> _HandlerMethod:
    """Wrap the run() method with a debug trace of the query being served."""

    @wraps(original_run)
    async def logged_run(self: Any, cmd: Any) -> Any:
        logger.debug("Running %s with %r", type(self).__name__, cmd)
        return await original_run(self, cmd)

    return logged_run


@dataclass_transform()
class _QueryHandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = _wrap_query_run_with_logging(original_run)

        return cls


class QueryHandler(Generic[C, R], metaclass=_QueryHandlerMeta):
    """Base class for query handlers. Subclasses are automatically dataclasses.

        class MyHandler(QueryHandler[MyQuery, MyResult]):
            trip_service: TripService

            async def run(self, cmd: MyQuery) -> MyResult: ...
    """

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
