"""
Graph — tree nodes as nodnod nodes.

A tree node declares what it needs in __compose__; the graph injects it
by type:

    @G.node
    class CheckSessionStatusNode:
        @classmethod
        async def __compose__(
            cls, context: TreeContext, client: ApiClient, service: ServiceConfig
        ) -> "CheckSessionStatusNode":
            ...

    compiled = G.compile_node(CheckSessionStatusNode)
    node = await compiled.run((TreeContext, ctx), (ApiClient, http), (ServiceConfig, svc))
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from typing import Any, cast
from collections.abc import Callable, Coroutine

from nodnod import Scope, Value, EventLoopAgent, Node
from nodnod import scalar_node as node

type Injection = tuple[type[Any], Any]


# ═══════════════════════════════════════════════════════════════════════════════
# TypedScope
# ═══════════════════════════════════════════════════════════════════════════════


class TypedScope:
    """Type-safe wrapper around nodnod.Scope."""

    __slots__ = ("_scope",)

    def __init__(self, detail: str = "scope") -> None:
        self._scope = Scope(detail=detail)

    @property
    def inner(self) -> Scope:
        return self._scope

    def inject[T](self, typ: type[T], value: T) -> TypedScope:
        self._scope.push(Value(typ, value))
        return self

    def get[T](self, typ: type[T]) -> T:
        result = self._scope.get(typ)
        if result is None:
            raise KeyError(f"{typ.__name__} not found in scope")
        return cast(T, result.value)

    async def __aenter__(self) -> TypedScope:
        await self._scope.__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._scope.__aexit__(*args)


# ═══════════════════════════════════════════════════════════════════════════════
# Compiled: one agent per node type, reused for every tree step
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class Compiled[T]:
    """Pre-built agent for a tree node."""

    _target: type[T]
    _agent: EventLoopAgent

    @property
    def target(self) -> type[T]:
        return self._target

    async def run(self, *injections: Injection) -> T:
        """Evaluate the node with the given (type, value) injections."""
        async with TypedScope(detail=f"tree:{self._target.__name__}") as scope:
            for typ, value in injections:
                scope.inject(typ, value)

            run_method = cast(
                Callable[[Scope, dict[type[Any], Scope]], Coroutine[Any, Any, None]],
                getattr(self._agent, "run"),
            )
            await run_method(scope.inner, {})

            return scope.get(self._target)


@cache
def compile_node[T](target: type[T]) -> Compiled[T]:
    """Build (once per node type) the agent that evaluates target."""
    all_nodes: set[type[Node[Any, Any]]] = {cast(type[Node[Any, Any]], target)}
    agent = EventLoopAgent.build(all_nodes)
    return Compiled(_target=target, _agent=agent)


__all__ = ("node", "Injection", "TypedScope", "Compiled", "compile_node")
