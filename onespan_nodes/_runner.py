"""
Runner — binds realm dependencies once, evaluates tree nodes many times.

    built = await runner("alpha", registry, HttpxApiClient())
    match built:
        case Ok(r):
            action = await r.process(CheckActivationNode, context)
            action.edge   # "pending", "activated", ...
        case Error(setup_error):
            ...           # fatal for the host
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kungfu import Result, Ok, Error

from onespan_nodes import graph as G
from onespan_nodes.client import ApiClient
from onespan_nodes.config import ServiceConfig, ServiceRegistry, resolve_service
from onespan_nodes.errors import SetupError
from onespan_nodes.log import get_logger
from onespan_nodes.nodes import Action, NodeOutcome, TreeContext, TreeNode

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Runner:
    """Realm-bound node evaluator."""

    service: ServiceConfig
    client: ApiClient

    async def process[O: NodeOutcome](
        self,
        node_type: type[TreeNode[O]],
        context: TreeContext,
        config: object | None = None,
    ) -> Action[O]:
        """
        One tree step.

        config defaults to the node's Config(); nodes without per-node
        attributes ignore it.
        """
        node_config = config if config is not None else node_type.Config()
        compiled = G.compile_node(node_type)
        node: TreeNode[O] = await compiled.run(
            (TreeContext, context),
            (ApiClient, self.client),
            (ServiceConfig, self.service),
            (type(node_config), node_config),
        )
        logger.debug("%s -> %s", node_type.__name__, node.action.edge)
        return node.action


async def runner(
    realm: str,
    registry: ServiceRegistry,
    client: ApiClient,
) -> Result[Runner, SetupError]:
    """Resolve the realm's service config and bind it with the client."""
    match await resolve_service(registry, realm):
        case Ok(service):
            return Ok(Runner(service=service, client=client))
        case Error(e):
            return Error(e)


def precompile(*node_types: type[Any]) -> None:
    """Build node agents ahead of the first tree step."""
    for node_type in node_types:
        G.compile_node(node_type)


__all__ = ("Runner", "runner", "precompile")
