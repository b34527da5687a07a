"""git-standup workflow integration using LangGraph for orchestration."""

import os
from typing import Optional

from langgraph.graph import END, StateGraph
from loguru import logger

from gitstandup.config import DigestConfig
from gitstandup.models.state import DigestState
from gitstandup.nodes.digest_renderer_node import render_node
from gitstandup.nodes.dispatcher import dispatch_node
from gitstandup.nodes.repository_resolver import resolve_node
from gitstandup.nodes.scan_node import scan_node


def _route_after_resolve(state: DigestState) -> str:
    """Stop early when there is nothing to scan."""
    if not state.get("repo_paths"):
        logger.info("No repositories found to scan.")
        return "empty"
    return "scan"


def create_workflow():
    """Create the git-standup workflow graph."""
    workflow = StateGraph(DigestState)

    # Add nodes
    workflow.add_node("resolve_node", resolve_node)
    workflow.add_node("scan_node", scan_node)
    workflow.add_node("render_node", render_node)
    workflow.add_node("dispatch_node", dispatch_node)

    workflow.set_entry_point("resolve_node")

    # Define edges
    workflow.add_conditional_edges("resolve_node", _route_after_resolve, {"scan": "scan_node", "empty": END})
    workflow.add_edge("scan_node", "render_node")
    workflow.add_edge("render_node", "dispatch_node")
    workflow.add_edge("dispatch_node", END)

    return workflow.compile()


def run_workflow(config: DigestConfig, cwd: Optional[str] = None) -> DigestState:
    """Run the git-standup workflow and return the final state."""
    initial_state: DigestState = {
        "digest_config": config,
        "cwd": cwd or os.getcwd(),
    }

    app = create_workflow()
    return app.invoke(initial_state)
