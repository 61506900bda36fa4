# =============================================================================
# agent/cosmos_agent.py  —  Google ADK agent wired to the Cosmos DB tools
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent used by main.py: an LLM (through LiteLlm) plus an
#   MCP toolset that launches our tool server as a subprocess.
#
#   ┌───────────────────────────┐   stdio (MCP)   ┌──────────────────────┐
#   │  ADK Agent                │ ──────────────▶ │  tools/mcp_server.py │
#   │  prompt + LiteLlm model   │ ◀────────────── │  get_item, put_item, │
#   └───────────────────────────┘                 │  update_item, query  │
#                                                 └──────────┬───────────┘
#                                                            ▼
#                                                     Azure Cosmos DB
#
# MCP CONNECTION:
#   ADK starts "uv run python -m tools.mcp_server" from the project root and
#   discovers the tools over stdin/stdout.  The subprocess gets the Cosmos
#   variables from this process's environment; MCP's stdio client does not
#   forward the full environment on its own.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_data_assistant_prompt
from core.config import env

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

COSMOS_TOOLS = ["get_item", "put_item", "update_item", "query_container"]

_FORWARDED_VARIABLES = (
    "COSMOSDB_URI",
    "COSMOSDB_KEY",
    "COSMOS_DATABASE_ID",
    "LOG_LEVEL",
    # DefaultAzureCredential sources
    "AZURE_CLIENT_ID",
    "AZURE_TENANT_ID",
    "AZURE_CLIENT_SECRET",
    "AZURE_FEDERATED_TOKEN_FILE",
    "IDENTITY_ENDPOINT",
    "IDENTITY_HEADER",
    "MSI_ENDPOINT",
)


def server_environment() -> dict[str, str]:
    """Environment for the tool server subprocess."""
    forwarded = {name: os.environ[name] for name in _FORWARDED_VARIABLES if os.environ.get(name)}
    forwarded["PATH"] = os.environ.get("PATH", "")
    if os.environ.get("HOME"):
        forwarded["HOME"] = os.environ["HOME"]
    return forwarded


def create_agent() -> Agent:
    """Create the Cosmos DB data assistant agent.

    The model comes from AGENT_MODEL (a LiteLLM model string; OpenRouter by
    default, which reads OPENROUTER_API_KEY from the environment).

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
            env=server_environment(),
        ),
        tool_filter=COSMOS_TOOLS,
    )

    agent = Agent(
        name="cosmos_data_assistant",
        model=LiteLlm(model=env("AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_data_assistant_prompt(env("COSMOS_DATABASE_ID")),
        tools=[mcp_tools],
    )

    return agent
