# =============================================================================
# main.py  —  Interactive console for the Cosmos DB data assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py            (or the cosmos-agent script)
#
# WHAT HAPPENS:
#   1. Loads .env (COSMOSDB_URI, COSMOS_DATABASE_ID, OPENROUTER_API_KEY, ...)
#   2. Creates the Google ADK agent (agent/cosmos_agent.py), which starts the
#      MCP tool server as a subprocess
#   3. Reads questions from the terminal and streams the agent's answer,
#      printing each tool call as it happens
#   4. On exit, closes the MCP connection, which shuts the server (and its
#      Cosmos client) down
#
# The tool server itself does not need this file: any MCP client can run
# "python -m tools.mcp_server" directly.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads its API key from the environment when the agent is created.
load_dotenv()

from google.adk.runners import Runner  # noqa: E402
from google.adk.sessions import InMemorySessionService  # noqa: E402
from google.genai import types  # noqa: E402

from agent.cosmos_agent import create_agent  # noqa: E402

APP_NAME = "cosmos_data_assistant"
USER_ID = "console_user"


async def run_agent():
    """Run the data assistant interactively until the user quits."""
    print("=" * 70)
    print("  COSMOS DB DATA ASSISTANT")
    print("  Powered by Google ADK + LiteLLM + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about your containers, e.g. \"show active items in orders\"")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    try:
        while True:
            try:
                user_input = input("\n🧑 You: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\n\n👋 Goodbye!")
                break

            if user_input.lower() in ("quit", "exit", "q"):
                print("\n👋 Goodbye!")
                break

            if not user_input:
                continue

            user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

            print("\n🤖 Agent is thinking...\n")
            print("-" * 70)

            final_response = ""
            async for event in runner.run_async(
                user_id=USER_ID,
                session_id=session.id,
                new_message=user_message,
            ):
                if not (event.content and event.content.parts):
                    continue
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")
                    if getattr(part, "function_response", None):
                        print(f"  📦 {part.function_response.name} returned")

            print("-" * 70)
            if final_response:
                print(f"\n🤖 Agent:\n\n{final_response}")
            else:
                print("\n⚠️  No response generated. The agent may have encountered an error.")

            print("\n" + "=" * 70)
    finally:
        for toolset in agent.tools:
            close = getattr(toolset, "close", None)
            if close is not None:
                await close()


def main() -> None:
    asyncio.run(run_agent())


if __name__ == "__main__":
    main()
