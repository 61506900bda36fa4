"""Tests for the console agent's system prompt."""
from datetime import date

from agent.prompt import get_data_assistant_prompt


def test_prompt_names_every_tool_and_error_string():
    prompt = get_data_assistant_prompt("appdb")
    for tool in ("get_item", "put_item", "update_item", "query_container"):
        assert tool in prompt
    assert "Error: Item not found" in prompt
    assert '"appdb"' in prompt
    assert date.today().isoformat() in prompt


def test_prompt_without_database():
    assert "the configured database" in get_data_assistant_prompt()
