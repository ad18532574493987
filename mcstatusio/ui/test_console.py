from rich.console import Console

from mcstatusio.core.config_types import UIConfig
from mcstatusio.core.status import JavaStatus, BedrockStatus
from mcstatusio.ui.console import StatusConsole

def render(summary, config=None) -> str:
    console = Console(record=True, width=120)
    StatusConsole(config, console).show(summary)
    return console.export_text()

def test_online_java_render(online_java):
    text = render(JavaStatus(online_java).summary())

    assert "online" in text
    assert "demo.mcstatus.io:25565" in text
    assert "2/20" in text
    assert "Notch" in text
    assert "lithium" in text

def test_offline_render_hides_online_fields(offline_bedrock):
    text = render(BedrockStatus(offline_bedrock).summary())

    assert "offline" in text
    assert "blocked" in text
    assert "Players" not in text

def test_list_truncation(online_java):
    online_java["plugins"] = [{"name": f"plugin{i}"} for i in range(5)]
    text = render(JavaStatus(online_java).summary(), UIConfig(max_list_items=2))

    assert "plugin1" in text
    assert "plugin2" not in text
    assert "and 3 more" in text

def test_bracketed_server_text_is_literal(online_java):
    online_java["motd"]["clean"] = "Vote with [/vote] now"
    online_java["players"]["list"][0]["name_clean"] = "[red]"
    online_java["plugins"] = [{"name": "[bold]Essentials", "version": "[/i]2.20"}]
    text = render(JavaStatus(online_java).summary())

    assert "Vote with [/vote] now" in text
    assert "[red]" in text
    assert "[bold]Essentials" in text
    assert "[/i]2.20" in text

def test_show_error_is_literal():
    console = Console(record=True, width=120)
    StatusConsole(console=console).show_error("bad tag [/oops] in response")

    assert "bad tag [/oops] in response" in console.export_text()
