import json
import pytest

ONLINE_JAVA = {
    "online": True,
    "host": "demo.mcstatus.io",
    "port": 25565,
    "ip_address": "192.0.2.10",
    "eula_blocked": False,
    "retrieved_at": 1700000000000,
    "expires_at": 1700000060000,
    "srv_record": {"host": "mc.demo.mcstatus.io", "port": 25566},
    "version": {
        "name_raw": "§fPaper 1.20.4",
        "name_clean": "Paper 1.20.4",
        "name_html": "<span><span style=\"color: #ffffff;\">Paper 1.20.4</span></span>",
        "protocol": 765
    },
    "players": {
        "online": 2,
        "max": 20,
        "list": [
            {"uuid": "069a79f4-44e9-4726-a5be-fca90e38aaf5", "name_raw": "§aNotch", "name_clean": "Notch"},
            {"uuid": "853c80ef-3c37-49fd-aa49-938b674adae6", "name_raw": "jeb_", "name_clean": "jeb_"}
        ]
    },
    "motd": {
        "raw": "§6A Minecraft Server",
        "clean": "A Minecraft Server",
        "html": "<span style=\"color: #FFAA00;\">A Minecraft Server</span>"
    },
    "icon": "data:image/png;base64,iVBORw0KGgo=",
    "mods": [
        {"name": "fabric-api", "version": "0.92.0"},
        {"name": "lithium", "version": "0.12.1"}
    ],
    "software": "Paper",
    "plugins": [
        {"name": "A"},
        {"name": "B", "version": "1.0"}
    ]
}

OFFLINE_JAVA = {
    "online": False,
    "host": "down.example.com",
    "port": 25565,
    "ip_address": None,
    "eula_blocked": False,
    "retrieved_at": 1700000000000,
    "expires_at": 1700000060000,
    "srv_record": None,
    # Stray online-only fields must be ignored while offline
    "software": "Paper",
    "plugins": [{"name": "A"}],
    "mods": [{"name": "fabric-api", "version": "0.92.0"}],
    "icon": "data:image/png;base64,iVBORw0KGgo="
}

ONLINE_BEDROCK = {
    "online": True,
    "host": "bedrock.example.com",
    "port": 19132,
    "ip_address": "192.0.2.20",
    "eula_blocked": False,
    "retrieved_at": 1700000000000,
    "expires_at": 1700000060000,
    "version": {"name": "1.20.50", "protocol": 630},
    "players": {"online": 5, "max": 10},
    "motd": {"raw": "§bBedrock", "clean": "Bedrock", "html": "<span>Bedrock</span>"},
    "gamemode": "Survival",
    "server_id": "12345678901234567890",
    "edition": "MCPE"
}

OFFLINE_BEDROCK = {
    "online": False,
    "host": "bedrock.example.com",
    "port": 19132,
    "ip_address": None,
    "eula_blocked": True,
    "retrieved_at": 1700000000000,
    "expires_at": 1700000060000,
    "gamemode": "Creative"
}

@pytest.fixture
def online_java():
    return json.loads(json.dumps(ONLINE_JAVA))

@pytest.fixture
def offline_java():
    return json.loads(json.dumps(OFFLINE_JAVA))

@pytest.fixture
def online_bedrock():
    return json.loads(json.dumps(ONLINE_BEDROCK))

@pytest.fixture
def offline_bedrock():
    return json.loads(json.dumps(OFFLINE_BEDROCK))
