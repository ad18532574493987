import pytest

from mcstatusio.parsers.status_parser import (
    parse_document, parse_player, parse_mod, parse_plugin, parse_srv_record,
    require, optional_list, PlayerEntry, PluginEntry, SrvRecord
)
from mcstatusio.core.exceptions import ParseError, MissingFieldError

def test_parse_document_utf8():
    document = parse_document('{"online": true, "motd": {"clean": "Hé"}}'.encode('utf-8'))

    assert document == {"online": True, "motd": {"clean": "Hé"}}

@pytest.mark.parametrize("body", [b"", b"not json", b"\xff\xfe\x00", b"\"just a string\"", b"null"])
def test_parse_document_rejects(body):
    with pytest.raises(ParseError) as exc_info:
        parse_document(body)
    assert isinstance(exc_info.value, ParseError)

def test_parse_error_keeps_cause():
    with pytest.raises(ParseError) as exc_info:
        parse_document(b"{broken")
    assert exc_info.value.cause is not None

def test_require_nested_path():
    with pytest.raises(MissingFieldError) as exc_info:
        require({"name": None}, "name", "plugins")
    assert exc_info.value.field == "plugins.name"

def test_optional_list():
    assert optional_list({"mods": []}, "mods") == []
    assert optional_list({"mods": None}, "mods") is None
    assert optional_list({}, "mods") is None

def test_entry_parsers():
    assert parse_player({"name_raw": "§aSteve", "name_clean": "Steve"}) == PlayerEntry("§aSteve", "Steve")
    assert parse_plugin({"name": "WorldEdit"}) == PluginEntry("WorldEdit", None)
    with pytest.raises(MissingFieldError):
        parse_mod({"name": "sodium"})

def test_parse_srv_record():
    assert parse_srv_record({"host": "mc.example.com", "port": "25566"}) == SrvRecord("mc.example.com", 25566)
    assert parse_srv_record(None) is None
