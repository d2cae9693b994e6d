import pytest

from tempmail_mcp.core.errors import InvalidArgumentError, MissingArgumentError, UnknownToolError
from tempmail_mcp.mcp.catalog import TOOLS
from tempmail_mcp.mcp.tool_registry import ToolRegistry
from tempmail_mcp.mcp.tool_types import FieldSpec, ToolDescriptor, ToolInvocation

EXPECTED_REQUIRED = {
    "get_email_domains": set(),
    "create_email": {"name", "domain", "expiryTime"},
    "list_emails": set(),
    "delete_email": {"emailId"},
    "get_messages": {"emailId"},
    "get_message_detail": {"emailId", "messageId"},
    "delete_message": {"emailId", "messageId"},
    "get_webhook_config": set(),
    "set_webhook_config": {"url", "enabled"},
}


def test_catalogue_has_exactly_the_nine_tools_in_order(registry):
    names = [t["name"] for t in registry.list()]
    assert names == list(EXPECTED_REQUIRED)


@pytest.mark.parametrize("name,required", sorted(EXPECTED_REQUIRED.items()))
def test_required_fields_match_catalogue(registry, name, required):
    tool = registry.get(name)
    assert set(tool.required) == required
    assert set(tool.input_schema["required"]) == required


def test_list_exposes_json_schema(registry):
    create = next(t for t in registry.list() if t["name"] == "create_email")
    schema = create["inputSchema"]
    assert schema["type"] == "object"
    assert schema["properties"]["name"]["type"] == "string"
    assert schema["properties"]["expiryTime"]["type"] == "number"
    assert schema["properties"]["expiryTime"]["enum"] == [3600000, 86400000, 259200000, 0]


def test_optional_cursor_is_declared_but_not_required(registry):
    for name in ("list_emails", "get_messages"):
        schema = registry.get(name).input_schema
        assert schema["properties"]["cursor"]["type"] == "string"
        assert "cursor" not in schema["required"]


def test_webhook_enabled_is_boolean(registry):
    props = registry.get("set_webhook_config").input_schema["properties"]
    assert props["enabled"]["type"] == "boolean"
    assert props["url"]["type"] == "string"


def test_get_unknown_tool_raises(registry):
    with pytest.raises(UnknownToolError):
        registry.get("send_email")
    assert "send_email" not in registry


def test_duplicate_names_are_rejected():
    with pytest.raises(ValueError):
        ToolRegistry(list(TOOLS) + [ToolDescriptor(name="list_emails", description="dup")])


def test_validate_reports_first_missing_field(registry):
    with pytest.raises(MissingArgumentError) as exc:
        registry.validate(ToolInvocation("get_message_detail", {"emailId": "e1"}))
    assert exc.value.field == "messageId"


def test_validate_treats_none_as_missing(registry):
    with pytest.raises(MissingArgumentError):
        registry.validate(ToolInvocation("delete_email", {"emailId": None}))


@pytest.mark.parametrize("args,field", [
    ({"name": "a", "domain": "b.com", "expiryTime": "3600000"}, "expiryTime"),
    ({"name": "a", "domain": "b.com", "expiryTime": True}, "expiryTime"),
    ({"name": "a", "domain": "b.com", "expiryTime": 42}, "expiryTime"),
    ({"name": 7, "domain": "b.com", "expiryTime": 0}, "name"),
])
def test_validate_rejects_bad_create_email_args(registry, args, field):
    with pytest.raises(InvalidArgumentError) as exc:
        registry.validate(ToolInvocation("create_email", args))
    assert exc.value.field == field


def test_validate_checks_optional_fields_when_present(registry):
    with pytest.raises(InvalidArgumentError):
        registry.validate(ToolInvocation("list_emails", {"cursor": 3}))
    assert registry.validate(ToolInvocation("list_emails", {"cursor": "abc"})).name == "list_emails"


def test_validate_accepts_every_expiry_choice(registry):
    for expiry in (3600000, 86400000, 259200000, 0):
        registry.validate(ToolInvocation("create_email", {"name": "a", "domain": "b.com", "expiryTime": expiry}))


def test_field_spec_number_does_not_accept_bool():
    f = FieldSpec("n", "number", "a number")
    assert f.accepts(1)
    assert f.accepts(1.5)
    assert not f.accepts(False)
