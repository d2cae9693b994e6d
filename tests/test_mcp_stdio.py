import anyio
import mcp.types as types

from tempmail_mcp.mcp.mcp_stdio import build_server


def _list_tools(server):
    handler = server.request_handlers[types.ListToolsRequest]
    return anyio.run(handler, types.ListToolsRequest(method="tools/list"))


def _call_tool(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return anyio.run(handler, request)


def test_server_lists_catalogue(make_gateway):
    gateway, _ = make_gateway()
    server = build_server(gateway, "mcp-server-tempmail", "1.0.0")

    result = _list_tools(server).root

    assert [t.name for t in result.tools] == [t.name for t in gateway.registry.descriptors()]
    delete = next(t for t in result.tools if t.name == "delete_message")
    assert delete.inputSchema["required"] == ["emailId", "messageId"]


def test_server_call_returns_text(make_gateway):
    gateway, stub = make_gateway(reply={"domains": ["a.com"]})
    server = build_server(gateway, "mcp-server-tempmail", "1.0.0")

    result = _call_tool(server, "get_email_domains", {}).root

    assert result.isError is False
    assert result.content[0].text == "Available domains:\n- a.com"
    assert len(stub.calls) == 1


def test_server_call_reports_gateway_errors(make_gateway):
    gateway, stub = make_gateway()
    server = build_server(gateway, "mcp-server-tempmail", "1.0.0")

    result = _call_tool(server, "delete_email", {}).root

    assert result.isError is True
    assert "Missing required argument: emailId" in result.content[0].text
    assert stub.calls == []


def test_server_registers_list_and_call_handlers(make_gateway):
    gateway, _ = make_gateway()
    server = build_server(gateway, "mcp-server-tempmail", "1.0.0")
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers
