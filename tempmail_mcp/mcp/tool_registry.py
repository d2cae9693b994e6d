from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from tempmail_mcp.core.errors import InvalidArgumentError, MissingArgumentError, UnknownToolError
from .tool_types import ToolDescriptor, ToolInvocation


class ToolRegistry:
    def __init__(self, tools: Iterable[ToolDescriptor]):
        self._tools: Dict[str, ToolDescriptor] = {}
        for t in tools:
            if t.name in self._tools:
                raise ValueError(f"Tool '{t.name}' already registered")
            self._tools[t.name] = t

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def descriptors(self) -> Tuple[ToolDescriptor, ...]:
        return tuple(self._tools.values())

    def list(self) -> List[Dict[str, Any]]:
        return [t.as_dict() for t in self._tools.values()]

    def get(self, name: str) -> ToolDescriptor:
        if name not in self._tools:
            raise UnknownToolError(name)
        return self._tools[name]

    def validate(self, invocation: ToolInvocation) -> ToolDescriptor:
        """
        Check an invocation against its descriptor before anything is sent.

        :raises UnknownToolError: no tool with that name
        :raises MissingArgumentError: a required field is absent
        :raises InvalidArgumentError: a field has the wrong type or a value outside its enum
        """
        tool = self.get(invocation.name)
        args = invocation.arguments or {}
        if not isinstance(args, Mapping):
            raise InvalidArgumentError("arguments", f"expected object, got {type(args).__name__}")

        for f in tool.fields:
            value = args.get(f.name)
            if value is None:
                if f.required:
                    raise MissingArgumentError(f.name)
                continue
            if not f.accepts(value):
                raise InvalidArgumentError(f.name, f"expected {f.type}, got {type(value).__name__}")
            if f.allowed_values is not None and value not in f.allowed_values:
                allowed = ", ".join(str(v) for v in f.allowed_values)
                raise InvalidArgumentError(f.name, f"must be one of {allowed}")
        return tool
