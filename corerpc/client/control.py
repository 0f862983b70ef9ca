"""Typed calls for the ``== Control ==`` section."""

from __future__ import annotations

from corerpc.types import control as t


class ControlMixin:
    def uptime(self) -> int:
        return self.call("uptime")

    def get_memory_info(self) -> t.GetMemoryInfoStats:
        return self.call("getmemoryinfo")

    def stop(self) -> str:
        return self.call("stop")

    def help(self, command: str | None = None) -> str:
        return self.call("help", command=command)

    def get_rpc_info(self) -> t.GetRpcInfo:
        return self.call("getrpcinfo")

    def logging(self, include: list[str] | None = None, exclude: list[str] | None = None) -> dict[str, bool]:
        return self.call("logging", include=include, exclude=exclude)
