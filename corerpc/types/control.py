"""Response shapes for the ``== Control ==`` section."""

from __future__ import annotations

from pydantic import Field

from corerpc.types.primitives import Int, RpcModel, Str


class LockedMemory(RpcModel):
    used: Int
    free: Int
    total: Int
    locked: Int
    chunks_used: Int
    chunks_free: Int


class GetMemoryInfoStats(RpcModel):
    locked: LockedMemory


class ActiveCommand(RpcModel):
    method: Str
    duration: Int


class GetRpcInfo(RpcModel):
    active_commands: list[ActiveCommand]
    # v19+
    log_path: Str | None = Field(None, alias="logpath")
