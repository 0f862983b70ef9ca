"""Typed calls for the ``== Util ==`` section."""

from __future__ import annotations

from typing import Any

from corerpc.types import util as t


class UtilMixin:
    def estimate_smart_fee(self, conf_target: int, estimate_mode: str | None = None) -> t.EstimateSmartFee:
        return self.call("estimatesmartfee", conf_target, estimate_mode=estimate_mode)

    def validate_address(self, address: str) -> t.ValidateAddress:
        return self.call("validateaddress", address)

    def get_descriptor_info(self, descriptor: str) -> t.GetDescriptorInfo:
        return self.call("getdescriptorinfo", descriptor)

    def derive_addresses(self, descriptor: str, range: Any = None) -> list[str]:
        return self.call("deriveaddresses", descriptor, range=range)

    def verify_message(self, address: str, signature: str, message: str) -> bool:
        return self.call("verifymessage", address, signature, message)

    def create_multisig(self, nrequired: int, keys: list[str], address_type: str | None = None) -> t.CreateMultisig:
        return self.call("createmultisig", nrequired, keys, address_type=address_type)

    def sign_message_with_privkey(self, privkey: str, message: str) -> str:
        return self.call("signmessagewithprivkey", privkey, message)

    def get_index_info(self, index_name: str | None = None) -> dict[str, t.IndexInfo]:
        return self.call("getindexinfo", index_name=index_name)
