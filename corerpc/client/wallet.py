"""Typed calls for the ``== Wallet ==`` section.

Which wallet a call targets is a transport concern (``HttpTransport(wallet=...)``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from corerpc.types import wallet as t
from corerpc.types.rawtransactions import SignRawTransaction


class WalletMixin:
    def get_balance(self, minconf: int | None = None, include_watchonly: bool | None = None,
                    **kwargs: Any) -> Decimal:
        """``avoid_reuse`` is accepted from v19 on."""
        return self.call("getbalance", minconf=minconf, include_watchonly=include_watchonly, **kwargs)

    def get_balances(self) -> t.GetBalances:
        return self.call("getbalances")

    def get_new_address(self, label: str | None = None, address_type: str | None = None) -> str:
        return self.call("getnewaddress", label=label, address_type=address_type)

    def get_raw_change_address(self, address_type: str | None = None) -> str:
        return self.call("getrawchangeaddress", address_type=address_type)

    def get_wallet_info(self) -> t.GetWalletInfo:
        return self.call("getwalletinfo")

    def list_unspent(self, minconf: int | None = None, maxconf: int | None = None,
                     addresses: list[str] | None = None, **kwargs: Any) -> list[t.UnspentOutput]:
        return self.call("listunspent", minconf=minconf, maxconf=maxconf, addresses=addresses, **kwargs)

    def get_transaction(self, txid: str, include_watchonly: bool | None = None, **kwargs: Any) -> t.GetTransaction:
        return self.call("gettransaction", txid, include_watchonly=include_watchonly, **kwargs)

    def list_transactions(self, label: str | None = None, count: int | None = None, skip: int | None = None,
                          include_watchonly: bool | None = None) -> list[t.ListTransactionsItem]:
        return self.call(
            "listtransactions", label=label, count=count, skip=skip, include_watchonly=include_watchonly
        )

    def send_to_address(self, address: str, amount: Decimal | str, **kwargs: Any) -> str:
        """Returns the txid. Optional arguments follow the connected version's signature."""
        return self.call("sendtoaddress", address, amount, **kwargs)

    def send_many(self, amounts: dict[str, Any], **kwargs: Any) -> str:
        return self.call("sendmany", amounts=amounts, **kwargs)

    def send_many_verbose(self, amounts: dict[str, Any], **kwargs: Any) -> t.SendManyVerbose:
        return self.call("sendmany_verbose", amounts=amounts, **kwargs)

    def create_wallet(self, wallet_name: str, **kwargs: Any) -> t.CreateWallet:
        return self.call("createwallet", wallet_name, **kwargs)

    def load_wallet(self, filename: str, load_on_startup: bool | None = None) -> t.LoadWallet:
        return self.call("loadwallet", filename, load_on_startup=load_on_startup)

    def unload_wallet(self, wallet_name: str | None = None,
                      load_on_startup: bool | None = None) -> t.UnloadWallet | None:
        return self.call("unloadwallet", wallet_name=wallet_name, load_on_startup=load_on_startup)

    def list_wallets(self) -> list[str]:
        return self.call("listwallets")

    def wallet_passphrase(self, passphrase: str, timeout: int) -> None:
        return self.call("walletpassphrase", passphrase, timeout)

    def wallet_lock(self) -> None:
        return self.call("walletlock")

    def encrypt_wallet(self, passphrase: str) -> str:
        return self.call("encryptwallet", passphrase)

    def sign_message(self, address: str, message: str) -> str:
        return self.call("signmessage", address, message)

    def lock_unspent(self, unlock: bool, transactions: list[dict[str, Any]] | None = None) -> bool:
        return self.call("lockunspent", unlock, transactions=transactions)

    def set_tx_fee(self, amount: Decimal | str) -> bool:
        return self.call("settxfee", amount)

    def dump_priv_key(self, address: str) -> str:
        return self.call("dumpprivkey", address)

    def get_address_info(self, address: str) -> t.GetAddressInfo:
        return self.call("getaddressinfo", address)

    def import_descriptors(self, requests: list[dict[str, Any]]) -> list[t.ImportDescriptorsResult]:
        return self.call("importdescriptors", requests)

    def psbt_bump_fee(self, txid: str, options: dict[str, Any] | None = None) -> t.PsbtBumpFee:
        return self.call("psbtbumpfee", txid, options=options)

    def send(self, outputs: Any, **kwargs: Any) -> t.Send:
        return self.call("send", outputs, **kwargs)

    def upgrade_wallet(self, version: int | None = None) -> t.UpgradeWallet:
        return self.call("upgradewallet", version=version)

    def bump_fee(self, txid: str, options: dict[str, Any] | None = None) -> t.BumpFee:
        return self.call("bumpfee", txid, options=options)

    def get_received_by_address(self, address: str, minconf: int | None = None) -> Decimal:
        return self.call("getreceivedbyaddress", address, minconf=minconf)

    def list_labels(self, purpose: str | None = None) -> list[str]:
        return self.call("listlabels", purpose=purpose)

    def abandon_transaction(self, txid: str) -> None:
        return self.call("abandontransaction", txid)

    def backup_wallet(self, destination: str) -> None:
        return self.call("backupwallet", destination)

    def keypool_refill(self, newsize: int | None = None) -> None:
        return self.call("keypoolrefill", newsize=newsize)

    def get_unconfirmed_balance(self) -> Decimal:
        return self.call("getunconfirmedbalance")

    def rescan_blockchain(self, start_height: int | None = None,
                          stop_height: int | None = None) -> t.RescanBlockchain:
        return self.call("rescanblockchain", start_height=start_height, stop_height=stop_height)

    def wallet_process_psbt(self, psbt: str, **kwargs: Any) -> t.WalletProcessPsbt:
        return self.call("walletprocesspsbt", psbt, **kwargs)

    def wallet_create_funded_psbt(self, inputs: list[dict[str, Any]], outputs: Any,
                                  **kwargs: Any) -> t.WalletCreateFundedPsbt:
        return self.call("walletcreatefundedpsbt", inputs, outputs, **kwargs)

    def list_lock_unspent(self) -> list[t.LockedOutput]:
        return self.call("listlockunspent")

    def get_addresses_by_label(self, label: str) -> dict[str, t.AddressPurpose]:
        return self.call("getaddressesbylabel", label)

    def list_since_block(self, blockhash: str | None = None, **kwargs: Any) -> t.ListSinceBlock:
        """``include_change`` is accepted from v24 on."""
        return self.call("listsinceblock", blockhash=blockhash, **kwargs)

    def list_received_by_address(self, minconf: int | None = None, include_empty: bool | None = None,
                                 **kwargs: Any) -> list[t.ListReceivedByAddressItem]:
        return self.call("listreceivedbyaddress", minconf=minconf, include_empty=include_empty, **kwargs)

    def list_address_groupings(self) -> list[list[t.AddressGrouping]]:
        return self.call("listaddressgroupings")

    def add_multisig_address(self, nrequired: int, keys: list[str], label: str | None = None,
                             address_type: str | None = None) -> t.AddMultisigAddress:
        return self.call("addmultisigaddress", nrequired, keys, label=label, address_type=address_type)

    def sign_raw_transaction_with_wallet(self, hexstring: str, prevtxs: list[dict[str, Any]] | None = None,
                                         sighashtype: str | None = None) -> SignRawTransaction:
        return self.call("signrawtransactionwithwallet", hexstring, prevtxs=prevtxs, sighashtype=sighashtype)
