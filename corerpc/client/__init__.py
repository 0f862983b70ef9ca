"""Version-aware client: one typed method per supported RPC."""

from corerpc.client.base import ClientBase, negotiate_version
from corerpc.client.blockchain import BlockchainMixin
from corerpc.client.call import CallState, RpcCall
from corerpc.client.control import ControlMixin
from corerpc.client.mining import MiningMixin
from corerpc.client.network import NetworkMixin
from corerpc.client.rawtransactions import RawTransactionsMixin
from corerpc.client.util import UtilMixin
from corerpc.client.wallet import WalletMixin
from corerpc.client.zmq import ZmqMixin


class Client(
    BlockchainMixin,
    ControlMixin,
    NetworkMixin,
    MiningMixin,
    RawTransactionsMixin,
    UtilMixin,
    WalletMixin,
    ZmqMixin,
    ClientBase,
):
    """
    Typed JSON-RPC client for one bitcoind.

    Build it with an explicit version, or let ``Client.connect`` ask the
    daemon::

        with Client.connect(HttpTransport("http://127.0.0.1:8332", user="u", password="p")) as client:
            height = client.get_block_count()
    """


__all__ = ["Client", "ClientBase", "RpcCall", "CallState", "negotiate_version"]
