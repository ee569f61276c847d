"""Transfer codec for values crossing the cache boundary."""

from .transfer_codec import TransferCodec

__all__ = ["TransferCodec"]
