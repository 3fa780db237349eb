"""Ledger amounts and their wire form, limited reads, result codes, ledger time and websocket messages."""

__version__ = "0.1.0"
__all__ = ["value", "reader", "result", "rippletime", "messages"]