"""Command envelopes and stream messages exchanged with a ledger server."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from typing import Any, Mapping

from ripplecore.rippletime import RippleTime

_UINT64_MASK = (1 << 64) - 1

_id_lock = threading.Lock()
_id_counter = itertools.count(1)


def _next_id() -> int:
    with _id_lock:
        return next(_id_counter)


class CommandError(Exception):
    """An error reported by the server, or raised locally, for a command."""

    def __init__(self, name: str, code: int, message: str):
        super().__init__(name, code, message)
        self.name = name
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.name} {self.code} {self.message}"


@dataclass
class Command:
    """A request sent to the server, completed once its response arrives.

    ``params`` holds the command-specific request fields; ``result`` is set
    from the response before :meth:`done` is called.
    """

    name: str
    id: int = 0
    type: str = ""
    status: str = ""
    error: CommandError | None = None
    result: Any = None
    params: dict[str, Any] = field(default_factory=dict)
    _ready: threading.Event = field(
        default_factory=threading.Event, init=False, repr=False, compare=False
    )

    def done(self) -> None:
        """Mark the command as answered."""
        self._ready.set()

    def fail(self, message: str) -> None:
        """Complete the command with a locally raised error."""
        self.error = CommandError("Client Error", -1, message)
        self._ready.set()

    def increment_id(self) -> None:
        """Give the command a fresh identifier."""
        self.id = _next_id()

    def wait(self, timeout: float | None = None) -> Any:
        """Block until the command completes and return its result.

        Raises the command's error if it failed, and TimeoutError if it did
        not complete within ``timeout`` seconds.
        """
        if not self._ready.wait(timeout):
            raise TimeoutError(f"no response to command {self.id} ({self.name})")
        if self.error is not None:
            raise self.error
        return self.result

    def to_json(self) -> dict[str, Any]:
        """The request as a JSON-ready mapping."""
        obj: dict[str, Any] = {}
        if self.error is not None:
            obj["error"] = self.error.name
            obj["error_code"] = self.error.code
            obj["error_message"] = self.error.message
        obj["id"] = self.id
        obj["command"] = self.name
        if self.type:
            obj["type"] = self.type
        if self.status:
            obj["status"] = self.status
        obj.update(self.params)
        return obj


def new_command(name: str) -> Command:
    """A command with the given name and the next free identifier."""
    return Command(name=name, id=_next_id())


def _uint(obj: Mapping[str, Any], key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"field {key!r} must not be negative, got {value!r}")
    return value


def _str(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


@dataclass
class LedgerStreamMsg:
    """A ledger-closed notification, or the ledger part of a subscribe reply."""

    fee_base: int = 0
    fee_ref: int = 0
    ledger_sequence: int = 0
    ledger_hash: str = ""
    ledger_time: RippleTime = field(default_factory=RippleTime)
    reserve_base: int = 0
    reserve_increment: int = 0
    validated_ledgers: str = ""
    txn_count: int = 0

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> LedgerStreamMsg:
        return cls(
            fee_base=_uint(obj, "fee_base"),
            fee_ref=_uint(obj, "fee_ref"),
            ledger_sequence=_uint(obj, "ledger_index"),
            ledger_hash=_str(obj, "ledger_hash").upper(),
            ledger_time=RippleTime(_uint(obj, "ledger_time")),
            reserve_base=_uint(obj, "reserve_base"),
            reserve_increment=_uint(obj, "reserve_inc"),
            validated_ledgers=_str(obj, "validated_ledgers"),
            txn_count=_uint(obj, "txn_count"),
        )


@dataclass
class ServerStreamMsg:
    """A server status notification, or the server part of a subscribe reply."""

    status: str = ""
    base_fee: int = 0
    load_base: int = 0
    load_factor: int = 0
    load_factor_fee_escalation: int = 0
    load_factor_fee_queue: int = 0
    load_factor_fee_reference: int = 0
    load_factor_server: int = 0
    host_id: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> ServerStreamMsg:
        return cls(
            status=_str(obj, "server_status"),
            base_fee=_uint(obj, "base_fee"),
            load_base=_uint(obj, "load_base"),
            load_factor=_uint(obj, "load_factor"),
            load_factor_fee_escalation=_uint(obj, "load_factor_fee_escalation"),
            load_factor_fee_queue=_uint(obj, "load_factor_fee_queue"),
            load_factor_fee_reference=_uint(obj, "load_factor_fee_reference"),
            load_factor_server=_uint(obj, "load_factor_server"),
            host_id=_str(obj, "hostid"),
        )

    def transaction_cost(self) -> int:
        """The fee currently charged, scaled by the load factor."""
        return ((self.base_fee * self.load_factor) & _UINT64_MASK) // self.load_base


_STREAM_TYPES = {
    "ledgerClosed": LedgerStreamMsg,
    "serverStatus": ServerStreamMsg,
}


def parse_stream_message(obj: Mapping[str, Any]) -> LedgerStreamMsg | ServerStreamMsg | None:
    """Decode a ledger or server stream message; None for any other message."""
    factory = _STREAM_TYPES.get(obj.get("type", ""))
    if factory is None:
        return None
    return factory.from_json(obj)