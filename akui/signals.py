"""Signals and slots connecting widget events to their receivers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class SlotHolder:
    """An object that receives signals and forgets them when disconnected."""

    def __init__(self) -> None:
        self._senders: set[Signal] = set()

    def connect_to(self, signal: Signal) -> None:
        """Remember that ``signal`` has a connection to this holder."""
        self._senders.add(signal)

    def disconnect_from(self, signal: Signal) -> None:
        """Forget ``signal``; its connections are left to the signal itself."""
        self._senders.discard(signal)

    def disconnect_all(self) -> None:
        """Remove every connection any signal has to this holder."""
        for signal in list(self._senders):
            signal.disconnect_slot(self)
        self._senders.clear()

    @property
    def senders(self) -> frozenset[Signal]:
        """The signals currently connected to this holder."""
        return frozenset(self._senders)


@dataclass(frozen=True, eq=False)
class _Connection:
    receiver: SlotHolder
    slot: Callable[..., Any]


class Signal:
    """A list of slots, called in connection order when the signal is emitted."""

    def __init__(self) -> None:
        self._connections: list[_Connection] = []

    def connect(self, receiver: SlotHolder, slot: Callable[..., Any]) -> None:
        """Call ``slot`` on emission; the connection belongs to ``receiver``."""
        if not isinstance(receiver, SlotHolder):
            raise TypeError("receiver must be a SlotHolder")
        if not callable(slot):
            raise TypeError("slot must be callable")
        self._connections.append(_Connection(receiver, slot))
        receiver.connect_to(self)

    def disconnect(self, receiver: SlotHolder) -> None:
        """Remove the first connection belonging to ``receiver``."""
        for conn in self._connections:
            if conn.receiver is receiver:
                self._connections.remove(conn)
                receiver.disconnect_from(self)
                return

    def disconnect_slot(self, receiver: SlotHolder) -> None:
        """Remove every connection belonging to ``receiver`` without notifying it."""
        self._connections = [c for c in self._connections if c.receiver is not receiver]

    def disconnect_all(self) -> None:
        """Remove every connection and tell each receiver about it."""
        for conn in self._connections:
            conn.receiver.disconnect_from(self)
        self._connections.clear()

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for conn in list(self._connections):
            conn.slot(*args)

    def __call__(self, *args: Any) -> None:
        self.emit(*args)

    def __len__(self) -> int:
        return len(self._connections)