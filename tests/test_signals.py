import pytest

from akui.signals import Signal, SlotHolder


class Recorder(SlotHolder):
    def __init__(self):
        super().__init__()
        self.calls = []

    def on_plain(self):
        self.calls.append(())

    def on_value(self, value):
        self.calls.append((value,))


def test_emit_calls_slots_in_order():
    sig = Signal()
    order = []
    a, b = Recorder(), Recorder()
    sig.connect(a, lambda: order.append("a"))
    sig.connect(b, lambda: order.append("b"))
    sig.emit()
    assert order == ["a", "b"]


def test_call_passes_arguments():
    sig = Signal()
    r = Recorder()
    sig.connect(r, r.on_value)
    sig(7)
    sig.emit(9)
    assert r.calls == [(7,), (9,)]


def test_len_counts_connections():
    sig = Signal()
    r = Recorder()
    sig.connect(r, r.on_plain)
    sig.connect(r, r.on_plain)
    assert len(sig) == 2
    assert sig in r.senders


def test_disconnect_removes_first_only():
    sig = Signal()
    r = Recorder()
    sig.connect(r, r.on_plain)
    sig.connect(r, r.on_plain)
    sig.disconnect(r)
    assert len(sig) == 1
    assert sig not in r.senders


def test_disconnect_slot_removes_all_for_receiver():
    sig = Signal()
    r, other = Recorder(), Recorder()
    sig.connect(r, r.on_plain)
    sig.connect(other, other.on_plain)
    sig.connect(r, r.on_plain)
    sig.disconnect_slot(r)
    assert len(sig) == 1
    sig.emit()
    assert other.calls == [()]
    assert r.calls == []


def test_disconnect_all_notifies_receivers():
    sig = Signal()
    r = Recorder()
    sig.connect(r, r.on_plain)
    sig.disconnect_all()
    assert len(sig) == 0
    assert r.senders == frozenset()


def test_holder_disconnect_all_detaches_from_every_signal():
    s1, s2 = Signal(), Signal()
    r = Recorder()
    s1.connect(r, r.on_plain)
    s2.connect(r, r.on_value)
    r.disconnect_all()
    assert len(s1) == 0 and len(s2) == 0
    s1.emit()
    s2.emit(1)
    assert r.calls == []


def test_slot_may_disconnect_during_emit():
    sig = Signal()
    r, other = Recorder(), Recorder()
    sig.connect(r, lambda: sig.disconnect(r))
    sig.connect(other, other.on_plain)
    sig.emit()
    assert other.calls == [()]
    assert len(sig) == 1


def test_connect_rejects_non_holder():
    sig = Signal()
    with pytest.raises(TypeError):
        sig.connect(object(), lambda: None)


def test_connect_rejects_non_callable():
    sig = Signal()
    with pytest.raises(TypeError):
        sig.connect(Recorder(), 5)