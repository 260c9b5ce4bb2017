import threading

import pytest

from raftviz.nodes import NodeRegistry, Role, UnknownNodeError


def test_initial_state():
    reg = NodeRegistry(5)
    assert reg.ids() == ["N1", "N2", "N3", "N4", "N5"]
    assert all(n["role"] == "follower" and n["term"] == 0 for n in reg.snapshot())


def test_empty_registry_allowed():
    reg = NodeRegistry(0)
    assert len(reg) == 0
    assert reg.snapshot() == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        NodeRegistry(-1)


def test_set_role_and_term():
    reg = NodeRegistry(3)
    reg.set_role("N2", Role.CANDIDATE)
    reg.set_term("N2", 4)
    reg.set_role("N3", "leader")
    assert reg.get("N2").role is Role.CANDIDATE
    assert reg.get("N2").term == 4
    assert reg.get("N3").role is Role.LEADER
    assert reg.get("N1").role is Role.FOLLOWER


def test_invalid_role_rejected():
    reg = NodeRegistry(1)
    with pytest.raises(ValueError):
        reg.set_role("N1", "king")


def test_term_cannot_go_backwards_or_negative():
    reg = NodeRegistry(1)
    reg.set_term("N1", 2)
    reg.set_term("N1", 2)
    with pytest.raises(ValueError):
        reg.set_term("N1", 1)
    with pytest.raises(ValueError):
        reg.set_term("N1", -1)


def test_forced_term_can_go_backwards():
    reg = NodeRegistry(1)
    reg.set_term("N1", 4)
    reg.set_term("N1", 1, force=True)
    assert reg.get("N1").term == 1
    with pytest.raises(ValueError):
        reg.set_term("N1", -1, force=True)


def test_unknown_node():
    reg = NodeRegistry(2)
    with pytest.raises(UnknownNodeError):
        reg.get("N9")
    with pytest.raises(KeyError):
        reg.set_role("N9", Role.LEADER)


def test_reset_all():
    reg = NodeRegistry(3)
    reg.set_role("N1", Role.LEADER)
    reg.set_term("N1", 7)
    reg.reset_all()
    assert reg.snapshot() == [
        {"id": "N1", "role": "follower", "term": 0},
        {"id": "N2", "role": "follower", "term": 0},
        {"id": "N3", "role": "follower", "term": 0},
    ]


def test_node_lock_does_not_block_other_nodes():
    reg = NodeRegistry(2)
    done = threading.Event()

    def touch_n2():
        reg.set_role("N2", Role.CANDIDATE)
        done.set()

    with reg.get("N1").lock:
        t = threading.Thread(target=touch_n2)
        t.start()
        assert done.wait(timeout=2)
    t.join()
    assert reg.get("N2").role is Role.CANDIDATE
