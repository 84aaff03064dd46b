import pytest

from tckit.blocks import ExternalBlock, RcBlock, SimpleBlock


def test_simple_block_default_is_empty():
    block = SimpleBlock()
    assert block.data() is None
    assert block.size() == 0


def test_simple_block_alloc_and_reserve():
    block = SimpleBlock(24)
    first = block.data()
    assert first is not None
    assert block.size() == 24
    block.reserve(2048)
    assert block.data() is not first
    assert block.data() is not None
    assert block.size() == 2048


def test_simple_block_reserve_keeps_contents_and_never_shrinks():
    block = SimpleBlock(4)
    block.data()[:4] = b"abcd"
    block.reserve(16)
    assert bytes(block.data()[:4]) == b"abcd"
    block.reserve(2)
    assert block.size() == 16


def test_simple_block_copy_and_take():
    block = SimpleBlock(24)
    block2 = block.copy()
    assert block.data() is not block2.data()
    assert block.size() == block2.size()

    block3 = block2.take()
    assert block2.data() is None
    block2 = block3.take()
    assert block3.data() is None
    block3 = block2.copy()
    assert block3.data() is not None


def test_simple_block_copy_is_independent():
    block = SimpleBlock(3)
    block.data()[:] = b"xyz"
    clone = block.copy()
    clone.data()[0] = ord("a")
    assert bytes(block.data()) == b"xyz"
    assert bytes(clone.data()) == b"ayz"


def test_simple_block_cleanup():
    block = SimpleBlock(8)
    block.cleanup()
    assert block.data() is None
    assert block.size() == 0


def test_swap_rejects_other_block_type():
    with pytest.raises(TypeError):
        SimpleBlock(4).swap(RcBlock(4))


def test_rc_block_default():
    block = RcBlock()
    assert block.data() is None
    assert block.size() == 0
    assert block.ref_count() == 0


def test_rc_block_alloc_and_reserve():
    block = RcBlock(24)
    first = block.data()
    assert first is not None
    assert block.size() == 24
    assert block.ref_count() == 1
    block.reserve(2048)
    assert block.data() is not first
    assert block.data() is not None
    assert block.size() == 2048
    assert block.ref_count() == 1


def test_rc_block_copy_and_take_counts():
    block = RcBlock(24)
    block2 = block.copy()
    assert block.data() is block2.data()
    assert block.size() == block2.size()
    assert block.ref_count() == 2

    block3 = block2.take()
    assert block3.ref_count() == 2
    assert block2.data() is None
    block2 = block3.take()
    assert block3.ref_count() == 0
    assert block2.ref_count() == 2
    assert block3.data() is None
    block3 = block2.copy()
    assert block3.data() is not None
    assert block3.ref_count() == 3


def test_rc_block_reserve_detaches_shared_storage():
    block = RcBlock(4)
    block.data()[:] = b"abcd"
    other = block.copy()
    other.reserve(other.size())
    assert other.data() is not block.data()
    assert bytes(other.data()) == b"abcd"
    assert block.ref_count() == 1
    assert other.ref_count() == 1


def test_rc_block_release_drops_reference():
    block = RcBlock(4)
    other = block.copy()
    other.release()
    assert other.data() is None
    assert block.ref_count() == 1


def test_external_block_writes_through():
    raw = bytearray(16)
    block = ExternalBlock(raw, 16)
    block.data()[0] = 7
    assert raw[0] == 7
    assert block.size() == 16


def test_external_block_rejects_readonly_and_oversize():
    with pytest.raises(ValueError):
        ExternalBlock(b"abc")
    with pytest.raises(ValueError):
        ExternalBlock(bytearray(4), 5)