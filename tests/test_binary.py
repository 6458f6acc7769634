import pytest

from vtx_core.binary import BinaryInput, BinaryOutput
from vtx_core.errors import InvalidMessage, UnexpectedEndOfInput
from vtx_core.params import AmpModel
from vtx_core.values import ZeroToTenDial


def test_reads_advance_position():
    inp = BinaryInput(bytes([0x01, 0x02, 0x03, 0x12, 0x34, 0xFF]))
    assert inp.bytes_remaining == 6
    assert inp.next_byte() == 0x01
    assert inp.next_bytes(2) == b"\x02\x03"
    assert inp.next_ushort() == 0x1234
    assert inp.position == 5
    inp.skip(1)
    assert inp.bytes_remaining == 0


def test_read_past_end_fails_without_moving():
    inp = BinaryInput(b"\x00\x01")
    inp.next_byte()
    with pytest.raises(UnexpectedEndOfInput) as exc:
        inp.next_ushort()
    assert exc.value.offset == 1
    assert exc.value.requested == 2
    assert inp.position == 1

    with pytest.raises(UnexpectedEndOfInput):
        inp.skip(2)
    # still a malformed-message failure for callers
    with pytest.raises(InvalidMessage):
        inp.next_bytes(5)


def test_output_accepts_bytes_ints_and_encoded_values():
    out = BinaryOutput()
    out.write(b"AB")
    out.write(0x7F)
    out.write(ZeroToTenDial(42))
    out.write(AmpModel.BRIT_800)
    out.write_ushort_be(0xBEEF)
    assert out.getvalue() == b"AB\x7f\x2a\x0a\xbe\xef"
    assert len(out) == 7


@pytest.mark.parametrize("value", [-1, 256])
def test_output_rejects_out_of_range_byte(value):
    with pytest.raises(ValueError):
        BinaryOutput().write(value)


def test_output_rejects_out_of_range_ushort():
    with pytest.raises(ValueError):
        BinaryOutput().write_ushort_be(0x10000)
