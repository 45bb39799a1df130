"""
Test cases for regrouping bit streams between value widths
"""

import os
import sys
import itertools
import random
import pytest

# Add the src directory to path to import the package without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from base_endecoder.bits import BitPacker, repack


def test_bytes_to_five_bit_values():
    packer = BitPacker(5)
    assert packer.consume(0xFF, 8) == [31]
    assert packer.pending_bits == 3
    # 111 followed by 00000000
    assert packer.consume(0x00, 8) == [0b11100, 0]
    assert packer.pending_bits == 1
    assert packer.flush_remainder() == 0
    assert packer.pending_bits == 0


def test_flush_pads_with_zero_bits():
    packer = BitPacker(5)
    assert packer.consume(1, 1) == []
    assert packer.flush_remainder() == 0b10000


def test_flush_when_empty():
    packer = BitPacker(6)
    assert packer.flush_remainder() is None
    packer.consume(0b111111, 6)
    assert packer.flush_remainder() is None


def test_flush_is_not_automatic():
    packer = BitPacker(8)
    packer.consume(0b101, 3)
    assert packer.pending_bits == 3
    assert packer.flush_remainder() == 0b10100000
    assert packer.flush_remainder() is None


def test_wide_input_value():
    packer = BitPacker(8)
    assert packer.consume(0xDEADBEEF, 32) == [0xDE, 0xAD, 0xBE, 0xEF]


def test_pending_bits_stay_below_width():
    rng = random.Random(99)
    for width in range(1, 33):
        packer = BitPacker(width)
        for _ in range(50):
            input_width = rng.randint(1, 32)
            packer.consume(rng.getrandbits(input_width), input_width)
            assert 0 <= packer.pending_bits < width


def test_bit_order_is_preserved():
    """Regrouping to single bits gives the bits most significant first"""
    assert list(repack(b"\xA5", 8, 1)) == [1, 0, 1, 0, 0, 1, 0, 1]
    assert list(repack([1, 0, 1, 0, 0, 1, 0, 1], 1, 8)) == [0xA5]


def test_repack_base64_groups():
    # "Man" is the classic base64 example: TWFu
    assert list(repack(b"Man", 8, 6)) == [19, 22, 5, 46]
    assert bytes(repack([19, 22, 5, 46], 6, 8)) == b"Man"


def test_repack_without_flush_drops_remainder():
    # "M" gives 010011 01 -> one whole 6 bit value and two leftover bits
    assert list(repack(b"M", 8, 6)) == [19, 0b010000]
    assert list(repack(b"M", 8, 6, flush=False)) == [19]


def test_repack_round_trip():
    rng = random.Random(7)
    for width in range(1, 9):
        data = bytes(rng.getrandbits(8) for _ in range(rng.randint(0, 40)))
        symbols = list(repack(data, 8, width))
        assert len(symbols) == (len(data) * 8 + width - 1) // width
        assert bytes(repack(symbols, width, 8, flush=False)) == data


def test_repack_is_lazy():
    values = repack(itertools.repeat(0xAB), 8, 4)
    assert list(itertools.islice(values, 4)) == [0xA, 0xB, 0xA, 0xB]


@pytest.mark.parametrize("width", [0, -1, 33])
def test_invalid_output_width(width):
    with pytest.raises(ValueError):
        BitPacker(width)


@pytest.mark.parametrize("value,input_width", [(256, 8), (-1, 8), (2, 1), (0, 0)])
def test_value_must_fit_input_width(value, input_width):
    packer = BitPacker(8)
    with pytest.raises(ValueError):
        packer.consume(value, input_width)
    assert packer.pending_bits == 0
