'''
Radix formatting and conversions report.
'''

import math

import pytest
from mpmath import mp

from base_conversion import (
    Base,
    conversions,
    format_in_base,
    parse_integer,
    round_half_away,
)
from calculator_engine import Op


@pytest.mark.parametrize('value, expected', [
    (2.5, 3),
    (-2.5, -3),
    (2.4999, 2),
    (-0.4, 0),
    (0.5, 1),
    (7, 7),
])
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_round_half_away_mpf():
    with mp.workprec(64):
        assert round_half_away(mp.mpf('1152921504606846977.5')) == 2 ** 60 + 2


@pytest.mark.parametrize('value', [math.inf, -math.inf, math.nan])
def test_round_half_away_rejects_non_finite(value):
    with pytest.raises(ValueError):
        round_half_away(value)


@pytest.mark.parametrize('value, base, text', [
    (255, Base.HEX, 'FF'),
    (255.4, Base.HEX, 'FF'),
    (8, Base.OCT, '10'),
    (5, Base.BIN, '101'),
    (-255, Base.HEX, '-FF'),
    (0, Base.BIN, '0'),
    (41.5, Base.DEC, '42'),
])
def test_format_in_base(value, base, text):
    assert format_in_base(value, base) == text


def test_base_for_op():
    assert Base.for_op(Op.TO_HEX) is Base.HEX
    assert Base.for_op(Op.TO_OCT) is Base.OCT
    assert Base.for_op(Op.TO_BIN) is Base.BIN
    assert Base.for_op(Op.TO_DEC) is Base.DEC
    with pytest.raises(KeyError):
        Base.for_op(Op.ADD)


@pytest.mark.parametrize('text, expected', [
    ('42', 42),
    ('-7', -7),
    (' 3 ', 3),
    ('4.5', None),
    ('FF', None),
    ('Error', None),
    ('', None),
])
def test_parse_integer(text, expected):
    assert parse_integer(text) == expected


def test_conversions_of_five():
    result = conversions(5)
    assert (result.dec, result.hex, result.oct, result.bin) == ('5', '5', '5', '101')
    assert result.width == 4
    assert result.ones_complement == '1010'
    assert result.twos_complement == '1011'


def test_conversions_of_zero():
    result = conversions(0)
    assert result.width == 2
    assert result.ones_complement == '11'
    assert result.twos_complement == '00'


def test_conversions_of_negative_uses_magnitude():
    result = conversions(-10)
    assert result.hex == '-A'
    assert result.bin == '-1010'
    assert result.width == 5
    assert result.ones_complement == '10101'
    assert result.twos_complement == '10110'


def test_conversions_text():
    text = conversions(255).as_text()
    assert text.splitlines() == [
        'Dec:  255',
        'Hex:  FF',
        'Oct:  377',
        'Bin:  11111111',
        "One's Complement (9-bit):",
        '100000000',
        "Two's Complement (9-bit):",
        '100000001',
    ]
