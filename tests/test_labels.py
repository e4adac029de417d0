from __future__ import annotations

import pytest

from cubelet_engine.core.labels import CELLS, product, rest_position, validate_label


def test_cells_count_and_alphabet():
    assert len(CELLS) == 27
    assert len(set(CELLS)) == 27
    for c in CELLS:
        assert len(c) == 3
        assert set(c) <= set("012")


def test_cells_lexicographic():
    assert CELLS[0] == "000"
    assert CELLS[1] == "001"
    assert CELLS[-1] == "222"
    assert list(CELLS) == sorted(CELLS)


def test_product_zero_inputs():
    assert list(product()) == [()]


def test_product_restartable_with_iterators():
    def make():
        return product(iter("ab"), iter([0, 1]))

    first = list(make())
    assert first == [("a", 0), ("a", 1), ("b", 0), ("b", 1)]
    assert list(make()) == first

    gen_inputs = product(iter("xy"), iter("01"), iter("z"))
    assert len(list(gen_inputs)) == 4


def test_product_empty_pool_yields_nothing():
    assert list(product("ab", [])) == []


def test_rest_position():
    assert rest_position("111") == (0.0, 0.0, 0.0)
    x, y, z = rest_position("201")
    assert x == pytest.approx(1.1)
    assert y == pytest.approx(-1.1)
    assert z == pytest.approx(0.0)
    assert rest_position("200", spacing=1.0) == (1.0, -1.0, -1.0)


@pytest.mark.parametrize("bad", ["", "12", "1234", "013", "a11", 111])
def test_validate_label_rejects(bad):
    with pytest.raises(ValueError):
        validate_label(bad)


def test_validate_label_accepts_all_cells():
    for c in CELLS:
        assert validate_label(c) == c
    assert validate_label("02", length=2) == "02"
