from ataxx.ai.constants import EXTENDED_SIDE
from ataxx.ai.geometry import (
    CORNERS, PLAYABLE, distance, in_bounds, index, neighbor, reflections,
    square_indices, to_coords,
)
from ataxx.ai.pieces import BLOCKED, BLUE, EMPTY, RED


def test_index_includes_two_deep_border():
    assert index('a', '1') == 2 * EXTENDED_SIDE + 2
    assert index('g', '7') == 8 * EXTENDED_SIDE + 8
    assert index('b', '1') == index('a', '1') + 1
    assert index('a', '2') == index('a', '1') + EXTENDED_SIDE


def test_to_coords_inverts_index():
    for sq in PLAYABLE:
        assert index(*to_coords(sq)) == sq
    assert to_coords(index('c', '5')) == ('c', '5')


def test_neighbor_may_reach_border():
    a1 = index('a', '1')
    assert neighbor(a1, 1, 1) == index('b', '2')
    assert neighbor(a1, -2, -2) == 0


def test_square_indices_order_and_size():
    d4 = index('d', '4')
    ring = square_indices(d4, 1)
    assert len(ring) == 9
    assert d4 in ring
    assert ring[0] == index('c', '3')
    assert ring[1] == index('c', '4')
    assert ring[-1] == index('e', '5')
    assert len(square_indices(d4, 2)) == 25


def test_distance_is_chebyshev():
    assert distance(index('a', '1'), index('b', '2')) == 1
    assert distance(index('a', '1'), index('a', '3')) == 2
    assert distance(index('a', '1'), index('c', '2')) == 2
    assert distance(index('a', '1'), index('d', '1')) == 3


def test_reflections():
    rotated, flipped_rows, flipped_cols = reflections(index('b', '2'))
    assert rotated == index('f', '6')
    assert flipped_rows == index('b', '6')
    assert flipped_cols == index('f', '2')
    d4 = index('d', '4')
    assert reflections(d4) == (d4, d4, d4)


def test_in_bounds_and_corners():
    assert in_bounds('a', '1')
    assert in_bounds('g', '7')
    assert not in_bounds('h', '1')
    assert not in_bounds('a', '8')
    assert not in_bounds('', '')
    assert len(PLAYABLE) == 49
    assert CORNERS == {index('a', '1'), index('a', '7'), index('g', '1'), index('g', '7')}


def test_piece_colors():
    assert RED.opposite() == BLUE and BLUE.opposite() == RED
    assert EMPTY.opposite() == EMPTY
    assert RED.is_piece and BLUE.is_piece
    assert not EMPTY.is_piece and not BLOCKED.is_piece
    assert str(RED) == "Red"
