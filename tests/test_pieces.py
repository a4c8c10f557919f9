from __future__ import annotations

import random

import pytest

from tetromino_game.game import Color, Piece, PieceType, Rotation, base_coordinates
from tetromino_game.game.pieces import LAYOUTS


@pytest.mark.parametrize("rotation", list(Rotation))
def test_rotation_left_right_are_inverse(rotation: Rotation) -> None:
    assert rotation.rotate_left().rotate_right() == rotation
    assert rotation.rotate_right().rotate_left() == rotation


def test_rotation_wraps_both_ways() -> None:
    assert Rotation.UP.rotate_left() is Rotation.LEFT
    assert Rotation.LEFT.rotate_right() is Rotation.UP
    assert Rotation.RIGHT.rotate_right() is Rotation.DOWN


@pytest.mark.parametrize("kind", list(PieceType))
@pytest.mark.parametrize("rotation", list(Rotation))
def test_base_coordinates_are_four_distinct_cells(kind: PieceType, rotation: Rotation) -> None:
    coords = base_coordinates(kind, rotation)
    assert len(coords) == 4
    assert len(set(coords)) == 4


def test_layout_table_sizes_follow_symmetry() -> None:
    assert len(LAYOUTS[PieceType.O]) == 1
    for kind in (PieceType.I, PieceType.S, PieceType.Z):
        assert len(LAYOUTS[kind]) == 2
    for kind in (PieceType.J, PieceType.L, PieceType.T):
        assert len(LAYOUTS[kind]) == 4


def test_short_tables_wrap_on_their_own_length() -> None:
    assert base_coordinates(PieceType.I, Rotation.DOWN) == base_coordinates(PieceType.I, Rotation.UP)
    assert base_coordinates(PieceType.I, Rotation.LEFT) == base_coordinates(PieceType.I, Rotation.RIGHT)
    assert base_coordinates(PieceType.O, Rotation.LEFT) == base_coordinates(PieceType.O, Rotation.UP)


def test_coordinates_translate_by_anchor() -> None:
    piece = Piece(PieceType.T, Rotation.UP, (4, 2), Color.BLUE)
    assert piece.coordinates() == [(4, 1), (3, 2), (4, 2), (5, 2)]


def test_transforms_return_new_pieces() -> None:
    piece = Piece(PieceType.L, Rotation.UP, (3, 3), Color.GREEN)

    assert piece.move_left().anchor == (2, 3)
    assert piece.move_right().anchor == (4, 3)
    assert piece.move_down().anchor == (3, 4)
    assert piece.rotate_right().rotation is Rotation.RIGHT
    assert piece.rotate_left().rotation is Rotation.LEFT

    moved = piece.move_down().rotate_right()
    assert moved.kind is PieceType.L
    assert moved.color is Color.GREEN
    # original untouched
    assert piece == Piece(PieceType.L, Rotation.UP, (3, 3), Color.GREEN)


def test_random_piece_uses_source_for_kind_and_color() -> None:
    rng = random.Random(7)
    piece = Piece.random(rng, anchor=(5, 0))
    assert piece.kind in list(PieceType)
    assert piece.color in list(Color)
    assert piece.rotation is Rotation.UP
    assert piece.anchor == (5, 0)


def test_random_helpers_draw_from_any_choice_source(make_source) -> None:
    source = make_source(PieceType.S, Color.WHITE)

    assert PieceType.random(source) is PieceType.S
    assert Color.random(source) is Color.WHITE
    assert Piece.random(source, anchor=(1, 2)) == Piece(PieceType.S, Rotation.UP, (1, 2), Color.WHITE)
    assert source.calls == 4


def test_color_display_triples() -> None:
    assert Color.RED.rgb == (1.0, 0.0, 0.0)
    assert Color.YELLOW.rgb == (1.0, 1.0, 0.0)
    assert Color.MAGENTA.rgb255 == (255, 0, 255)
    assert len(Color) == 6
