"""Tests for Board representation."""

from noventagrados.game.board import Board, Cell, Piece
from noventagrados.game.types import Color, Coordinate, PieceKind

WHITE_PAWN = Piece(PieceKind.PAWN, Color.WHITE)
BLACK_QUEEN = Piece(PieceKind.QUEEN, Color.BLACK)


class TestPieceAndCell:
    def test_piece_equality(self) -> None:
        assert Piece(PieceKind.PAWN, Color.WHITE) == WHITE_PAWN
        assert Piece(PieceKind.PAWN, Color.BLACK) != WHITE_PAWN

    def test_cell_starts_empty(self) -> None:
        cell = Cell(Coordinate(1, 1))
        assert cell.is_empty

    def test_cell_place_and_remove(self) -> None:
        cell = Cell(Coordinate(1, 1))
        cell.place(WHITE_PAWN)
        assert cell.piece == WHITE_PAWN
        cell.remove_piece()
        assert cell.is_empty

    def test_cell_copy_is_independent(self) -> None:
        cell = Cell(Coordinate(1, 1), WHITE_PAWN)
        copy = cell.copy()
        copy.remove_piece()
        assert cell.piece == WHITE_PAWN


class TestNewBoard:
    def test_size(self) -> None:
        assert Board().size == 7

    def test_all_cells_empty(self) -> None:
        cells = Board().cells()
        assert len(cells) == 49
        assert all(cell.is_empty for cell in cells)

    def test_cells_row_major(self) -> None:
        cells = Board().cells()
        assert cells[0].coordinate == Coordinate(0, 0)
        assert cells[1].coordinate == Coordinate(0, 1)
        assert cells[7].coordinate == Coordinate(1, 0)
        assert cells[48].coordinate == Coordinate(6, 6)

    def test_coordinates_unique(self) -> None:
        coordinates = {cell.coordinate for cell in Board().cells()}
        assert len(coordinates) == 49


class TestBounds:
    def test_in_bounds(self) -> None:
        board = Board()
        assert board.is_in_bounds(Coordinate(0, 0))
        assert board.is_in_bounds(Coordinate(6, 6))

    def test_out_of_bounds(self) -> None:
        board = Board()
        for row, col in [(-1, 0), (0, -1), (7, 0), (0, 7), (7, 7), (-1, 8)]:
            assert not board.is_in_bounds(Coordinate(row, col))
            assert board.cell_at(Coordinate(row, col)) is None


class TestBoardOperations:
    def test_place(self) -> None:
        board = Board()
        board.place(WHITE_PAWN, Coordinate(2, 3))
        assert board.piece_at(Coordinate(2, 3)) == WHITE_PAWN

    def test_place_overwrites(self) -> None:
        board = Board()
        board.place(WHITE_PAWN, Coordinate(2, 3))
        board.place(BLACK_QUEEN, Coordinate(2, 3))
        assert board.piece_at(Coordinate(2, 3)) == BLACK_QUEEN

    def test_place_none_is_noop(self) -> None:
        board = Board()
        board.place(None, Coordinate(2, 3))
        board.place(WHITE_PAWN, None)
        assert board == Board()

    def test_place_off_board_is_noop(self) -> None:
        board = Board()
        board.place(WHITE_PAWN, Coordinate(7, 0))
        assert board == Board()

    def test_remove_piece(self) -> None:
        board = Board()
        board.place(WHITE_PAWN, Coordinate(2, 3))
        board.remove_piece(Coordinate(2, 3))
        assert board.piece_at(Coordinate(2, 3)) is None

    def test_remove_off_board_is_noop(self) -> None:
        board = Board()
        board.remove_piece(Coordinate(-1, -1))
        assert board == Board()

    def test_cell_at_returns_copy(self) -> None:
        board = Board()
        board.place(WHITE_PAWN, Coordinate(2, 3))
        cell = board.cell_at(Coordinate(2, 3))
        assert cell is not None
        cell.remove_piece()
        assert board.piece_at(Coordinate(2, 3)) == WHITE_PAWN  # Original unchanged

    def test_occupied(self) -> None:
        board = Board()
        board.place(BLACK_QUEEN, Coordinate(5, 5))
        board.place(WHITE_PAWN, Coordinate(0, 1))
        occupied = board.occupied()
        assert [cell.coordinate for cell in occupied] == [Coordinate(0, 1), Coordinate(5, 5)]


class TestClone:
    def test_clone_equal(self) -> None:
        board = Board()
        board.place(WHITE_PAWN, Coordinate(0, 1))
        board.place(BLACK_QUEEN, Coordinate(6, 6))
        assert board.clone() == board

    def test_clone_independent(self) -> None:
        board = Board()
        board.place(WHITE_PAWN, Coordinate(0, 1))
        clone = board.clone()
        clone.remove_piece(Coordinate(0, 1))
        clone.place(BLACK_QUEEN, Coordinate(3, 3))
        assert board.piece_at(Coordinate(0, 1)) == WHITE_PAWN
        assert board.piece_at(Coordinate(3, 3)) is None

    def test_boards_differ(self) -> None:
        board = Board()
        board.place(WHITE_PAWN, Coordinate(0, 1))
        assert board != Board()
