"""Board representation for Noventagrados.

盤面のデータ構造。

駒（Piece）はイミュータブル（frozen=True）なので複製の必要がない。
マス（Cell）と盤面（Board）は可変で、盤面を外部に渡すときは必ずコピーを返す。
外部のコードがコピー経由で内部状態を書き換えることはできない。
"""

from __future__ import annotations

from dataclasses import dataclass

from noventagrados.game.types import BOARD_SIZE, Color, Coordinate, PieceKind


@dataclass(frozen=True)  # イミュータブル（変更不可）なデータクラス
class Piece:
    """A piece: its kind and its side."""

    kind: PieceKind
    color: Color


@dataclass
class Cell:
    """One square of the board, bound to a coordinate for its whole life.

    1つのマス。座標は固定で、駒は0個か1個。
    """

    coordinate: Coordinate
    piece: Piece | None = None

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    def place(self, piece: Piece) -> None:
        """駒を置く。既に駒があれば上書きする。"""
        self.piece = piece

    def remove_piece(self) -> None:
        self.piece = None

    def copy(self) -> Cell:
        # Piece はイミュータブルなので参照を共有しても安全
        return Cell(self.coordinate, self.piece)


class Board:
    """Fixed 7x7 grid of cells.

    7×7 = 49マスの盤面。生成時にすべてのマスを空で作り、サイズは変わらない。

    読み出し系のメソッド（cell_at, cells, occupied）はマスのコピーを返す。
    盤面を変更できるのは place() と remove_piece() だけ。
    """

    def __init__(self) -> None:
        self._cells: list[list[Cell]] = [
            [Cell(Coordinate(row, col)) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    @property
    def size(self) -> int:
        """行数（= 列数）。"""
        return BOARD_SIZE

    def is_in_bounds(self, coordinate: Coordinate) -> bool:
        row, col = coordinate
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def place(self, piece: Piece | None, coordinate: Coordinate | None) -> None:
        """Put `piece` at `coordinate`, overwriting any previous occupant.

        どちらかが None、または盤外の座標なら何もしない。
        """
        if piece is None or coordinate is None:
            return
        cell = self._cell(coordinate)
        if cell is not None:
            cell.place(piece)

    def remove_piece(self, coordinate: Coordinate | None) -> None:
        """Clear the cell at `coordinate`. 盤外なら何もしない。"""
        if coordinate is None:
            return
        cell = self._cell(coordinate)
        if cell is not None:
            cell.remove_piece()

    def cell_at(self, coordinate: Coordinate) -> Cell | None:
        """Return a copy of the cell at `coordinate`, or None if off-board."""
        cell = self._cell(coordinate)
        return cell.copy() if cell is not None else None

    def piece_at(self, coordinate: Coordinate) -> Piece | None:
        """Return the piece at `coordinate`, or None (empty or off-board)."""
        cell = self._cell(coordinate)
        return cell.piece if cell is not None else None

    def cells(self) -> list[Cell]:
        """Return copies of all 49 cells in row-major order."""
        return [cell.copy() for row in self._cells for cell in row]

    def occupied(self) -> list[Cell]:
        """Return copies of the non-empty cells in row-major order."""
        return [cell.copy() for row in self._cells for cell in row if not cell.is_empty]

    def clone(self) -> Board:
        """Return an independent board with the same pieces."""
        clone = Board()
        for cell in self.occupied():
            clone.place(cell.piece, cell.coordinate)
        return clone

    def _cell(self, coordinate: Coordinate) -> Cell | None:
        # 内部用: コピーせずに実体のマスを返す
        if not self.is_in_bounds(coordinate):
            return None
        row, col = coordinate
        return self._cells[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    # 可変オブジェクトなのでハッシュ不可
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        pieces = ", ".join(f"{c.coordinate.to_text()}={c.piece}" for c in self.occupied())
        return f"Board({pieces})"
