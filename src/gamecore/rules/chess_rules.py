"""Chess move generation, check detection and game status.

Castling and en passant are not part of the rules; promotion is always to a
queen and happens inside ``ChessBoard.apply``.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from gamecore import constants
from gamecore.components.chess_board import ChessBoard
from gamecore.components.game_state import GameStatus
from gamecore.components.move import ChessMove, Position
from gamecore.components.piece import PieceKind
from gamecore.components.side import Side
from gamecore.constants import CHESS_SIZE
from gamecore.rules.verdict import LEGAL, Verdict, illegal

ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL = ((-1, -1), (-1, 1), (1, -1), (1, 1))
KING_STEPS = ORTHOGONAL + DIAGONAL
KNIGHT_JUMPS = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)
SLIDE_DIRECTIONS = {
    PieceKind.ROOK: ORTHOGONAL,
    PieceKind.BISHOP: DIAGONAL,
    PieceKind.QUEEN: KING_STEPS,
}


def pawn_direction(side: Side) -> int:
    return -1 if side is Side.WHITE else 1


def pawn_start_row(side: Side) -> int:
    return CHESS_SIZE - 2 if side is Side.WHITE else 1


def _resolve_strict(strict: Optional[bool]) -> bool:
    return constants.FILTER_SELF_CHECK if strict is None else strict


def piece_moves(board: ChessBoard, source: Position) -> Iterator[ChessMove]:
    """Pseudo-legal moves for the piece on ``source`` (own-king safety ignored)."""
    piece = board.get(source)
    if piece is None:
        return
    row, col = source
    grid = board.grid
    if piece.kind is PieceKind.PAWN:
        step = pawn_direction(piece.side)
        ahead = (row + step, col)
        if board.in_bounds(ahead) and grid[ahead[0]][ahead[1]] is None:
            yield ChessMove(source, ahead)
            double = (row + 2 * step, col)
            if row == pawn_start_row(piece.side) and board.in_bounds(double) and grid[double[0]][double[1]] is None:
                yield ChessMove(source, double)
        for dc in (-1, 1):
            target = (row + step, col + dc)
            if not board.in_bounds(target):
                continue
            occupant = grid[target[0]][target[1]]
            if occupant is not None and occupant.side is not piece.side:
                yield ChessMove(source, target)
        return
    if piece.kind in SLIDE_DIRECTIONS:
        for dr, dc in SLIDE_DIRECTIONS[piece.kind]:
            r, c = row + dr, col + dc
            while 0 <= r < CHESS_SIZE and 0 <= c < CHESS_SIZE:
                occupant = grid[r][c]
                if occupant is None:
                    yield ChessMove(source, (r, c))
                else:
                    if occupant.side is not piece.side:
                        yield ChessMove(source, (r, c))
                    break
                r += dr
                c += dc
        return
    offsets = KNIGHT_JUMPS if piece.kind is PieceKind.KNIGHT else KING_STEPS
    for dr, dc in offsets:
        r, c = row + dr, col + dc
        if not (0 <= r < CHESS_SIZE and 0 <= c < CHESS_SIZE):
            continue
        occupant = grid[r][c]
        if occupant is None or occupant.side is not piece.side:
            yield ChessMove(source, (r, c))


def pseudo_legal_moves(board: ChessBoard, side: Side) -> List[ChessMove]:
    moves: List[ChessMove] = []
    for pos, _ in board.pieces(side):
        moves.extend(piece_moves(board, pos))
    return moves


def is_square_attacked(board: ChessBoard, square: Position, by_side: Side) -> bool:
    """True when any piece of ``by_side`` could capture on ``square``."""
    row, col = square
    grid = board.grid
    # A pawn attacks diagonally forward, so look one row behind the square.
    pawn_row = row - pawn_direction(by_side)
    for dc in (-1, 1):
        c = col + dc
        if 0 <= pawn_row < CHESS_SIZE and 0 <= c < CHESS_SIZE:
            piece = grid[pawn_row][c]
            if piece is not None and piece.side is by_side and piece.kind is PieceKind.PAWN:
                return True
    for offsets, kind in ((KNIGHT_JUMPS, PieceKind.KNIGHT), (KING_STEPS, PieceKind.KING)):
        for dr, dc in offsets:
            r, c = row + dr, col + dc
            if 0 <= r < CHESS_SIZE and 0 <= c < CHESS_SIZE:
                piece = grid[r][c]
                if piece is not None and piece.side is by_side and piece.kind is kind:
                    return True
    for directions, sliders in (
        (ORTHOGONAL, (PieceKind.ROOK, PieceKind.QUEEN)),
        (DIAGONAL, (PieceKind.BISHOP, PieceKind.QUEEN)),
    ):
        for dr, dc in directions:
            r, c = row + dr, col + dc
            while 0 <= r < CHESS_SIZE and 0 <= c < CHESS_SIZE:
                piece = grid[r][c]
                if piece is not None:
                    if piece.side is by_side and piece.kind in sliders:
                        return True
                    break
                r += dr
                c += dc
    return False


def is_in_check(board: ChessBoard, side: Side) -> bool:
    king = board.king_square(side)
    if king is None:
        return False
    return is_square_attacked(board, king, side.opponent)


def leaves_king_safe(board: ChessBoard, move: ChessMove) -> bool:
    mover = board.get(move.source)
    if mover is None:
        return False
    return not is_in_check(board.apply(move), mover.side)


def legal_moves(
    board: ChessBoard,
    side: Side | None = None,
    *,
    strict: bool | None = None,
) -> List[ChessMove]:
    """All moves ``side`` (default: the side to move) may play.

    With ``strict`` (the default, see ``constants.FILTER_SELF_CHECK``) moves
    that leave the mover's king attacked are dropped. ``strict=False`` yields
    the pseudo-legal set.
    """
    side = board.side_to_move if side is None else side
    moves = pseudo_legal_moves(board, side)
    if not _resolve_strict(strict):
        return moves
    return [move for move in moves if leaves_king_safe(board, move)]


def is_capture(board: ChessBoard, move: ChessMove) -> bool:
    return board.grid[move.target[0]][move.target[1]] is not None


def captures_first(board: ChessBoard, moves: List[ChessMove]) -> List[ChessMove]:
    """Stable reorder putting captures ahead of quiet moves."""
    captures: List[ChessMove] = []
    quiets: List[ChessMove] = []
    for move in moves:
        if is_capture(board, move):
            captures.append(move)
        else:
            quiets.append(move)
    return captures + quiets


def validate_move(board: ChessBoard, move: ChessMove, *, strict: bool | None = None) -> Verdict:
    """Check ``move`` for the side to move and explain any rejection."""
    if not (board.in_bounds(move.source) and board.in_bounds(move.target)):
        return illegal("position out of bounds")
    piece = board.get(move.source)
    if piece is None:
        return illegal("no piece on source square")
    if piece.side is not board.side_to_move:
        return illegal(f"it is {board.side_to_move.value}'s turn")
    occupant = board.get(move.target)
    if occupant is not None and occupant.side is piece.side:
        return illegal("destination is occupied by an own piece")
    if move not in set(piece_moves(board, move.source)):
        return illegal(f"a {piece.kind.value} cannot move that way")
    if _resolve_strict(strict) and not leaves_king_safe(board, move):
        return illegal("move leaves the king in check")
    return LEGAL


def game_status(board: ChessBoard, *, strict: bool | None = None) -> Tuple[GameStatus, Optional[Side]]:
    """Status of the side to move and, for a finished game, the winner."""
    side = board.side_to_move
    if board.king_square(side) is None:
        # Only reachable with pseudo-legal play, where a king can be taken.
        return GameStatus.CHECKMATE, side.opponent
    in_check = is_in_check(board, side)
    if not legal_moves(board, side, strict=strict):
        if in_check:
            return GameStatus.CHECKMATE, side.opponent
        return GameStatus.STALEMATE, None
    if in_check:
        return GameStatus.CHECK, None
    return GameStatus.IN_PROGRESS, None
