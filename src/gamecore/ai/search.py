"""Depth-limited minimax with alpha-beta pruning.

Game specifics live behind ``SearchProblem``; the algorithm here only knows
how to enumerate, apply, score and prune. Scores are always from the
perspective of ``problem.root_side``: that side maximizes, the other minimizes.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from gamecore.errors import NoLegalMoves

logger = logging.getLogger(__name__)

State = TypeVar("State")
Move = TypeVar("Move")

INFINITY = float("inf")


class SearchProblem(ABC, Generic[State, Move]):
    """Game adapter consumed by ``AlphaBetaSearch``."""

    def __init__(self, root_side: Any) -> None:
        self.root_side = root_side

    @abstractmethod
    def side_to_move(self, state: State) -> Any:
        ...

    @abstractmethod
    def legal_moves(self, state: State) -> List[Move]:
        ...

    @abstractmethod
    def apply(self, state: State, move: Move) -> State:
        ...

    @abstractmethod
    def evaluate(self, state: State) -> float:
        """Heuristic score at the search horizon."""

    @abstractmethod
    def no_moves_score(self, state: State, depth: int, ply: int) -> float:
        """Score of a position where the side to move has no legal move."""

    def terminal_score(self, state: State, depth: int, ply: int) -> Optional[float]:
        """Score for positions decided without move generation, else None."""
        return None

    def order_moves(self, state: State, moves: List[Move]) -> List[Move]:
        return moves


@dataclass(slots=True)
class SearchResult(Generic[Move]):
    move: Move
    score: float
    nodes: int


class AlphaBetaSearch(Generic[State, Move]):
    """Runs one root search per call; keeps a node counter for diagnostics."""

    def __init__(self, problem: SearchProblem[State, Move]) -> None:
        self.problem = problem
        self.nodes = 0

    def search(self, state: State, depth: int) -> SearchResult[Move]:
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        problem = self.problem
        self.nodes = 1
        moves = problem.order_moves(state, problem.legal_moves(state))
        if not moves:
            raise NoLegalMoves(f"{problem.side_to_move(state)} has no legal moves")
        alpha = -INFINITY
        best_move = moves[0]
        best_score = -INFINITY
        for move in moves:
            score = self._alphabeta(problem.apply(state, move), depth - 1, alpha, INFINITY, 1)
            # Ties keep the earliest move in generation order.
            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, best_score)
        logger.debug(
            "root=%s depth=%d best=%r score=%s nodes=%d",
            problem.root_side, depth, best_move, best_score, self.nodes,
        )
        return SearchResult(move=best_move, score=best_score, nodes=self.nodes)

    def _alphabeta(self, state: State, depth: int, alpha: float, beta: float, ply: int) -> float:
        problem = self.problem
        self.nodes += 1
        terminal = problem.terminal_score(state, depth, ply)
        if terminal is not None:
            return terminal
        if depth <= 0:
            return problem.evaluate(state)
        moves = problem.order_moves(state, problem.legal_moves(state))
        if not moves:
            return problem.no_moves_score(state, depth, ply)

        if problem.side_to_move(state) == problem.root_side:
            value = -INFINITY
            for move in moves:
                value = max(value, self._alphabeta(problem.apply(state, move), depth - 1, alpha, beta, ply + 1))
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return value

        value = INFINITY
        for move in moves:
            value = min(value, self._alphabeta(problem.apply(state, move), depth - 1, alpha, beta, ply + 1))
            beta = min(beta, value)
            if beta <= alpha:
                break
        return value
