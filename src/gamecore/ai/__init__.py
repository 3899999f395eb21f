from gamecore.ai.engine import choose_move, search_move
from gamecore.ai.search import AlphaBetaSearch, SearchProblem, SearchResult

__all__ = [
    "AlphaBetaSearch",
    "SearchProblem",
    "SearchResult",
    "choose_move",
    "search_move",
]
