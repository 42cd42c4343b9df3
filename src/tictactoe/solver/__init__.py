from tictactoe.solver.negamax import NegamaxSolver
from tictactoe.solver.ordering import MoveScorer, MoveSorter, static_score, threat_score
from tictactoe.solver.transposition import TABLE_SIZE, TranspositionTable, TTEntry

__all__ = [
    "NegamaxSolver",
    "MoveScorer",
    "MoveSorter",
    "static_score",
    "threat_score",
    "TABLE_SIZE",
    "TranspositionTable",
    "TTEntry",
]
