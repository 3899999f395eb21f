from gamecore.rules.verdict import LEGAL, Verdict, illegal

__all__ = [
    "LEGAL",
    "Verdict",
    "illegal",
]
