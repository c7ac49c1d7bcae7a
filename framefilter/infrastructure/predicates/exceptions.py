"""
Exceptions raised by the predicate registry.
"""


class UnknownPredicateKindError(KeyError):
    """
    Raised when a filter references a predicate kind that was never registered.

    The registry is the authority on which kinds exist, so this signals a
    configuration/registry mismatch rather than a data problem.
    """

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(kind)

    def __str__(self) -> str:
        return f"Unknown predicate kind '{self.kind}'"
