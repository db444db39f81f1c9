class InvalidClueSet(ValueError):
    """Raised before searching when a clue set breaks its shape or range invariants."""


class SearchAborted(RuntimeError):
    def __init__(self, candidates_checked: int):
        super().__init__(f"Search aborted after {candidates_checked} candidates.")
        self.candidates_checked = candidates_checked
