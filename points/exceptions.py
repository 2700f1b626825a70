class InvalidScoreError(ValueError):
    """Raised when a raw hole score is not an integer between 1 and 20."""

    def __init__(self, group_id, score):
        self.group_id = group_id
        self.score = score
        super().__init__("Invalid score {!r} for group {}".format(score, group_id))
