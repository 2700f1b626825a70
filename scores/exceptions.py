from rest_framework.exceptions import APIException


class ScoreOutOfRangeError(APIException):

    def __init__(self, group_name, score):
        self.status_code = 400
        self.detail = "Score {} for {} must be a whole number from 1 to 20".format(score, group_name)


class UnknownGroupError(APIException):

    def __init__(self, group_ids):
        self.status_code = 400
        self.detail = "Groups {} are not playing this hole".format(", ".join(str(gid) for gid in group_ids))


class PartialPersistenceError(APIException):
    """
    Saving a hole stopped part way through. Rows written before the failure
    are kept; the caller decides whether to retry the whole hole.
    """

    def __init__(self, group_id, saved_group_ids=None, reason=None):
        self.status_code = 500
        self.group_id = group_id
        self.saved_group_ids = list(saved_group_ids or [])
        self.detail = "Could not save scores: failed to update group {}".format(group_id)
        if reason:
            self.detail = "{} ({})".format(self.detail, reason)
