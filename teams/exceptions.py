from rest_framework.exceptions import APIException


class MemberUnavailableError(APIException):

    def __init__(self, names):
        self.status_code = 400
        self.detail = "Already playing in another group on this hole: {}".format(", ".join(names))


class ArchivedHoleError(APIException):

    def __init__(self):
        self.status_code = 400
        self.detail = "Groups cannot be added to an archived hole"


class GroupMoveError(APIException):

    def __init__(self):
        self.status_code = 400
        self.detail = "A group cannot be moved to another hole"
