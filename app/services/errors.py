class ElectionError(Exception):
    code = "ElectionError"
    status_code = 400
    default_message = "Election operation failed."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    @property
    def message(self):
        return str(self)


class Unauthorized(ElectionError):
    code = "Unauthorized"
    status_code = 403
    default_message = "Caller is not allowed to perform this operation."


class NotFound(ElectionError):
    code = "NotFound"
    status_code = 404
    default_message = "Record not found."


class AlreadyVoted(ElectionError):
    code = "AlreadyVoted"
    status_code = 409
    default_message = "Voter has already voted in this election."


class VotingClosed(ElectionError):
    code = "VotingClosed"
    status_code = 409
    default_message = "Voting for this election has closed."


class VotingNotStarted(ElectionError):
    code = "VotingNotStarted"
    status_code = 409
    default_message = "Voting for this election has not started."


class InvalidCandidate(ElectionError):
    code = "InvalidCandidate"
    status_code = 404
    default_message = "Candidate does not exist in this election."


class AlreadyRegistered(ElectionError):
    code = "AlreadyRegistered"
    status_code = 409
    default_message = "Voter is already registered for this election."


class RegistrationClosed(ElectionError):
    code = "RegistrationClosed"
    status_code = 409
    default_message = "Registration for this election has closed."


class InvalidParameters(ElectionError):
    code = "InvalidParameters"
    status_code = 400
    default_message = "Invalid parameters."


__all__ = [
    "ElectionError",
    "Unauthorized",
    "NotFound",
    "AlreadyVoted",
    "VotingClosed",
    "VotingNotStarted",
    "InvalidCandidate",
    "AlreadyRegistered",
    "RegistrationClosed",
    "InvalidParameters",
]
