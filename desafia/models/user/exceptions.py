class UserException(Exception):
    pass


class UserNotAuthenticated(UserException):
    def __init__(self, reason):
        self.reason = reason
        super().__init__()

    def __str__(self):
        return f'Caller could not be authenticated: {self.reason}'


class UserDoesNotExist(UserException):
    def __init__(self, google_id):
        self.google_id = google_id
        super().__init__()

    def __str__(self):
        return f'User `{self.google_id}` does not exist'


class UserIdentityMismatch(UserException):
    def __init__(self, google_id, token_google_id):
        self.google_id = google_id
        self.token_google_id = token_google_id
        super().__init__()

    def __str__(self):
        return f'User `{self.google_id}` does not match the authenticated user `{self.token_google_id}`'
