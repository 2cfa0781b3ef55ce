class ChallengeException(Exception):
    pass


class ChallengeDoesNotExist(ChallengeException):
    def __init__(self, challenge_id):
        self.challenge_id = challenge_id
        super().__init__()

    def __str__(self):
        return f'Challenge `{self.challenge_id}` does not exist'


class ChallengeAlreadyExists(ChallengeException):
    def __init__(self, name_or_id):
        self.name_or_id = name_or_id
        super().__init__()

    def __str__(self):
        return f'Challenge `{self.name_or_id}` already exists'
