class SolutionException(Exception):
    pass


class SolutionDoesNotExist(SolutionException):
    def __init__(self, solution_id):
        self.solution_id = solution_id
        super().__init__()

    def __str__(self):
        return f'Solution `{self.solution_id}` does not exist'


class SolutionAlreadyExists(SolutionException):
    def __init__(self, solution_id):
        self.solution_id = solution_id
        super().__init__()

    def __str__(self):
        return f'Solution `{self.solution_id}` already exists'


class AlreadyLiked(SolutionException):
    def __init__(self, user_id, solution_id):
        self.user_id = user_id
        self.solution_id = solution_id
        super().__init__()

    def __str__(self):
        return f'User `{self.user_id}` has already liked solution `{self.solution_id}`'


class NotLiked(SolutionException):
    def __init__(self, user_id, solution_id):
        self.user_id = user_id
        self.solution_id = solution_id
        super().__init__()

    def __str__(self):
        return f'User `{self.user_id}` has not liked solution `{self.solution_id}`'


class NotSolutionAuthor(SolutionException):
    def __init__(self, user_id, solution_id):
        self.user_id = user_id
        self.solution_id = solution_id
        super().__init__()

    def __str__(self):
        return f'User `{self.user_id}` is not the author of solution `{self.solution_id}`'
