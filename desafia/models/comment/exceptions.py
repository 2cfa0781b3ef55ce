class CommentException(Exception):
    pass


class CommentDoesNotExist(CommentException):
    def __init__(self, comment_id):
        self.comment_id = comment_id
        super().__init__()

    def __str__(self):
        return f'Comment `{self.comment_id}` does not exist'


class CommentAlreadyExists(CommentException):
    def __init__(self, comment_id):
        self.comment_id = comment_id
        super().__init__()

    def __str__(self):
        return f'Comment `{self.comment_id}` already exists'


class NotCommentAuthor(CommentException):
    def __init__(self, user_id, comment_id):
        self.user_id = user_id
        self.comment_id = comment_id
        super().__init__()

    def __str__(self):
        return f'User `{self.user_id}` is not the author of comment `{self.comment_id}`'
