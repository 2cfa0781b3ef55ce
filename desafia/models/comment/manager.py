import logging
import uuid

import pendulum

from desafia import models
from desafia.models.solution.exceptions import SolutionDoesNotExist

from .dynamo import CommentDynamo
from .exceptions import CommentDoesNotExist, NotCommentAuthor
from .model import Comment

logger = logging.getLogger()


class CommentManager:
    def __init__(self, clients, managers=None):
        managers = managers or {}
        managers['comment'] = self
        self.solution_manager = managers.get('solution') or models.SolutionManager(clients, managers=managers)
        self.user_manager = managers.get('user') or models.UserManager(clients, managers=managers)

        self.clients = clients
        if 'dynamo' in clients:
            self.dynamo = CommentDynamo(clients['dynamo'])

    def get_comment(self, comment_id, solution_id):
        comment_item = self.dynamo.get_comment(comment_id, solution_id)
        return self.init_comment(comment_item) if comment_item else None

    def init_comment(self, comment_item):
        return Comment(comment_item, dynamo=getattr(self, 'dynamo', None))

    def add_comment(self, solution_id, challenge_id, user_google_id, user_email, message, comment_id=None, now=None):
        now = now or pendulum.now('utc')
        if not self.solution_manager.get_solution(solution_id, challenge_id):
            raise SolutionDoesNotExist(solution_id)

        comment_id = comment_id or str(uuid.uuid4())
        comment_item = self.dynamo.add_comment(
            comment_id, solution_id, challenge_id, user_google_id, user_email, message, now=now
        )
        self.user_manager.increment_interactions(user_google_id)
        return self.init_comment(comment_item)

    def list_comments(self, solution_id, limit=None):
        "The `limit` most recent comments on the solution, oldest first"
        comments = [self.init_comment(item) for item in self.dynamo.generate_by_solution(solution_id)]
        # undated rows sort as the oldest
        comments.sort(key=lambda comment: (comment.created_at is not None, comment.created_at))
        if limit is None:
            return comments
        return comments[max(len(comments) - limit, 0) :]

    def delete_comment(self, comment_id, solution_id, user_google_id):
        "Only the author may delete a comment, and it costs them the interaction it earned"
        comment = self.get_comment(comment_id, solution_id)
        if not comment:
            raise CommentDoesNotExist(comment_id)
        if comment.user_google_id != user_google_id:
            raise NotCommentAuthor(user_google_id, comment_id)
        comment.delete()
        self.user_manager.decrement_interactions(comment.user_google_id)
        return comment
