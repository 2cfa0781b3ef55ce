import logging

from desafia import keys

logger = logging.getLogger()


class Solution:
    def __init__(self, solution_item, dynamo=None):
        if dynamo:
            self.dynamo = dynamo
        self.item = solution_item
        self.id = solution_item.get('id') or keys.parse_id(solution_item[keys.PARTITION_KEY])
        self.challenge_id = keys.parse_id(solution_item[keys.SORT_KEY])
        self.user_google_id = solution_item.get('userGoogleId')

    @property
    def has_likes_map(self):
        return isinstance(self.item.get('likes'), dict)

    @property
    def like_count(self):
        likes = self.item.get('likes')
        if isinstance(likes, dict):
            return int(likes.get('count', 0))
        # rows from before per-user likes stored a bare count
        return int(likes or 0)

    def is_liked_by(self, user_google_id):
        if not user_google_id or not self.has_likes_map:
            return False
        return self.item['likes'].get('users', {}).get(user_google_id) == 1

    def like(self, user_google_id):
        if not self.has_likes_map:
            self.item = self.dynamo.reset_likes(self.id, self.challenge_id)
        self.item = self.dynamo.add_like(self.id, self.challenge_id, user_google_id)
        return self

    def dislike(self, user_google_id):
        if not self.has_likes_map:
            self.item = self.dynamo.reset_likes(self.id, self.challenge_id)
        self.item = self.dynamo.delete_like(self.id, self.challenge_id, user_google_id)
        return self

    def delete(self):
        self.dynamo.delete_solution(self.id, self.challenge_id)
        return self

    def serialize(self, caller_user_id=None):
        return {
            'id': self.id,
            'challengeId': self.challenge_id,
            'title': self.item.get('title'),
            'description': self.item.get('description'),
            'likes': self.like_count,
            'liked': self.is_liked_by(caller_user_id),
            'userGoogleId': self.user_google_id,
            'createdAt': self.item.get('createdAt'),
        }
