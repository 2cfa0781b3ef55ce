import pendulum

from desafia import keys


class Comment:
    def __init__(self, comment_item, dynamo=None):
        if dynamo:
            self.dynamo = dynamo
        self.item = comment_item
        self.id = comment_item.get('id') or keys.parse_id(comment_item[keys.PARTITION_KEY])
        self.solution_id = keys.parse_id(comment_item[keys.SORT_KEY])
        self.user_google_id = comment_item.get('userGoogleId')
        date = comment_item.get('date')
        self.created_at = pendulum.parse(date) if date else None

    def delete(self):
        self.dynamo.delete_comment(self.id, self.solution_id)
        return self

    def serialize(self):
        return {
            'id': self.id,
            'solutionId': self.solution_id,
            'challengeId': self.item.get('challengeId'),
            'userGoogleId': self.user_google_id,
            'userEmail': self.item.get('userEmail'),
            'message': self.item.get('message'),
            'date': self.item.get('date'),
        }
