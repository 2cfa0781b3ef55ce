import logging

import pendulum
from boto3.dynamodb.conditions import Attr

from desafia import keys

from . import exceptions

logger = logging.getLogger()


class CommentDynamo:
    def __init__(self, dynamo_client):
        self.client = dynamo_client

    def pk(self, comment_id, solution_id):
        return keys.comment_key(comment_id, solution_id)

    def get_comment(self, comment_id, solution_id):
        return self.client.get_item(self.pk(comment_id, solution_id))

    def add_comment(self, comment_id, solution_id, challenge_id, user_google_id, user_email, message, now=None):
        now = now or pendulum.now('utc')
        query_kwargs = {
            'Item': {
                **self.pk(comment_id, solution_id),
                'id': comment_id,
                'solutionId': solution_id,
                'challengeId': challenge_id,
                'userGoogleId': user_google_id,
                'userEmail': user_email,
                'message': message,
                'date': now.to_iso8601_string(),
            },
        }
        try:
            return self.client.add_item(query_kwargs)
        except self.client.exceptions.ConditionalCheckFailedException as err:
            raise exceptions.CommentAlreadyExists(comment_id) from err

    def delete_comment(self, comment_id, solution_id):
        return self.client.delete_item(self.pk(comment_id, solution_id))

    def generate_by_solution(self, solution_id):
        scan_kwargs = {
            'FilterExpression': Attr(keys.PARTITION_KEY).begins_with(keys.prefix_of(keys.Prefix.COMMENT))
            & Attr(keys.SORT_KEY).eq(keys.build(keys.Prefix.SOLUTION, solution_id)),
        }
        return self.client.generate_all_scan(scan_kwargs)
