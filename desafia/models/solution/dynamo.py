import json
import logging
from decimal import Decimal

import pendulum
from boto3.dynamodb.conditions import Attr

from desafia import keys

from .exceptions import AlreadyLiked, NotLiked, SolutionAlreadyExists

logger = logging.getLogger()


class SolutionDynamo:
    def __init__(self, dynamo_client):
        self.client = dynamo_client

    def pk(self, solution_id, challenge_id):
        return keys.solution_key(solution_id, challenge_id)

    def get_solution(self, solution_id, challenge_id):
        return self.client.get_item(self.pk(solution_id, challenge_id))

    def add_solution(self, solution_id, challenge_id, user_google_id, title, description, now=None):
        now = now or pendulum.now('utc')
        query_kwargs = {
            'Item': {
                **self.pk(solution_id, challenge_id),
                'id': solution_id,
                'challengeId': challenge_id,
                'userGoogleId': user_google_id,
                'title': title,
                # boto3 refuses floats, arbitrary json has to go in with decimals
                'description': json.loads(json.dumps(description), parse_float=Decimal),
                'likes': {'count': 0, 'users': {}},
                'createdAt': now.to_iso8601_string(),
            },
        }
        try:
            return self.client.add_item(query_kwargs)
        except self.client.exceptions.ConditionalCheckFailedException as err:
            raise SolutionAlreadyExists(solution_id) from err

    def delete_solution(self, solution_id, challenge_id):
        return self.client.delete_item(self.pk(solution_id, challenge_id))

    def reset_likes(self, solution_id, challenge_id):
        "Give a solution an empty likes map, for rows that predate per-user likes"
        return self.client.set_attributes(self.pk(solution_id, challenge_id), likes={'count': 0, 'users': {}})

    def add_like(self, solution_id, challenge_id, user_google_id):
        "Record the user's like and bump the count, in one write. Other users' likes are untouched"
        query_kwargs = {
            'Key': self.pk(solution_id, challenge_id),
            'UpdateExpression': 'SET #likes.#users.#uid = :one, #likes.#count = #likes.#count + :one',
            'ConditionExpression': 'attribute_not_exists(#likes.#users.#uid) OR #likes.#users.#uid = :zero',
            'ExpressionAttributeNames': {
                '#likes': 'likes',
                '#users': 'users',
                '#count': 'count',
                '#uid': user_google_id,
            },
            'ExpressionAttributeValues': {':one': 1, ':zero': 0},
        }
        try:
            return self.client.update_item(query_kwargs)
        except self.client.exceptions.ConditionalCheckFailedException as err:
            raise AlreadyLiked(user_google_id, solution_id) from err

    def delete_like(self, solution_id, challenge_id, user_google_id):
        query_kwargs = {
            'Key': self.pk(solution_id, challenge_id),
            'UpdateExpression': 'SET #likes.#users.#uid = :zero, #likes.#count = #likes.#count - :one',
            'ConditionExpression': '#likes.#users.#uid = :one',
            'ExpressionAttributeNames': {
                '#likes': 'likes',
                '#users': 'users',
                '#count': 'count',
                '#uid': user_google_id,
            },
            'ExpressionAttributeValues': {':one': 1, ':zero': 0},
        }
        try:
            return self.client.update_item(query_kwargs)
        except self.client.exceptions.ConditionalCheckFailedException as err:
            raise NotLiked(user_google_id, solution_id) from err

    def generate_by_challenge(self, challenge_id):
        scan_kwargs = {
            'FilterExpression': Attr(keys.PARTITION_KEY).begins_with(keys.prefix_of(keys.Prefix.SOLUTION))
            & Attr(keys.SORT_KEY).eq(keys.build(keys.Prefix.CHALLENGE, challenge_id)),
        }
        return self.client.generate_all_scan(scan_kwargs)
