import functools
import logging

import pendulum
from boto3.dynamodb.conditions import Attr

from desafia import keys

from .exceptions import ChallengeAlreadyExists

logger = logging.getLogger()


class ChallengeDynamo:
    def __init__(self, dynamo_client):
        self.client = dynamo_client

    def pk(self, name_or_id, user_google_id):
        return keys.challenge_key(name_or_id, user_google_id)

    def add_challenge(
        self,
        challenge_id,
        user_google_id,
        name=None,
        description=None,
        tags=None,
        categories=None,
        image_url=None,
        details=None,
        now=None,
    ):
        now = now or pendulum.now('utc')
        query_kwargs = {
            'Item': {
                **self.pk(name or challenge_id, user_google_id),
                'id': challenge_id,
                'userGoogleId': user_google_id,
                'the_one': False,
                'createdAt': now.to_iso8601_string(),
            },
        }
        if name:
            query_kwargs['Item']['name'] = name
        if description:
            query_kwargs['Item']['description'] = description
        if tags:
            query_kwargs['Item']['tags'] = tags
        if categories:
            query_kwargs['Item']['categories'] = categories
        if image_url:
            query_kwargs['Item']['imageUrl'] = image_url
        if details:
            query_kwargs['Item']['details'] = details
        try:
            return self.client.add_item(query_kwargs)
        except self.client.exceptions.ConditionalCheckFailedException as err:
            raise ChallengeAlreadyExists(name or challenge_id) from err

    def scan_kwargs(self, *conditions):
        conditions = [Attr(keys.PARTITION_KEY).begins_with(keys.prefix_of(keys.Prefix.CHALLENGE)), *conditions]
        return {'FilterExpression': functools.reduce(lambda a, b: a & b, conditions)}

    def get_challenge(self, challenge_id):
        # challenges are keyed by name, so finding one by id means a scan
        scan_kwargs = self.scan_kwargs(Attr('id').eq(challenge_id))
        return next(self.client.generate_all_scan(scan_kwargs), None)

    def get_the_one(self):
        scan_kwargs = self.scan_kwargs(Attr('the_one').eq(True))
        return next(self.client.generate_all_scan(scan_kwargs), None)

    def generate_challenges(self, search=None, categories=None, tags=None):
        "All challenges matching every given predicate, in table iteration order"
        conditions = []
        if search:
            conditions.append(Attr('name').contains(search))
        for category in categories or []:
            conditions.append(Attr('categories').contains(category))
        for tag in tags or []:
            conditions.append(Attr('tags').contains(tag))
        return self.client.generate_all_scan(self.scan_kwargs(*conditions))

    def set_the_one(self, challenge_item, value):
        key = {k: challenge_item[k] for k in (keys.PARTITION_KEY, keys.SORT_KEY)}
        return self.client.set_attributes(key, the_one=value)
