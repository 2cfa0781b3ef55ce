import logging

import pendulum
from boto3.dynamodb.conditions import Attr, Key

from desafia import keys

logger = logging.getLogger()


class UserDynamo:
    def __init__(self, dynamo_client):
        self.client = dynamo_client

    def pk(self, google_id, email):
        return keys.user_key(google_id, email)

    def get_user(self, google_id):
        # the sort key holds the email, which callers don't always know
        query_kwargs = {
            'KeyConditionExpression': Key(keys.PARTITION_KEY).eq(keys.build(keys.Prefix.USER, google_id))
            & Key(keys.SORT_KEY).begins_with(keys.prefix_of(keys.Prefix.USER)),
        }
        return self.client.query_head(query_kwargs)

    def set_user(self, google_id, email, name=None, now=None):
        "Create the user if needed, else update its profile. Never resets the interactions counter"
        now = now or pendulum.now('utc')
        set_exps = [
            '#googleId = :googleId',
            '#email = :email',
            '#signedUpAt = if_not_exists(#signedUpAt, :now)',
            '#interactions = if_not_exists(#interactions, :zero)',
        ]
        names = {
            '#googleId': 'googleId',
            '#email': 'email',
            '#signedUpAt': 'signedUpAt',
            '#interactions': 'interactions',
        }
        values = {
            ':googleId': google_id,
            ':email': email,
            ':now': now.to_iso8601_string(),
            ':zero': 0,
        }
        if name:
            set_exps.append('#name = :name')
            names['#name'] = 'name'
            values[':name'] = name
        query_kwargs = {
            'Key': self.pk(google_id, email),
            'UpdateExpression': 'SET ' + ', '.join(set_exps),
            'ExpressionAttributeNames': names,
            'ExpressionAttributeValues': values,
            'ReturnValues': 'ALL_NEW',
        }
        return self.client.table.update_item(**query_kwargs).get('Attributes')

    def increment_interactions(self, google_id, email):
        return self.client.increment_count(self.pk(google_id, email), 'interactions')

    def decrement_interactions(self, google_id, email):
        return self.client.decrement_count(self.pk(google_id, email), 'interactions')

    def generate_all_users(self):
        # acceptance edges share the USER# partition prefix, so the sort key prefix matters too
        scan_kwargs = {
            'FilterExpression': Attr(keys.PARTITION_KEY).begins_with(keys.prefix_of(keys.Prefix.USER))
            & Attr(keys.SORT_KEY).begins_with(keys.prefix_of(keys.Prefix.USER)),
        }
        return self.client.generate_all_scan(scan_kwargs)
