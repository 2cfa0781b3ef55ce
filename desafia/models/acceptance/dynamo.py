import logging

import pendulum

from desafia import keys

logger = logging.getLogger()


class AcceptanceDynamo:
    def __init__(self, dynamo_client):
        self.client = dynamo_client

    def pk(self, user_google_id, challenge_id):
        return keys.acceptance_key(user_google_id, challenge_id)

    def get_acceptance(self, user_google_id, challenge_id):
        return self.client.get_item(self.pk(user_google_id, challenge_id))

    def put_acceptance(self, user_google_id, challenge_id, now=None):
        "Accepting twice just overwrites the edge with a fresh date. Returns the edge that was replaced, if any"
        now = now or pendulum.now('utc')
        item = {
            **self.pk(user_google_id, challenge_id),
            'userGoogleId': user_google_id,
            'challengeId': challenge_id,
            'date': now.to_iso8601_string(),
        }
        return self.client.put_item(item)

    def delete_acceptance(self, user_google_id, challenge_id):
        return self.client.delete_item(self.pk(user_google_id, challenge_id))
