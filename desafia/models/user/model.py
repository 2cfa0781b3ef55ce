import logging

from desafia import keys

logger = logging.getLogger()


class User:
    def __init__(self, user_item, dynamo=None):
        if dynamo:
            self.dynamo = dynamo
        self.item = user_item
        # older rows only carry the google id and email in their keys
        self.id = user_item.get('googleId') or keys.parse_id(user_item[keys.PARTITION_KEY])
        self.email = user_item.get('email') or keys.parse_id(user_item[keys.SORT_KEY])

    @property
    def name(self):
        return self.item.get('name')

    @property
    def interactions(self):
        return int(self.item.get('interactions', 0))

    def increment_interactions(self):
        item = self.dynamo.increment_interactions(self.id, self.email)
        if item:
            self.item = item
        return self

    def decrement_interactions(self):
        item = self.dynamo.decrement_interactions(self.id, self.email)
        if item:
            self.item = item
        return self

    def serialize(self):
        return {
            'googleId': self.id,
            'email': self.email,
            'name': self.name,
            'interactions': self.interactions,
        }
