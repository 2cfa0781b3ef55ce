import logging
import uuid

import pendulum

from .dynamo import ChallengeDynamo
from .exceptions import ChallengeDoesNotExist
from .images import get_challenge_image
from .model import Challenge

logger = logging.getLogger()


class ChallengeManager:

    page_size = 5

    def __init__(self, clients, managers=None):
        managers = managers or {}
        managers['challenge'] = self

        self.clients = clients
        if 'dynamo' in clients:
            self.dynamo = ChallengeDynamo(clients['dynamo'])

    def get_challenge(self, challenge_id):
        challenge_item = self.dynamo.get_challenge(challenge_id)
        return self.init_challenge(challenge_item) if challenge_item else None

    def init_challenge(self, challenge_item):
        return Challenge(challenge_item, dynamo=getattr(self, 'dynamo', None))

    def get_the_one(self):
        challenge_item = self.dynamo.get_the_one()
        return self.init_challenge(challenge_item) if challenge_item else None

    def add_challenge(
        self,
        user_google_id,
        challenge_id=None,
        name=None,
        description=None,
        tags=None,
        categories=None,
        details=None,
        now=None,
    ):
        now = now or pendulum.now('utc')
        challenge_id = challenge_id or str(uuid.uuid4())
        challenge_item = self.dynamo.add_challenge(
            challenge_id,
            user_google_id,
            name=name,
            description=description,
            tags=tags,
            categories=categories,
            image_url=get_challenge_image(categories),
            details=details,
            now=now,
        )
        return self.init_challenge(challenge_item)

    def list_challenges(self, search=None, tags=None, categories=None, page=0):
        """
        Filter all challenges and return one page of them along with the total match count.
        Order is whatever order the table scan yields, which dynamo does not guarantee to be stable.
        """
        challenge_items = list(self.dynamo.generate_challenges(search=search, categories=categories, tags=tags))
        start = page * self.page_size
        page_items = challenge_items[start : start + self.page_size]
        return {
            'count': len(challenge_items),
            'challenges': [self.init_challenge(item) for item in page_items],
        }

    def set_the_one(self, challenge_id):
        "Feature the given challenge, un-featuring whichever one was featured before"
        challenge = self.get_challenge(challenge_id)
        if not challenge:
            raise ChallengeDoesNotExist(challenge_id)
        previous = self.get_the_one()
        if previous and previous.id != challenge.id:
            self.dynamo.set_the_one(previous.item, False)
        challenge.item = self.dynamo.set_the_one(challenge.item, True)
        return challenge
