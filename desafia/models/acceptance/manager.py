import logging

import pendulum

from desafia import models
from desafia.models.challenge.exceptions import ChallengeDoesNotExist

from .dynamo import AcceptanceDynamo

logger = logging.getLogger()


class AcceptanceManager:
    def __init__(self, clients, managers=None):
        managers = managers or {}
        managers['acceptance'] = self
        self.challenge_manager = managers.get('challenge') or models.ChallengeManager(clients, managers=managers)
        self.user_manager = managers.get('user') or models.UserManager(clients, managers=managers)

        self.clients = clients
        if 'dynamo' in clients:
            self.dynamo = AcceptanceDynamo(clients['dynamo'])

    def is_accepted(self, user_google_id, challenge_id):
        if not user_google_id:
            return False
        return self.dynamo.get_acceptance(user_google_id, challenge_id) is not None

    def accept_challenge(self, user_google_id, challenge_id, now=None):
        now = now or pendulum.now('utc')
        challenge = self.challenge_manager.get_challenge(challenge_id)
        if not challenge:
            raise ChallengeDoesNotExist(challenge_id)
        # only a new edge is an interaction, re-accepting just refreshes the date
        if not self.dynamo.put_acceptance(user_google_id, challenge_id, now=now):
            self.user_manager.increment_interactions(user_google_id)
        return challenge

    def unaccept_challenge(self, user_google_id, challenge_id):
        "Remove the acceptance edge, if there is one"
        challenge = self.challenge_manager.get_challenge(challenge_id)
        if not challenge:
            raise ChallengeDoesNotExist(challenge_id)
        if self.dynamo.delete_acceptance(user_google_id, challenge_id):
            self.user_manager.decrement_interactions(user_google_id)
        else:
            logger.warning(f'User `{user_google_id}` had not accepted challenge `{challenge_id}`')
        return challenge
