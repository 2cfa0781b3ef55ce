import logging

import pendulum

from .dynamo import UserDynamo
from .exceptions import UserDoesNotExist, UserIdentityMismatch, UserNotAuthenticated
from .model import User

logger = logging.getLogger()


class UserManager:
    def __init__(self, clients, managers=None):
        managers = managers or {}
        managers['user'] = self

        self.clients = clients
        if 'dynamo' in clients:
            self.dynamo = UserDynamo(clients['dynamo'])
        if 'google' in clients:
            self.google_client = clients['google']

    def get_user(self, google_id):
        user_item = self.dynamo.get_user(google_id)
        return self.init_user(user_item) if user_item else None

    def init_user(self, user_item):
        return User(user_item, dynamo=getattr(self, 'dynamo', None))

    def authenticate(self, access_token):
        "Verify the access token with google and return its claims"
        try:
            return self.google_client.get_token_info(access_token)
        except ValueError as err:
            raise UserNotAuthenticated(str(err)) from err

    def get_current_user(self, access_token):
        """
        Merge the claims of the access token with the stored profile.
        Callers who never registered get a result flagged as such rather than an error.
        """
        info = self.authenticate(access_token)
        google_id = info['sub']
        user = self.get_user(google_id)
        resp = {
            'googleId': google_id,
            'email': info.get('email'),
            'name': None,
            'interactions': 0,
            'registered': False,
        }
        if user:
            resp['name'] = user.name
            resp['interactions'] = user.interactions
            resp['registered'] = True
        return resp

    def register_user(self, access_token, google_id, email, name=None, now=None):
        now = now or pendulum.now('utc')
        info = self.authenticate(access_token)
        if info['sub'] != google_id:
            raise UserIdentityMismatch(google_id, info['sub'])
        self.dynamo.set_user(google_id, email, name=name, now=now)
        return self.get_current_user(access_token)

    def get_ranking(self):
        "All users, fewest interactions first"
        users = [self.init_user(item) for item in self.dynamo.generate_all_users()]
        users.sort(key=lambda user: user.interactions)
        ranking = []
        for position, user in enumerate(users, start=1):
            resp = user.serialize()
            # users who signed up without a name are ranked by their email
            resp['name'] = f'{position}. {user.name or user.email}'
            ranking.append(resp)
        return ranking

    def increment_interactions(self, google_id):
        "Best-effort bump of the user's interactions counter"
        user = self.get_user(google_id)
        if not user:
            logger.warning(str(UserDoesNotExist(google_id)) + ', not incrementing interactions')
            return None
        return user.increment_interactions()

    def decrement_interactions(self, google_id):
        "Best-effort decrement of the user's interactions counter"
        user = self.get_user(google_id)
        if not user:
            logger.warning(str(UserDoesNotExist(google_id)) + ', not decrementing interactions')
            return None
        return user.decrement_interactions()
