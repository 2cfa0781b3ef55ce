from desafia import keys


class Challenge:
    def __init__(self, challenge_item, dynamo=None):
        if dynamo:
            self.dynamo = dynamo
        self.item = challenge_item
        self.id = challenge_item['id']
        self.user_google_id = keys.parse_id(challenge_item[keys.SORT_KEY])

    @property
    def is_the_one(self):
        return bool(self.item.get('the_one'))

    def serialize(self, accepted=None):
        resp = {
            'id': self.id,
            'name': self.item.get('name'),
            'description': self.item.get('description'),
            'details': self.item.get('details'),
            'tags': self.item.get('tags') or [],
            'categories': self.item.get('categories') or [],
            'imageUrl': self.item.get('imageUrl'),
            'the_one': self.is_the_one,
            'userGoogleId': self.user_google_id,
        }
        if accepted is not None:
            resp['accepted'] = accepted
        return resp
