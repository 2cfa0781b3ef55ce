"""
Composite key convention of the single DESAFIA_AI table.

Every row is addressed by a `PK`/`SK` pair of `<PREFIX>#<id>` strings.
Relationships are expressed by which entity sits in which half of the key,
so "children of X" becomes a scan on a PK prefix with an exact SK.
"""

PARTITION_KEY = 'PK'
SORT_KEY = 'SK'
SEPARATOR = '#'


class Prefix:
    USER = 'USER'
    CHALLENGE = 'CHALLENGE'
    SOLUTION = 'SOLUTION'
    COMMENT = 'COMMENT'

    _ALL = (USER, CHALLENGE, SOLUTION, COMMENT)


def build(prefix, entity_id):
    assert prefix in Prefix._ALL, f'Invalid key prefix: `{prefix}`'
    return f'{prefix}{SEPARATOR}{entity_id}'


def prefix_of(prefix):
    "The string every key of the given kind starts with, for begins_with() filters"
    assert prefix in Prefix._ALL, f'Invalid key prefix: `{prefix}`'
    return f'{prefix}{SEPARATOR}'


def parse_id(value):
    "From `CHALLENGE#abc` to `abc`. Ids may themselves contain the separator"
    _, _, entity_id = value.partition(SEPARATOR)
    return entity_id


def key(pk, sk):
    return {PARTITION_KEY: pk, SORT_KEY: sk}


def user_key(google_id, email):
    return key(build(Prefix.USER, google_id), build(Prefix.USER, email))


def challenge_key(name_or_id, creator_google_id):
    return key(build(Prefix.CHALLENGE, name_or_id), build(Prefix.USER, creator_google_id))


def acceptance_key(user_id, challenge_id):
    return key(build(Prefix.USER, user_id), build(Prefix.CHALLENGE, challenge_id))


def solution_key(solution_id, challenge_id):
    return key(build(Prefix.SOLUTION, solution_id), build(Prefix.CHALLENGE, challenge_id))


def comment_key(comment_id, solution_id):
    return key(build(Prefix.COMMENT, comment_id), build(Prefix.SOLUTION, solution_id))
