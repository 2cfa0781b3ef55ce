from .exceptions import Validation

INTERACTION_KINDS = ('SOLUTION', 'COMMENT')


def validate_required(arguments, *names):
    for name in names:
        value = arguments.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise Validation(f'`{name}` is required')
    return True


def validate_page(page):
    if page is not None and page < 0:
        raise Validation('page should be greater than or equal to 0')
    return True


def validate_limit(limit):
    if limit is not None and limit < 1:
        raise Validation('limit should be greater than or equal to 1')
    return True


def validate_interaction_kind(kind):
    if kind not in INTERACTION_KINDS:
        raise Validation(f'kind should be one of {", ".join(INTERACTION_KINDS)}')
    return True
