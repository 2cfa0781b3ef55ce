import pytest

from desafia.handlers.appsync.exceptions import Validation
from desafia.handlers.appsync.validation import (
    validate_interaction_kind,
    validate_limit,
    validate_page,
    validate_required,
)


def test_validate_required():
    assert validate_required({'id': 'cid', 'name': 'x'}, 'id', 'name')
    with pytest.raises(Validation, match='`id` is required'):
        validate_required({}, 'id')
    with pytest.raises(Validation, match='`id` is required'):
        validate_required({'id': None}, 'id')
    with pytest.raises(Validation, match='`message` is required'):
        validate_required({'message': '   '}, 'message')


def test_validate_page():
    assert validate_page(None)
    assert validate_page(0)
    assert validate_page(3)
    with pytest.raises(Validation, match='page'):
        validate_page(-1)


def test_validate_limit():
    assert validate_limit(None)
    assert validate_limit(1)
    with pytest.raises(Validation, match='limit'):
        validate_limit(0)


def test_validate_interaction_kind():
    assert validate_interaction_kind('SOLUTION')
    assert validate_interaction_kind('COMMENT')
    with pytest.raises(Validation, match='SOLUTION, COMMENT'):
        validate_interaction_kind('CHALLENGE')
