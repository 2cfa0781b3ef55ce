import json
from decimal import Decimal

import pytest

from desafia.utils import DecimalJsonEncoder


def test_decimals():
    item = {'likes': {'count': Decimal('2'), 'users': {'gidA': Decimal('1')}}, 'score': Decimal('0.25')}
    assert json.loads(json.dumps(item, cls=DecimalJsonEncoder)) == {
        'likes': {'count': 2, 'users': {'gidA': 1}},
        'score': 0.25,
    }
    assert json.dumps(Decimal('10.0'), cls=DecimalJsonEncoder) == '10'


def test_sets():
    assert json.dumps({'tags': {'python', 'c'}}, cls=DecimalJsonEncoder) == '{"tags": ["c", "python"]}'


def test_anything_else_still_fails():
    with pytest.raises(TypeError):
        json.dumps(object(), cls=DecimalJsonEncoder)
