import json
from decimal import Decimal


class DecimalJsonEncoder(json.JSONEncoder):
    "Json for what boto3 hands back: numbers come as Decimal and string/number sets as python sets"

    def default(self, obj):
        if isinstance(obj, Decimal):
            # whole numbers stay ints, anything else loses precision as a float
            return int(obj) if obj == obj.to_integral_value() else float(obj)
        if isinstance(obj, (set, frozenset)):
            return sorted(obj)
        return super().default(obj)
