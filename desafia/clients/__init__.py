__all__ = [
    'DynamoClient',
    'GoogleClient',
]
from .dynamo import DynamoClient
from .google import GoogleClient
