class ClientException(Exception):
    "Any error reported back to the graphql client"

    error_type = 'ClientError'

    def __init__(self, msg, info=None):
        self.msg = msg
        self.info = info
        super().__init__()

    def __str__(self):
        return f'{self.error_type}: {self.msg}'

    def serialize(self):
        return {
            'type': self.error_type,
            'message': str(self),
            'info': self.info,
        }


class Unauthenticated(ClientException):
    "The caller's token was missing or rejected by the identity provider"

    error_type = 'Unauthenticated'


class NotFound(ClientException):
    error_type = 'NotFound'


class Validation(ClientException):
    "The arguments don't make sense, or conflict with what is stored"

    error_type = 'Validation'


class StoreUnavailable(ClientException):
    error_type = 'StoreUnavailable'
