"AppSync GraphQL data source"
import json
import logging
import os

from botocore.exceptions import BotoCoreError, ClientError

from desafia.logging import LogLevelContext, handler_logging
from desafia.utils import DecimalJsonEncoder

from . import routes
from .exceptions import ClientException, StoreUnavailable

logger = logging.getLogger()

# comma separated modules, the test suite sets it empty to turn off auto-discovery of routes
route_paths = os.environ.get('APPSYNC_ROUTE_AUTODISCOVERY_PATH', 'desafia.handlers.appsync.handlers')
if route_paths:
    routes.discover(*route_paths.split(','))


def get_access_token(event):
    "The caller's google access token, from the authorization header"
    headers = (event.get('request') or {}).get('headers') or {}
    # appsync lower-cases header names, but not every caller goes through appsync
    token = headers.get('authorization') or headers.get('Authorization')
    if token and token.lower().startswith('bearer '):
        token = token[len('bearer ') :]
    return token or None


def get_gql_details(event):
    return {
        'arguments': event.get('arguments') or {},
        'field': event['info']['parentTypeName'] + '.' + event['info']['fieldName'],
        'source': event.get('source') or {},
    }


def event_to_extras(event):
    return {'gql': get_gql_details(event)}


@handler_logging(event_to_extras=event_to_extras)
def dispatch(event, context):
    "Top-level dispatch of appsync event to the correct handler"
    gql = get_gql_details(event)

    field = gql['field']
    handler = routes.get_handler(field)
    if not handler:
        # should not be able to get here
        msg = f'No handler for field `{field}` found'
        logger.exception(msg)
        raise Exception(msg)

    # we suppress INFO logging, except this message
    with LogLevelContext(logger, logging.INFO):
        logger.info(f'Handling AppSync GQL resolution of `{field}`')

    try:
        data = handler(
            get_access_token(event),
            gql['arguments'],
            source=gql['source'],
            context=context,
            event=event,
        )
    except ClientException as err:
        logger.warning(str(err))
        return {'error': err.serialize()}
    except (BotoCoreError, ClientError) as err:
        logger.exception(str(err))
        return {'error': StoreUnavailable('The data store could not complete the request').serialize()}

    # the lambda runtime can't serialize the decimals boto3 returns
    return {'data': json.loads(json.dumps(data, cls=DecimalJsonEncoder))}
