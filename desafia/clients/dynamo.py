import logging
import os

import boto3

from desafia import keys

DYNAMO_TABLE = os.environ.get('DYNAMO_TABLE', 'DESAFIA_AI')
AWS_REGION = os.environ.get('AWS_REGION', 'sa-east-1')
ACCESS_KEY_ID = os.environ.get('ACCESS_KEY_ID')
SECRET_ACCESS_KEY = os.environ.get('SECRET_ACCESS_KEY')

logger = logging.getLogger()


def and_condition(query_kwargs, condition):
    "Guard the write with `condition`, on top of whatever condition the caller already set"
    if 'ConditionExpression' in query_kwargs:
        condition = f'{condition} and ({query_kwargs["ConditionExpression"]})'
    query_kwargs['ConditionExpression'] = condition
    return query_kwargs


class DynamoClient:
    def __init__(
        self,
        table_name=DYNAMO_TABLE,
        region_name=AWS_REGION,
        access_key_id=ACCESS_KEY_ID,
        secret_access_key=SECRET_ACCESS_KEY,
        create_table_schema=None,
    ):
        """
        Thin wrapper around the single desafia table.

        If create_table_schema is not None the table is created on-the-fly,
        which is what the test suite does against moto.
        Explicit credentials are optional, boto3's default chain is used otherwise.
        """
        assert table_name, "Table name is required"
        self.table_name = table_name

        session_kwargs = {'region_name': region_name}
        if access_key_id and secret_access_key:
            session_kwargs.update(aws_access_key_id=access_key_id, aws_secret_access_key=secret_access_key)
        session = boto3.session.Session(**session_kwargs)

        dynamodb = session.resource('dynamodb')
        if create_table_schema:
            self.table = dynamodb.create_table(TableName=table_name, **create_table_schema)
        else:
            self.table = dynamodb.Table(table_name)

        # modeled errors such as ConditionalCheckFailedException live on the low-level client
        self.exceptions = session.client('dynamodb').exceptions

    def add_item(self, query_kwargs):
        "Create an item, failing if one with the same key is already there. Returns the item"
        and_condition(query_kwargs, f'attribute_not_exists({keys.PARTITION_KEY})')
        self.table.put_item(**query_kwargs)
        return query_kwargs['Item']

    def put_item(self, item):
        "Create or overwrite an item. Returns the item it replaced, or None if there was none"
        return self.table.put_item(Item=item, ReturnValues='ALL_OLD').get('Attributes') or None

    def get_item(self, key, **kwargs):
        return self.table.get_item(Key=key, **kwargs).get('Item')

    def update_item(self, query_kwargs, failure_warning=None):
        """
        Update an existing item and return it as it is after the update.
        With `failure_warning` set, a failed condition is logged at WARNING and None returned instead of raising.
        """
        and_condition(query_kwargs, f'attribute_exists({keys.PARTITION_KEY})')
        query_kwargs['ReturnValues'] = 'ALL_NEW'
        try:
            return self.table.update_item(**query_kwargs).get('Attributes')
        except self.exceptions.ConditionalCheckFailedException:
            if failure_warning is None:
                raise
            logger.warning(failure_warning)
            return None

    def set_attributes(self, key, **attributes):
        "Upsert: set the attributes on the item at `key`, creating the item if need be"
        assert attributes, 'Must provide at least one attribute to set'
        names = sorted(attributes)
        resp = self.table.update_item(
            Key=key,
            UpdateExpression='SET ' + ', '.join(f'#{name} = :{name}' for name in names),
            ExpressionAttributeNames={f'#{name}': name for name in names},
            ExpressionAttributeValues={f':{name}': attributes[name] for name in names},
            ReturnValues='ALL_NEW',
        )
        return resp.get('Attributes')

    def increment_count(self, key, attribute_name):
        "Best effort, a missing item is logged and skipped"
        query_kwargs = {
            'Key': key,
            'UpdateExpression': 'ADD #count :one',
            'ExpressionAttributeNames': {'#count': attribute_name},
            'ExpressionAttributeValues': {':one': 1},
        }
        return self.update_item(query_kwargs, failure_warning=f'Failed to increment {attribute_name} for key `{key}`')

    def decrement_count(self, key, attribute_name):
        "Best effort, and the counter never goes below zero"
        query_kwargs = {
            'Key': key,
            'UpdateExpression': 'ADD #count :neg_one',
            'ConditionExpression': '#count > :zero',
            'ExpressionAttributeNames': {'#count': attribute_name},
            'ExpressionAttributeValues': {':neg_one': -1, ':zero': 0},
        }
        return self.update_item(query_kwargs, failure_warning=f'Failed to decrement {attribute_name} for key `{key}`')

    def delete_item(self, key):
        "Delete the item, returning it, or None if there was nothing to delete"
        return self.table.delete_item(Key=key, ReturnValues='ALL_OLD').get('Attributes') or None

    def query_head(self, query_kwargs):
        "First item of the query, or None. Filters are applied after Limit, so they are not allowed here"
        assert 'FilterExpression' not in query_kwargs
        items = self.table.query(**query_kwargs, Limit=1)['Items']
        return items[0] if items else None

    def generate_all_scan(self, scan_kwargs):
        "Every item the scan matches, following LastEvaluatedKey across pages"
        page_kwargs = dict(scan_kwargs)
        while True:
            resp = self.table.scan(**page_kwargs)
            yield from resp['Items']
            if 'LastEvaluatedKey' not in resp:
                break
            page_kwargs['ExclusiveStartKey'] = resp['LastEvaluatedKey']
