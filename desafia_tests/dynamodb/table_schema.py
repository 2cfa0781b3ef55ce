# The schema of the DESAFIA_AI table
# This should be kept in sync with the table as it is provisioned


main_table_schema = {
    'KeySchema': [
        {'AttributeName': 'PK', 'KeyType': 'HASH'},
        {'AttributeName': 'SK', 'KeyType': 'RANGE'},
    ],
    'AttributeDefinitions': [
        {'AttributeName': 'PK', 'AttributeType': 'S'},
        {'AttributeName': 'SK', 'AttributeType': 'S'},
    ],
    'BillingMode': 'PAY_PER_REQUEST',
}
