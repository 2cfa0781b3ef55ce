import json
import logging
import os

# lambda's own default is WARNING, dispatch lifts it for the one line per request it always wants
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


def handler_logging(*args, event_to_extras=None):
    """
    Handler decorator that makes every log record of the invocation a json CloudWatch line.
    Works bare or with a function that picks the extras to attach out of the event:

        @handler_logging
        def my_handler(event, context):

        @handler_logging(event_to_extras=some_func)
        def my_handler(event, context):
    """

    def decorate(func):
        def wrapper(event, context):
            logger = logging.getLogger()
            logger.setLevel(LOG_LEVEL)
            formatter = CloudWatchFormatter(extras=event_to_extras(event) if event_to_extras else None)
            # the lambda runtime has already attached its handler to the root logger
            for log_handler in logger.handlers:
                log_handler.setFormatter(formatter)

            try:
                return func(event, context)
            except Exception as err:
                # our json record first, the runtime then logs the traceback that trips the Errors metric
                logger.exception(str(err))
                raise

        return wrapper

    return decorate(args[0]) if args else decorate


class LogLevelContext:
    "Temporarily run `logger` at `level`"

    def __init__(self, logger, level):
        self.logger = logger
        self.level = level
        self.previous_level = None

    def __enter__(self):
        self.previous_level = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc_value, traceback):
        self.logger.setLevel(self.previous_level)


class CloudWatchFormatter(logging.Formatter):
    "One json object per record, prefixed with the level and lambda request id"

    lambda_root = '/var/task/'

    def __init__(self, extras=None, **kwargs):
        self.extras = extras or {}
        super().__init__(**kwargs)

    def source_file(self, record):
        path = record.pathname
        return path[len(self.lambda_root) :] if path.startswith(self.lambda_root) else path

    def format(self, record):
        # set by the lambda runtime on every record, absent when running locally
        request_id = getattr(record, 'aws_request_id', None)

        # `message` leads so CloudWatch's summary column shows it
        data = {
            'message': record.getMessage(),
            'level': record.levelname,
            'requestId': request_id,
            **self.extras,
            'sourceFile': self.source_file(record),
            'sourceLine': record.lineno,
        }
        if record.exc_info:
            record.exc_text = record.exc_text or self.formatException(record.exc_info)
            data['exceptionInfo'] = record.exc_text.splitlines()
        if record.stack_info:
            data['stackInfo'] = record.stack_info.splitlines()

        return f'{record.levelname} RequestId: {request_id} Data: {json.dumps(data, default=str)}'
