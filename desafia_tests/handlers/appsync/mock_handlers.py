from desafia.handlers.appsync import routes


@routes.register('Type.field1')
def handler_1():
    pass


@routes.register('Type.field2')
def handler_2():
    pass
