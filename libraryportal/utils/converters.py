from werkzeug.routing import IntegerConverter

# largest value a signed 64-bit INTEGER column holds
MAX_ID = 2 ** 63 - 1


class IdConverter(IntegerConverter):
    """Unsigned integer bounded to the id column range; larger values do not match the route."""

    def __init__(self, map, *args, **kwargs):
        kwargs["max"] = MAX_ID
        super().__init__(map, *args, **kwargs)
