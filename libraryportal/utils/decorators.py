from functools import wraps


def transactional(fn):
    """
    Runs a service method as one unit of work: a single commit at the end,
    rollback on any exception. The service must expose ``self.session``.
    """
    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        try:
            result = fn(self, *args, **kwargs)
            self.session.commit()
            return result
        except Exception:
            self.session.rollback()
            raise
    return wrapper
