import time
from contextlib import contextmanager
from functools import wraps

from .utils import verbose_print

stack = list()


def indent():
    return '| ' * len(stack)


def push():
    stack.append(time.time())


def pop():
    return stack.pop()


def msg(message, started):
    verbose_print(indent() + message.format(time=time.time() - started))


def running_time_decorator(fn):
    @wraps(fn)
    def wrapped(*p, **k):
        push()
        try:
            return fn(*p, **k)
        finally:
            msg("Function " + fn.__name__ + " (" + fn.__module__ +
                ") took {time:.2f} seconds.", pop())
    return wrapped


@contextmanager
def running_time(text):
    push()
    try:
        yield
    finally:
        msg(text + " took {time:.2f} seconds.", pop())
