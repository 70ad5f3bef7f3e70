"""Iterators and callbacks for checking how far an operation pulls from its input."""


class Bang(Exception):
    """Raised by test helpers that must never be reached"""
    pass


def temperamental_iter(iterable):
    """Yield everything from iterable, then raise instead of finishing"""
    yield from iterable
    raise Bang("Pulled past the end")


def explode(*args):
    """A callback that must never be called"""
    raise Bang(f"Callback called with {args}")


def alph(n):
    """Iterator over the first n lowercase letters"""
    return iter("abcdefghijklmnopqrstuvwxyz"[:n])


def num(n):
    """Generator of 0 .. n-1"""
    for i in range(n):
        yield i


class Foo:
    """Value object compared with equals() rather than =="""
    def __init__(self, value):
        self.value = value

    def equals(self, other):
        return isinstance(other, Foo) and self.value == other.value


def to_objects(values):
    return [Foo(v) for v in values]


def unwrap(objects):
    return [o.value for o in objects]
