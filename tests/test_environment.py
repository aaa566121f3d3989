import pytest

from lox.environment import Environment
from lox.errors import LoxRuntimeError
from lox.tokens import Token, TokenKind


def name(text):
    return Token(TokenKind.IDENTIFIER, text, None, 1)


def test_define_and_get():
    env = Environment()
    env.define('a', 1.0)
    assert env.get(name('a')) == 1.0


def test_redefine_replaces_silently():
    env = Environment()
    env.define('a', 1.0)
    env.define('a', 'two')
    assert env.get(name('a')) == 'two'


def test_lookup_walks_outward():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(enclosing=Environment(enclosing=outer))
    assert inner.get(name('a')) == 1.0
    assert inner.depth == 2
    assert outer.depth == 0


def test_define_shadows_without_touching_enclosing():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(enclosing=outer)
    inner.define('a', 2.0)
    assert inner.get(name('a')) == 2.0
    assert outer.get(name('a')) == 1.0


def test_assign_updates_nearest_declaring_scope():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(enclosing=outer)
    inner.assign(name('a'), 5.0)
    assert outer.get(name('a')) == 5.0
    assert 'a' not in inner.values


def test_assign_undeclared_raises_and_does_not_declare():
    env = Environment()
    with pytest.raises(LoxRuntimeError) as excinfo:
        env.assign(name('missing'), 1.0)
    assert excinfo.value.message == "Undefined variable 'missing'."
    assert excinfo.value.token.lexeme == 'missing'
    assert 'missing' not in env.values


def test_get_undeclared_raises():
    with pytest.raises(LoxRuntimeError, match="Undefined variable 'x'."):
        Environment(enclosing=Environment()).get(name('x'))
