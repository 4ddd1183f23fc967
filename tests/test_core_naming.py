from hypothesis import given
from hypothesis import strategies as st

from lazybox.core.naming import camelize, decamelize


def test_camelize():
    assert camelize("foo_bar") == "FooBar"
    assert camelize("foo") == "Foo"
    assert camelize("db_connection_pool") == "DbConnectionPool"


def test_decamelize():
    assert decamelize("FooBar") == "foo_bar"
    assert decamelize("Foo") == "foo"
    assert decamelize("fooBar") == "foo_bar"


def test_decamelize_has_no_leading_underscore():
    assert not decamelize("Database").startswith("_")


snake_ids = st.lists(
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8),
    min_size=1,
    max_size=4,
).map("_".join)


@given(snake_ids)
def test_decamelize_inverts_camelize(snake_id: str):
    camel = camelize(snake_id)
    assert "_" not in camel
    assert decamelize(camel) == snake_id
